# loadpath/transfer/channel.py
"""Каналы передачи векторов между процессами/хранилищами.

Кодек (``transfer.codec``) знает о канале только три вещи:

* ``is_datastore`` – *долговременное* ли это хранилище (база данных,
  каталог на диске) или *транзитный* канал (сокет, очередь), который ничего
  не помнит между вызовами;
* ``get_db_tag()`` – выдать новый уникальный идентификатор записи;
* ``send_vector`` / ``recv_vector`` – записать/прочитать вектор чисел по
  ключу ``(db_tag, commit_tag)``.

При ошибке канал выбрасывает :class:`~loadpath.errors.ChannelError`.
Здесь же лежат три эталонные реализации: память, каталог ``.npy`` и
транзитная «труба».
"""

from __future__ import annotations

import logging
import os
import re
from collections import Counter, defaultdict, deque
from pathlib import Path
from typing import Deque, Dict, Protocol, Sequence, Tuple

import numpy as np

from ..constants import FIRST_PAYLOAD_TAG
from ..errors import ChannelError

logger = logging.getLogger(__name__)


class Channel(Protocol):
    """Bidirectional vector channel as seen by the transfer codec."""

    is_datastore: bool

    def get_db_tag(self) -> int:
        ...

    def send_vector(self, db_tag: int, commit_tag: int, data: Sequence[float] | np.ndarray) -> None:
        ...

    def recv_vector(self, db_tag: int, commit_tag: int, size: int) -> np.ndarray:
        ...


def _check_size(arr: np.ndarray, size: int, db_tag: int, commit_tag: int) -> np.ndarray:
    if arr.size != size:
        raise ChannelError(
            f"vector ({db_tag}, {commit_tag}) has {arr.size} values, expected {size}"
        )
    return arr


# ---------------------------------------------------------------------------
# 1) Долговременное хранилище в памяти
# ---------------------------------------------------------------------------


class MemoryDatastore:
    """Durable store kept in a dict; survives any number of send/recv calls."""

    is_datastore = True

    def __init__(self) -> None:
        self._vectors: Dict[Tuple[int, int], np.ndarray] = {}
        self._next_tag = FIRST_PAYLOAD_TAG
        self.writes: Counter[int] = Counter()  # число записей по db_tag

    def get_db_tag(self) -> int:
        tag = self._next_tag
        self._next_tag += 1
        return tag

    def send_vector(self, db_tag, commit_tag, data) -> None:
        self._vectors[(db_tag, commit_tag)] = np.array(data, dtype=np.float64, copy=True).reshape(-1)
        self.writes[db_tag] += 1

    def recv_vector(self, db_tag, commit_tag, size) -> np.ndarray:
        try:
            arr = self._vectors[(db_tag, commit_tag)]
        except KeyError:
            raise ChannelError(f"no vector stored for ({db_tag}, {commit_tag})") from None
        return _check_size(arr.copy(), size, db_tag, commit_tag)

    def __contains__(self, key: Tuple[int, int]) -> bool:
        return key in self._vectors


# ---------------------------------------------------------------------------
# 2) Долговременное хранилище в каталоге (один .npy на запись)
# ---------------------------------------------------------------------------


class NpyDatastore:
    """Durable store on disk: ``<directory>/v<db_tag>_<commit_tag>.npy``.

    Переживает перезапуск процесса; новый экземпляр продолжает выдачу
    ``db_tag`` после максимального уже записанного.
    """

    is_datastore = True
    _NAME = re.compile(r"^v(-?\d+)_(-?\d+)\.npy$")

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        used = [
            int(m.group(1))
            for m in (self._NAME.match(p.name) for p in self.directory.iterdir())
            if m
        ]
        self._next_tag = max([FIRST_PAYLOAD_TAG - 1, *used]) + 1

    def _path(self, db_tag: int, commit_tag: int) -> Path:
        return self.directory / f"v{db_tag}_{commit_tag}.npy"

    def get_db_tag(self) -> int:
        tag = self._next_tag
        self._next_tag += 1
        return tag

    def send_vector(self, db_tag, commit_tag, data) -> None:
        path = self._path(db_tag, commit_tag)
        try:
            np.save(path, np.asarray(data, dtype=np.float64).reshape(-1), allow_pickle=False)
        except OSError as exc:
            raise ChannelError(f"could not write {path}: {exc}") from exc
        logger.debug("wrote %s", path.name)

    def recv_vector(self, db_tag, commit_tag, size) -> np.ndarray:
        path = self._path(db_tag, commit_tag)
        try:
            arr = np.load(path, allow_pickle=False)
        except (OSError, ValueError) as exc:
            raise ChannelError(f"could not read {path}: {exc}") from exc
        return _check_size(np.asarray(arr, dtype=np.float64).reshape(-1), size, db_tag, commit_tag)


# ---------------------------------------------------------------------------
# 3) Транзитный канал («труба» между процессами)
# ---------------------------------------------------------------------------


class MemoryPipe:
    """Transient channel: FIFO mailbox per ``db_tag``, ``commit_tag`` is ignored.

    Ничего не хранит: каждый вектор читается ровно один раз.
    """

    is_datastore = False

    def __init__(self) -> None:
        self._mailboxes: Dict[int, Deque[np.ndarray]] = defaultdict(deque)
        self._next_tag = FIRST_PAYLOAD_TAG
        self.writes: Counter[int] = Counter()

    def get_db_tag(self) -> int:
        tag = self._next_tag
        self._next_tag += 1
        return tag

    def send_vector(self, db_tag, commit_tag, data) -> None:
        self._mailboxes[db_tag].append(np.array(data, dtype=np.float64, copy=True).reshape(-1))
        self.writes[db_tag] += 1

    def recv_vector(self, db_tag, commit_tag, size) -> np.ndarray:
        box = self._mailboxes.get(db_tag)
        if not box:
            raise ChannelError(f"nothing pending for db_tag {db_tag}")
        return _check_size(box.popleft(), size, db_tag, commit_tag)

    def pending(self, db_tag: int) -> int:
        return len(self._mailboxes.get(db_tag, ()))
