# loadpath/transfer/codec.py
"""Передача состояния ряда через канал (send/recv) с кэшированием данных.

Формат
------
Заголовок – вектор из 7 чисел в фиксированном порядке::

    [factor, time_increment, size | -1, payload_tag,
     first_durable_commit, extrapolation_flag (0|1), start_time]

За ним (не всегда) идёт сам массив отсчётов длиной ``size`` под ключом
``(payload_tag, commit_tag)``.

Правило кэширования
-------------------
Отсчёты неизменяемы после построения, поэтому в *долговременное*
хранилище они пишутся один раз – при первой отправке (её номер коммита
запоминается в ``first_durable_commit`` и больше не меняется).  Дальше в
хранилище уходит только обновлённый заголовок.  *Транзитный* канал ничего
не помнит, туда данные отправляются при каждом вызове.

Ошибки канала всегда пробрасываются вызывающему
(:class:`HeaderTransferError` / :class:`PayloadTransferError`), повторов
нет.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Union

import numpy as np

from ..constants import (
    EMPTY_SIZE,
    HEADER_SIZE,
    NO_COMMIT,
    RECV_FALLBACK_FACTOR,
    UNALLOCATED_TAG,
)
from ..domain.path_store import Extrapolation, PathStore, PopulatedPath
from ..errors import ChannelError, HeaderTransferError, PayloadTransferError
from .channel import Channel

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Состояние передачи (живёт вместе с рядом)
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class NotSent:
    """Ряд ещё ни разу не попадал в долговременное хранилище."""


@dataclass(frozen=True, slots=True)
class SentAt:
    """Ряд впервые записан в хранилище на коммите ``commit_tag``."""

    commit_tag: int


SendHistory = Union[NotSent, SentAt]

NOT_SENT = NotSent()


@dataclass(slots=True)
class TransferState:
    payload_tag: int = UNALLOCATED_TAG
    sent: SendHistory = field(default=NOT_SENT)

    @property
    def first_durable_commit(self) -> int:
        return self.sent.commit_tag if isinstance(self.sent, SentAt) else NO_COMMIT


# ---------------------------------------------------------------------------
# Заголовок
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TransferRecord:
    """On-the-wire header of a path series."""

    factor: float
    time_increment: float
    size: int  # EMPTY_SIZE для пустого ряда
    payload_tag: int
    first_durable_commit: int
    extrapolation_flag: int
    start_time: float

    @classmethod
    def of(cls, store: PathStore, state: TransferState) -> "TransferRecord":
        return cls(
            factor=store.factor,
            time_increment=store.time_increment,
            size=EMPTY_SIZE if store.is_empty else store.size,
            payload_tag=state.payload_tag,
            first_durable_commit=state.first_durable_commit,
            extrapolation_flag=store.extrapolation.flag,
            start_time=store.start_time,
        )

    def to_vector(self) -> np.ndarray:
        return np.array(
            [
                self.factor,
                self.time_increment,
                self.size,
                self.payload_tag,
                self.first_durable_commit,
                self.extrapolation_flag,
                self.start_time,
            ],
            dtype=np.float64,
        )

    @classmethod
    def from_vector(cls, data) -> "TransferRecord":
        vec = np.asarray(data, dtype=np.float64).reshape(-1)
        if vec.size != HEADER_SIZE:
            raise ValueError(f"header must have {HEADER_SIZE} fields, got {vec.size}")
        if not np.isfinite(vec[2:5]).all():
            raise ValueError(f"header integer fields must be finite, got {vec[2:5].tolist()}")
        return cls(
            factor=float(vec[0]),
            time_increment=float(vec[1]),
            size=int(vec[2]),
            payload_tag=int(vec[3]),
            first_durable_commit=int(vec[4]),
            extrapolation_flag=1 if vec[5] == 1 else 0,
            start_time=float(vec[6]),
        )


# ---------------------------------------------------------------------------
# Отправка
# ---------------------------------------------------------------------------


def send_path(
    store: PathStore,
    state: TransferState,
    db_tag: int,
    commit_tag: int,
    channel: Channel,
    log: logging.Logger | None = None,
) -> None:
    """Записать заголовок и (если нужно) отсчёты ряда в *channel*.

    Raises
    ------
    HeaderTransferError
        Заголовок не записан; дальше ничего не отправляется.
    PayloadTransferError
        Заголовок записан, а отсчёты – нет.
    """
    log = log or logger
    durable = bool(channel.is_datastore)
    previous = state.sent

    # payload_tag выделяется один раз, при первой отправке непустого ряда
    if not store.is_empty and state.payload_tag == UNALLOCATED_TAG:
        try:
            state.payload_tag = channel.get_db_tag()
        except ChannelError as exc:
            log.error("channel failed to allocate a payload tag: %s", exc)
            raise HeaderTransferError("channel failed to allocate a payload tag") from exc

    if durable and isinstance(state.sent, NotSent):
        state.sent = SentAt(commit_tag)

    record = TransferRecord.of(store, state)
    try:
        channel.send_vector(db_tag, commit_tag, record.to_vector())
    except ChannelError as exc:
        state.sent = previous
        log.error("channel failed to send the header of db_tag %d: %s", db_tag, exc)
        raise HeaderTransferError(f"channel failed to send the header of db_tag {db_tag}") from exc

    if state.first_durable_commit != commit_tag and durable:
        log.debug(
            "payload of db_tag %d already stored at commit %d, skipping",
            db_tag,
            state.first_durable_commit,
        )
        return

    if isinstance(store.data, PopulatedPath):
        try:
            channel.send_vector(state.payload_tag, commit_tag, store.data.values)
        except ChannelError as exc:
            state.sent = previous  # иначе следующий коммит решит, что данные уже в хранилище
            log.error("channel failed to send the path vector of db_tag %d: %s", db_tag, exc)
            raise PayloadTransferError(
                f"channel failed to send the path vector of db_tag {db_tag}"
            ) from exc


# ---------------------------------------------------------------------------
# Приём
# ---------------------------------------------------------------------------


def recv_path(
    store: PathStore,
    state: TransferState,
    db_tag: int,
    commit_tag: int,
    channel: Channel,
    log: logging.Logger | None = None,
) -> None:
    """Прочитать заголовок и (один раз) отсчёты ряда из *channel*.

    Отсчёты читаются только если у *store* их ещё нет: после первого
    приёма они неизменны.  Частично заполненный массив наружу не
    попадает – при ошибке ряд остаётся пустым.
    """
    log = log or logger

    try:
        record = TransferRecord.from_vector(channel.recv_vector(db_tag, commit_tag, HEADER_SIZE))
    except (ChannelError, ValueError) as exc:
        store.factor = RECV_FALLBACK_FACTOR
        log.error("channel failed to receive the header of db_tag %d: %s", db_tag, exc)
        raise HeaderTransferError(f"channel failed to receive the header of db_tag {db_tag}") from exc

    if not math.isfinite(record.time_increment) or record.time_increment <= 0.0:
        store.factor = RECV_FALLBACK_FACTOR
        log.error("received header of db_tag %d has time_increment %r", db_tag, record.time_increment)
        raise HeaderTransferError(
            f"received header of db_tag {db_tag} has a non-positive time increment"
        )

    store.factor = record.factor
    store.time_increment = record.time_increment
    store.start_time = record.start_time
    store.extrapolation = Extrapolation.from_flag(record.extrapolation_flag)
    state.payload_tag = record.payload_tag
    state.sent = (
        NOT_SENT if record.first_durable_commit == NO_COMMIT else SentAt(record.first_durable_commit)
    )

    if not store.is_empty or record.size <= 0:
        return

    try:
        values = channel.recv_vector(state.payload_tag, state.first_durable_commit, record.size)
        data = PopulatedPath(values)
    except MemoryError as exc:
        log.error("ran out of memory receiving a path of %d samples", record.size)
        raise PayloadTransferError(f"ran out of memory receiving {record.size} samples") from exc
    except ChannelError as exc:
        log.error("channel failed to receive the path vector of db_tag %d: %s", db_tag, exc)
        raise PayloadTransferError(
            f"channel failed to receive the path vector of db_tag {db_tag}"
        ) from exc

    store.data = data
