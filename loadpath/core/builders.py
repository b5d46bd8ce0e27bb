# loadpath/core/builders.py
"""Построение данных ряда из последовательности или текстового источника.

Оба пути возвращают либо ``PopulatedPath``, либо ``EMPTY`` – частично
заполненного состояния не бывает.  Ошибки построения (файл не открылся,
в нём нет чисел, не хватило памяти) наружу **не** выбрасываются: ряд
остаётся пустым, а в лог уходит предупреждение.  Все запросы к такому
ряду затем возвращают 0.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, List, TextIO, Union

import numpy as np

from ..domain.path_store import EMPTY, PathData, PopulatedPath

logger = logging.getLogger(__name__)

TextSource = Union[str, "os.PathLike[str]", TextIO]


# ---------------------------------------------------------------------------
# Из явной последовательности
# ---------------------------------------------------------------------------


def from_sequence(
    values: Iterable[float],
    prepend_zero: bool = False,
    log: logging.Logger | None = None,
) -> PathData:
    """Скопировать *values* (при необходимости с нулём в начале)."""
    log = log or logger
    try:
        src = np.array(list(values), dtype=np.float64).reshape(-1)
        if prepend_zero:
            arr = np.zeros(src.size + 1, dtype=np.float64)
            arr[1:] = src  # исходные отсчёты сдвигаются на одну позицию
        else:
            arr = src.copy()
    except MemoryError:
        log.error("ran out of memory constructing a path from a sequence")
        return EMPTY

    if arr.size == 0:
        log.warning("cannot construct a path from an empty sequence")
        return EMPTY
    return PopulatedPath(arr)


# ---------------------------------------------------------------------------
# Из текстового ресурса
# ---------------------------------------------------------------------------


def iter_numbers(stream: TextIO) -> Iterator[float]:
    """Числа через пробелы/переводы строк до первого нечислового токена."""
    for line in stream:
        for token in line.split():
            try:
                yield float(token)
            except ValueError:
                return


def _read_numbers(source: TextSource) -> List[float]:
    if hasattr(source, "read"):
        return list(iter_numbers(source))  # type: ignore[arg-type]
    with open(source, "r", encoding="utf-8") as fh:
        return list(iter_numbers(fh))


def from_text(
    source: TextSource,
    prepend_zero: bool = False,
    log: logging.Logger | None = None,
) -> PathData:
    """Прочитать ряд из файла (или открытого потока) с числами через пробелы.

    Parameters
    ----------
    source : str | os.PathLike | TextIO
        Путь к файлу или уже открытый текстовый поток.
    prepend_zero : bool
        Оставить нулевой отсчёт в позиции 0, сдвинув данные файла.
    """
    log = log or logger
    try:
        numbers = _read_numbers(source)
    except OSError as exc:
        log.warning("could not open file %s: %s", source, exc)
        return EMPTY
    except UnicodeDecodeError as exc:
        log.warning("could not read file %s: %s", source, exc)
        return EMPTY

    if not numbers:
        log.warning("no data points found in %s", source)
        return EMPTY

    size = len(numbers) + (1 if prepend_zero else 0)
    try:
        arr = np.zeros(size, dtype=np.float64)
    except MemoryError:
        log.error("ran out of memory constructing a path of %d samples", size)
        return EMPTY

    start = 1 if prepend_zero else 0
    arr[start:] = numbers
    log.debug("Read %d data points from %s", len(numbers), source)
    return PopulatedPath(arr)
