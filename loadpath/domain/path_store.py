# loadpath/domain/path_store.py
"""Хранилище дискретной траектории нагрузки (load path).

Ряд задаётся значениями, снятыми с **постоянным** шагом по
псевдовремени:

* **values** – амплитуды; отсчёт *i* соответствует моменту
  ``start_time + i * time_increment``;
* **factor** – множитель, применяемый к любому интерполированному
  значению;
* **start_time** – до этого момента ряд даёт нулевой вклад;
* **extrapolation** – поведение после последнего отсчёта.

Наличие данных выражено явно через сумму типов
``PathData = EmptyPath | PopulatedPath``: пустой ряд (ошибка построения)
является полноценным состоянием, а не ``None``.  Массив значений после
построения помечается read‑only – содержимое не меняется до конца жизни
объекта, на этом держится кэширование при передаче.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

import numpy as np


class Extrapolation(Enum):
    """Что возвращать для моментов за последним отсчётом."""

    ZERO_BEYOND_END = 0
    HOLD_LAST = 1

    @property
    def flag(self) -> int:
        return self.value

    @classmethod
    def from_flag(cls, flag: float) -> "Extrapolation":
        # в заголовке флаг лежит как float; всё, кроме 1, – «ноль за концом»
        return cls.HOLD_LAST if int(flag) == 1 else cls.ZERO_BEYOND_END

    @classmethod
    def from_use_last(cls, use_last: bool) -> "Extrapolation":
        return cls.HOLD_LAST if use_last else cls.ZERO_BEYOND_END


@dataclass(frozen=True, slots=True)
class EmptyPath:
    """Ряд без данных (построение не удалось или ещё ничего не принято)."""

    @property
    def size(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class PopulatedPath:
    """Непустой неизменяемый массив отсчётов."""

    values: np.ndarray

    def __post_init__(self) -> None:
        arr = np.array(self.values, dtype=np.float64).reshape(-1)
        if arr.size == 0:
            raise ValueError("PopulatedPath requires at least one sample.")
        arr.setflags(write=False)
        object.__setattr__(self, "values", arr)

    @property
    def size(self) -> int:
        return int(self.values.size)


PathData = Union[EmptyPath, PopulatedPath]

EMPTY = EmptyPath()


@dataclass(slots=True)
class PathStore:
    """Скалярные параметры ряда + его данные."""

    factor: float
    time_increment: float
    start_time: float = 0.0
    extrapolation: Extrapolation = Extrapolation.ZERO_BEYOND_END
    data: PathData = field(default=EMPTY)

    @property
    def is_empty(self) -> bool:
        return isinstance(self.data, EmptyPath)

    @property
    def size(self) -> int:
        return self.data.size

    @property
    def samples(self) -> np.ndarray:
        """Read-only view of the samples (empty array for an empty store)."""
        if isinstance(self.data, PopulatedPath):
            return self.data.values
        return np.empty(0, dtype=np.float64)

    def copy(self) -> "PathStore":
        """Независимая копия: те же скаляры, собственный массив отсчётов."""
        data: PathData = EMPTY
        if isinstance(self.data, PopulatedPath):
            data = PopulatedPath(self.data.values.copy())
        return PathStore(
            factor=self.factor,
            time_increment=self.time_increment,
            start_time=self.start_time,
            extrapolation=self.extrapolation,
            data=data,
        )
