# loadpath/domain/settings.py

import math
from dataclasses import dataclass

from .path_store import Extrapolation


def check_time_increment(value: float) -> None:
    """Шаг по времени – делитель, поэтому только конечный и > 0."""
    if not math.isfinite(value) or value <= 0.0:
        raise ValueError(f"time_increment must be a positive finite number, got {value!r}")


@dataclass(slots=True)
class PathSettings:
    """Caller-supplied scalars of a path series."""
    time_increment: float  # шаг по псевдовремени между отсчётами
    factor: float = 1.0  # множитель нагрузки
    use_last: bool = False  # держать последнее значение за концом ряда
    prepend_zero: bool = False  # добавить нулевой отсчёт в начало
    start_time: float = 0.0  # момент первого отсчёта

    def __post_init__(self) -> None:
        check_time_increment(self.time_increment)

    @property
    def extrapolation(self) -> Extrapolation:
        return Extrapolation.from_use_last(self.use_last)
