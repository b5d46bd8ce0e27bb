# loadpath/series/path_series.py
"""Ряд нагрузки, заданный дискретной траекторией (load path).

Множитель в момент *t* получается линейной интерполяцией между
соседними отсчётами траектории, умноженной на постоянный ``factor``.
Сам алгоритм живёт в :mod:`loadpath.core.interpolation`, построение –
в :mod:`loadpath.core.builders`, передача – в
:mod:`loadpath.transfer.codec`; класс лишь связывает их и хранит
состояние одного ряда.

Один экземпляр рассчитан на одну временную шкалу (один цикл шагов по
псевдовремени); блокировок внутри нет.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, TextIO

import numpy as np

from . import TimeSeries
from ..core import builders
from ..core.interpolation import Interpolator, duration, path_factor, peak_factor
from ..domain.path_store import EMPTY, Extrapolation, PathData, PathStore
from ..domain.settings import PathSettings, check_time_increment
from ..transfer.codec import TransferState, recv_path, send_path

logger = logging.getLogger(__name__)


class PathSeries(TimeSeries):
    """Load path time series (одна реализация из семейства TimeSeries)."""

    # ------------------------------------------------------------------
    # Конструкторы
    # ------------------------------------------------------------------

    def __init__(
        self,
        tag: int,
        values: Iterable[float],
        time_increment: float,
        factor: float = 1.0,
        use_last: bool = False,
        prepend_zero: bool = False,
        start_time: float = 0.0,
        db_tag: int = 0,
        interp: Interpolator = path_factor,
        log: logging.Logger | None = None,
    ) -> None:
        check_time_increment(time_increment)
        log = log or logger
        data = builders.from_sequence(values, prepend_zero=prepend_zero, log=log)
        self._init(tag, db_tag, data, time_increment, factor, use_last, start_time, interp, log)

    def _init(self, tag, db_tag, data, time_increment, factor, use_last, start_time, interp, log):
        super().__init__(tag, db_tag)
        self.store = PathStore(
            factor=factor,
            time_increment=time_increment,
            start_time=start_time,
            extrapolation=Extrapolation.from_use_last(use_last),
            data=data,
        )
        self.transfer = TransferState()
        self.interp = interp
        self.log = log

    @classmethod
    def _from_data(
        cls,
        tag: int,
        data: PathData,
        time_increment: float,
        factor: float = 1.0,
        use_last: bool = False,
        start_time: float = 0.0,
        db_tag: int = 0,
        interp: Interpolator = path_factor,
        log: logging.Logger | None = None,
    ) -> "PathSeries":
        obj = cls.__new__(cls)
        obj._init(tag, db_tag, data, time_increment, factor, use_last, start_time, interp, log or logger)
        return obj

    @classmethod
    def from_file(
        cls,
        tag: int,
        path: str | os.PathLike[str] | TextIO,
        time_increment: float,
        factor: float = 1.0,
        use_last: bool = False,
        prepend_zero: bool = False,
        start_time: float = 0.0,
        db_tag: int = 0,
        interp: Interpolator = path_factor,
        log: logging.Logger | None = None,
    ) -> "PathSeries":
        """Построить ряд из файла с числами через пробелы/переводы строк.

        Если файл не открылся или в нём нет чисел, ряд получается пустым
        (в лог пишется предупреждение), исключение не выбрасывается.
        """
        check_time_increment(time_increment)
        log = log or logger
        data = builders.from_text(path, prepend_zero=prepend_zero, log=log)
        return cls._from_data(
            tag, data, time_increment, factor, use_last, start_time, db_tag, interp, log
        )

    @classmethod
    def from_settings(
        cls,
        tag: int,
        values: Iterable[float],
        settings: PathSettings,
        db_tag: int = 0,
        log: logging.Logger | None = None,
    ) -> "PathSeries":
        return cls(
            tag,
            values,
            settings.time_increment,
            factor=settings.factor,
            use_last=settings.use_last,
            prepend_zero=settings.prepend_zero,
            start_time=settings.start_time,
            db_tag=db_tag,
            log=log,
        )

    @classmethod
    def blank(cls, tag: int = 0, db_tag: int = 0, log: logging.Logger | None = None) -> "PathSeries":
        """Пустой ряд‑приёмник для ``recv_self``.

        Шаг по времени здесь – заглушка: настоящие скаляры приходят в
        заголовке.
        """
        return cls._from_data(tag, EMPTY, 1.0, factor=0.0, db_tag=db_tag, log=log)

    # ------------------------------------------------------------------
    # Запросы временной шкалы
    # ------------------------------------------------------------------

    def get_factor(self, pseudo_time: float) -> float:
        return self.interp(self.store, pseudo_time)

    def get_duration(self) -> float:
        return duration(self.store, self.log)

    def get_peak_factor(self) -> float:
        return peak_factor(self.store, self.log)

    def get_copy(self) -> "PathSeries":
        """Независимая копия с теми же скалярами и копией отсчётов."""
        store = self.store.copy()
        return self._from_data(
            self.tag,
            store.data,
            store.time_increment,
            factor=store.factor,
            use_last=store.extrapolation is Extrapolation.HOLD_LAST,
            start_time=store.start_time,
            db_tag=self.db_tag,
            interp=self.interp,
            log=self.log,
        )

    # ------------------------------------------------------------------
    # Передача через канал
    # ------------------------------------------------------------------

    def send_self(self, commit_tag: int, channel) -> None:
        send_path(self.store, self.transfer, self.db_tag, commit_tag, channel, self.log)

    def recv_self(self, commit_tag: int, channel) -> None:
        recv_path(self.store, self.transfer, self.db_tag, commit_tag, channel, self.log)

    # ------------------------------------------------------------------
    # Свойства и вывод
    # ------------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return self.store.is_empty

    @property
    def values(self) -> np.ndarray:
        return self.store.samples

    @property
    def factor(self) -> float:
        return self.store.factor

    @property
    def time_increment(self) -> float:
        return self.store.time_increment

    @property
    def start_time(self) -> float:
        return self.store.start_time

    @property
    def use_last(self) -> bool:
        return self.store.extrapolation is Extrapolation.HOLD_LAST

    def describe(self, flag: int = 0) -> str:
        """При ``flag == 1`` – только отсчёты, иначе краткая сводка."""
        if flag == 1:
            return " ".join(f"{v:g}" for v in self.store.samples)
        return repr(self)

    def __repr__(self) -> str:
        s = self.store
        return (
            f"PathSeries(tag={self.tag}, size={s.size}, factor={s.factor:g}, "
            f"time_increment={s.time_increment:g}, start_time={s.start_time:g}, "
            f"extrapolation={s.extrapolation.name})"
        )
