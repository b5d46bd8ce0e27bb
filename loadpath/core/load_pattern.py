# loadpath/core/load_pattern.py
"""Пошаговый прогон ряда нагрузки по псевдовремени.

* Принимает на вход ряд (любой :class:`~loadpath.series.TimeSeries`) и
  шаг прогона ``dt``.
* На выходе формируется **DataFrame** со столбцами ``t`` и ``factor`` –
  так же, как это делает цикл шагов расчётной модели, запрашивая
  множитель нагрузки на каждом шаге.

Для ``PathSeries`` с интерполятором по умолчанию используется векторный
расчёт (``evaluate_many``), для прочих рядов – поштучный вызов
``get_factor``.
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from .interpolation import Interpolator, evaluate_many, path_factor
from ..series import TimeSeries

logger = logging.getLogger(__name__)


class LoadPattern:
    """Прогон одного ряда нагрузки на равномерной сетке псевдовремени."""

    def __init__(self, series: TimeSeries, interp: Interpolator | None = None) -> None:
        self.series = series
        self.interp = interp

    # ------------------------------------------------------------------
    # Сетка моментов
    # ------------------------------------------------------------------

    def time_grid(self, dt: float, t_end: float | None = None) -> np.ndarray:
        if not dt > 0.0:
            raise ValueError(f"dt must be positive, got {dt!r}")
        if t_end is None:
            t_end = self.series.get_duration()
        n_steps = int(np.floor(t_end / dt + 1e-9)) if t_end > 0.0 else 0
        return np.arange(n_steps + 1, dtype=np.float64) * dt

    # ------------------------------------------------------------------
    # Главная точка входа
    # ------------------------------------------------------------------

    def run(self, dt: float, t_end: float | None = None) -> pd.DataFrame:
        """Пройти от 0 до *t_end* с шагом *dt* и вернуть таблицу множителей."""
        times = self.time_grid(dt, t_end)
        logger.info("Running load pattern for tag %s over %d steps …", self.series.tag, times.size)

        store = getattr(self.series, "store", None)
        interp = self.interp or getattr(self.series, "interp", None)
        if store is not None and interp is path_factor:
            factors = evaluate_many(store, times)
        elif store is not None and interp is not None:
            factors = np.array([interp(store, t) for t in times], dtype=np.float64)
        else:
            factors = np.array([self.series.get_factor(t) for t in times], dtype=np.float64)

        logger.debug("peak |factor| over run: %.6g", float(np.max(np.abs(factors))) if factors.size else 0.0)
        return pd.DataFrame({"t": times, "factor": factors})
