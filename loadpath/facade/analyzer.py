# loadpath/facade/analyzer.py
"""Высокоуровневый *facade* для прогона ряда и построения графиков.

Класс **PathAnalyzer** инкапсулирует последовательность вызовов:
1. Прогон ряда по сетке псевдовремени (LoadPattern).
2. Сводка: размер, длительность, пиковый множитель.
3. (опц.) Визуализация через модуль *visualization.plots*.
"""

from __future__ import annotations

from typing import Any, Dict

import pandas as pd

from ..core.load_pattern import LoadPattern
from ..series.path_series import PathSeries
from ..visualization import plots


class PathAnalyzer:
    """Единая точка входа для внешних пользователей библиотеки."""

    def __init__(self, series: PathSeries) -> None:
        self.s = series

    def tabulate(self, dt: float, t_end: float | None = None) -> pd.DataFrame:
        """Прогнать ряд и вернуть таблицу ``t`` / ``factor``."""
        return LoadPattern(self.s).run(dt, t_end)

    def summary(self) -> Dict[str, Any]:
        return {
            "tag": self.s.tag,
            "size": self.s.store.size,
            "start_time": self.s.start_time,
            "time_increment": self.s.time_increment,
            "factor": self.s.factor,
            "extrapolation": self.s.store.extrapolation.name,
            "duration": self.s.get_duration(),
            "peak_factor": self.s.get_peak_factor(),
        }

    # ------------------------------------------------------------------
    # Быстрые обёртки для графиков
    # ------------------------------------------------------------------

    def plot_samples(self):
        plots.plot_samples(self.s)

    def plot_factor(self, df: pd.DataFrame):
        """График множителя нагрузки по результатам прогона."""
        plots.plot_factor_history(df, self.s)
