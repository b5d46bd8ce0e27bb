# loadpath/visualization/plots.py
"""Мини‑обёртки над matplotlib для отображения ряда нагрузки.

Функции строят *интерактивные* графики (``plt.show()``) и не возвращают
объекты Figure/Axes, чтобы оставить API как можно более простым.
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..series.path_series import PathSeries

# ---------------------------------------------------------------------------
# 1) Отсчёты траектории
# ---------------------------------------------------------------------------

def plot_samples(series: PathSeries) -> None:
    """Точки траектории на своих моментах времени (без множителя)."""
    values = series.values
    t = series.start_time + np.arange(values.size) * series.time_increment
    plt.plot(t, values, marker="o", ls="")
    plt.title(f"Отсчёты траектории, tag = {series.tag}")
    plt.xlabel("Псевдовремя")
    plt.ylabel("Амплитуда")
    plt.grid(True)
    plt.show()

# ---------------------------------------------------------------------------
# 2) Множитель нагрузки по результатам прогона
# ---------------------------------------------------------------------------

def plot_factor_history(df: pd.DataFrame, series: PathSeries | None = None) -> None:
    """Линия множителя нагрузки + (опц.) уровень пикового множителя."""
    plt.plot(df["t"], df["factor"])

    if series is not None and not series.is_empty:
        peak = series.get_peak_factor()
        plt.axhline(peak, ls="--", color="red", label="peak")
        plt.axhline(-peak, ls="--", color="red")
        plt.legend()

    plt.title("Множитель нагрузки по псевдовремени")
    plt.xlabel("t")
    plt.ylabel("factor")
    plt.grid(True)
    plt.show()
