# loadpath/core/interpolation.py
"""Кусочно‑линейная интерполяция ряда и сводные характеристики.

Алгоритм ``path_factor`` для момента *t*:

1. ``t < start_time`` или ряд пуст → 0 (жёсткая граница, политика
   экстраполяции здесь не участвует);
2. ``pos = (t - start_time) / time_increment``, ``i0 = floor(pos)``,
   ``i1 = i0 + 1``;
3. ``i1`` за последним отсчётом → политика экстраполяции
   (0 или ``factor * values[-1]``);
4. иначе – линейная интерполяция между ``values[i0]`` и ``values[i1]``.

Обратите внимание: при ``ZERO_BEYOND_END`` момент, совпадающий с
последним отсчётом, уже считается «за концом» и даёт 0.
"""

from __future__ import annotations

import logging
import math
from typing import Protocol, Sequence

import numpy as np

from ..domain.path_store import Extrapolation, PathStore, PopulatedPath

logger = logging.getLogger(__name__)


class Interpolator(Protocol):
    """A minimal interface for path evaluation, so we can inject mocks.
    Any object satisfying ``__call__(store, t) -> float`` qualifies.
    """

    def __call__(self, store: PathStore, t: float) -> float:
        ...


def path_factor(store: PathStore, t: float) -> float:
    """Load factor of *store* at pseudo-time *t*."""
    data = store.data
    if t < store.start_time or not isinstance(data, PopulatedPath):
        return 0.0

    pos = (t - store.start_time) / store.time_increment
    if math.isnan(pos):
        return 0.0
    values = data.values
    last = values.size - 1

    # pos = +inf: floor() не определён, это заведомо «за концом»
    i0 = math.floor(pos) if math.isfinite(pos) else last
    i1 = i0 + 1

    if i1 > last:
        if store.extrapolation is Extrapolation.HOLD_LAST:
            return store.factor * float(values[last])
        return 0.0

    v0 = float(values[i0])
    v1 = float(values[i1])
    return store.factor * (v0 + (v1 - v0) * (pos - i0))


def evaluate_many(store: PathStore, times: Sequence[float] | np.ndarray) -> np.ndarray:
    """Векторный вариант ``path_factor`` для массива моментов."""
    t = np.asarray(times, dtype=np.float64)
    out = np.zeros(t.shape, dtype=np.float64)
    data = store.data
    if not isinstance(data, PopulatedPath):
        return out

    values = data.values
    last = values.size - 1

    active = t >= store.start_time
    pos = (t[active] - store.start_time) / store.time_increment
    i0 = np.floor(pos)
    beyond = i0 + 1 > last

    res = np.zeros(pos.shape, dtype=np.float64)
    if store.extrapolation is Extrapolation.HOLD_LAST:
        res[beyond] = store.factor * values[last]

    inside = ~beyond
    j0 = i0[inside].astype(np.int64)
    v0 = values[j0]
    v1 = values[j0 + 1]
    res[inside] = store.factor * (v0 + (v1 - v0) * (pos[inside] - j0))

    out[active] = res
    return out


# ---------------------------------------------------------------------------
# Сводные характеристики
# ---------------------------------------------------------------------------


def duration(store: PathStore, log: logging.Logger | None = None) -> float:
    """``start_time + n * time_increment``; 0 для пустого ряда."""
    if not isinstance(store.data, PopulatedPath):
        (log or logger).warning("get_duration() called on an empty path, returning 0")
        return 0.0
    return store.start_time + store.data.size * store.time_increment


def peak_factor(store: PathStore, log: logging.Logger | None = None) -> float:
    """``factor * max|values|``; 0 для пустого ряда."""
    if not isinstance(store.data, PopulatedPath):
        (log or logger).warning("get_peak_factor() called on an empty path, returning 0")
        return 0.0
    peak = float(np.max(np.abs(store.data.values)))
    return peak * store.factor
