# loadpath/__init__.py
"""Пакет **loadpath** (ряды нагрузки, заданные траекторией).

Инициализационный модуль упрощает импорт «ключевых сущностей»
библиотеки для внешних пользователей:

--- from loadpath import PathSeries, MemoryDatastore, PathAnalyzer ---

Экспортируемые объекты перечислены в ``__all__`` – это служит
*public API* пакета.
"""

from __future__ import annotations

from .domain.path_store import Extrapolation, PathStore
from .domain.settings import PathSettings
from .series import TimeSeries
from .series.path_series import PathSeries
from .transfer.channel import MemoryDatastore, MemoryPipe, NpyDatastore
from .transfer.codec import TransferRecord
from .errors import HeaderTransferError, PayloadTransferError, TransferError
from .facade.analyzer import PathAnalyzer

__all__ = [
    "PathSeries",       # ряд по траектории (интерполяция + передача)
    "TimeSeries",       # базовый интерфейс рядов
    "PathStore",        # отсчёты + скаляры ряда
    "PathSettings",     # параметры ряда одним объектом
    "Extrapolation",    # ноль / последнее значение за концом ряда
    "MemoryDatastore",  # долговременное хранилище в памяти
    "NpyDatastore",     # долговременное хранилище в каталоге .npy
    "MemoryPipe",       # транзитный канал
    "TransferRecord",   # заголовок передачи
    "TransferError",
    "HeaderTransferError",
    "PayloadTransferError",
    "PathAnalyzer",     # фасад: прогон + графики
]
