# loadpath/series/__init__.py
"""Базовая абстракция временного ряда нагрузки и фабрика рядов.

*Модуль объединяет:*
1. **TimeSeries** – абстрактный базовый класс (ABC), определяющий
   единый интерфейс ``get_factor`` / ``get_duration`` / ``get_peak_factor``
   для всех стратегий задания нагрузки во времени, а также передачу
   состояния через канал (``send_self`` / ``recv_self``).
2. Функцию‑фабрику **get(name, **kwargs)**, возвращающую ряд по
   строковому алиасу ("path", "path_file").  Это упрощает создание рядов
   из конфигов или CLI‑аргументов.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

# ---------------------------------------------------------------------------
# Абстрактный базовый класс рядов
# ---------------------------------------------------------------------------


class TimeSeries(ABC):
    """Интерфейс любого ряда «множитель нагрузки от псевдовремени».

    ``tag`` – пользовательский номер ряда, ``db_tag`` – ключ, под которым
    ряд записывает свой заголовок в канал (обычно выдаётся хранилищем
    через ``channel.get_db_tag()``).
    """

    def __init__(self, tag: int, db_tag: int = 0) -> None:
        self.tag = tag
        self.db_tag = db_tag

    @abstractmethod
    def get_factor(self, pseudo_time: float) -> float:
        """Множитель нагрузки в момент *pseudo_time*."""
        ...

    @abstractmethod
    def get_duration(self) -> float:
        ...

    @abstractmethod
    def get_peak_factor(self) -> float:
        ...

    @abstractmethod
    def get_copy(self) -> "TimeSeries":
        ...

    @abstractmethod
    def send_self(self, commit_tag: int, channel) -> None:
        ...

    @abstractmethod
    def recv_self(self, commit_tag: int, channel) -> None:
        ...

    def describe(self, flag: int = 0) -> str:
        return f"{type(self).__name__} tag: {self.tag}"


# ---------------------------------------------------------------------------
# Фабрика рядов по строковому имени
# ---------------------------------------------------------------------------


def get(name: str = "path", **kwargs) -> TimeSeries:
    """Вернуть готовый ряд по алиасу *name*.

    Parameters
    ----------
    name : str
        Допустимые значения:
        * ``"path"``      – PathSeries из последовательности ``values``,
        * ``"path_file"`` – PathSeries из текстового файла ``path``.
    **kwargs
        Передаются конструктору без изменений.

    Raises
    ------
    ValueError
        Если передано неизвестное имя ряда.
    """
    if name == "path":
        from .path_series import PathSeries

        return PathSeries(**kwargs)
    if name == "path_file":
        from .path_series import PathSeries

        return PathSeries.from_file(**kwargs)

    raise ValueError(f"Unknown time series '{name}'")
