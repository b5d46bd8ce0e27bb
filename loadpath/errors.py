# loadpath/errors.py
"""Иерархия исключений пакета.

Ошибки построения и запросов к пустому ряду *не* поднимаются наружу
(возвращается 0 и пишется предупреждение в лог).  Исключения нужны только
там, где молча проглотить ошибку нельзя – при передаче состояния через
канал.
"""

from __future__ import annotations


class LoadPathError(Exception):
    """Base class for all package errors."""


class ChannelError(LoadPathError):
    """Raised by a channel when a vector cannot be written or read."""


class TransferError(LoadPathError):
    """Send/receive of a path through a channel failed."""


class HeaderTransferError(TransferError):
    """The 7-field header record could not be written or read."""


class PayloadTransferError(TransferError):
    """The sample payload could not be written, allocated or read."""
