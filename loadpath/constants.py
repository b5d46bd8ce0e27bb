# loadpath/constants.py
"""Константы протокола передачи и значения по умолчанию."""

HEADER_SIZE = 7          # число полей заголовка TransferRecord
EMPTY_SIZE = -1          # sampleCount для пустого ряда
NO_COMMIT = -1           # «ещё ни разу не отправлялся в хранилище»
UNALLOCATED_TAG = 0      # payload tag ещё не выделен
FIRST_PAYLOAD_TAG = 1    # первый tag, который выдаёт канал
RECV_FALLBACK_FACTOR = 1.0  # множитель после неудачного чтения заголовка
