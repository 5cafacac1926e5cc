"""
Exception hierarchy for advertisement decoding.

Two families are kept apart:

- ``PayloadError`` (a ``ValueError``) for payloads that cannot be decoded at
  all, or whose field bits fall outside their own encoding.
- ``FieldUnavailableError`` (a ``LookupError``) for fields that simply have no
  value. ``NotAvailableInFormatError`` means the data format has no bits for
  the quantity; ``ValueNotAvailableError`` means the sender wrote the reserved
  "not measured" pattern.
"""
from __future__ import annotations

from typing import Optional


class RuuviError(Exception):
    pass


class PayloadError(RuuviError, ValueError):
    pass


class InvalidFormatError(PayloadError):
    def __init__(self, expected: int, actual: Optional[int]) -> None:
        self.expected = expected
        self.data_format = actual
        shown = "none" if actual is None else str(actual)
        super().__init__(f"Data is not format {expected} (got {shown})")


class TooShortError(PayloadError):
    def __init__(self, expected: int, actual: int, data_format: Optional[int] = None) -> None:
        self.expected = expected
        self.actual = actual
        self.data_format = data_format
        super().__init__(f"Data is too short to be valid, expected {expected} bytes but got {actual}")


class UnsupportedFormatError(PayloadError):
    def __init__(self, data_format: Optional[int]) -> None:
        self.data_format = data_format
        if data_format is None:
            message = "Unsupported data: empty payload"
        else:
            message = f"Unsupported data: format {data_format} is not supported"
        super().__init__(message)


class OutOfRangeError(PayloadError):
    def __init__(self, field: str, raw_value: int, reason: str) -> None:
        self.field = field
        self.raw_value = raw_value
        super().__init__(f"{field}: {reason} (raw value {raw_value})")


class FieldUnavailableError(RuuviError, LookupError):
    def __init__(self, field: str, data_format: int, message: str) -> None:
        self.field = field
        self.data_format = data_format
        super().__init__(message)


class NotAvailableInFormatError(FieldUnavailableError):
    def __init__(self, field: str, data_format: int) -> None:
        super().__init__(field, data_format, f"{field} is not available with data format {data_format}")


class ValueNotAvailableError(FieldUnavailableError):
    def __init__(self, field: str, data_format: int) -> None:
        super().__init__(field, data_format, f"Data for {field} is invalid")


__all__ = [
    "RuuviError",
    "PayloadError",
    "InvalidFormatError",
    "TooShortError",
    "UnsupportedFormatError",
    "OutOfRangeError",
    "FieldUnavailableError",
    "NotAvailableInFormatError",
    "ValueNotAvailableError",
]
