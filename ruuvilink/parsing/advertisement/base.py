"""
Shared behaviour of the fixed-layout advertisement decoders.

A decoder wraps the caller's buffer without copying it. That is cheap and fine
for synchronous, single-use access (decode inside the scan callback, read the
fields, drop the decoder). BLE stacks commonly reuse the buffer for the next
packet, so a decoder that outlives the callback must own its bytes: pass
``copy=True`` at construction or call ``copy()`` before retaining it.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Iterable, Tuple, Union

from ruuvilink.core.binary import Buffer, format_mac
from ruuvilink.errors import (
    FieldUnavailableError,
    InvalidFormatError,
    NotAvailableInFormatError,
    OutOfRangeError,
    TooShortError,
    ValueNotAvailableError,
)
from ruuvilink.parsing.advertisement.model import AdvertisementReading

PayloadInput = Union[Buffer, Iterable[int]]

# Accessor names shared by every layout, in serialization order.
ACCESSORS: Tuple[str, ...] = (
    "temperature",
    "humidity",
    "pressure",
    "acceleration_x",
    "acceleration_y",
    "acceleration_z",
    "battery_voltage",
    "tx_power",
    "measurement_sequence",
    "movement_counter",
    "mac_address",
)


class RawAdvertisement(ABC):
    DATA_FORMAT: ClassVar[int]
    MIN_LENGTH: ClassVar[int]

    def __init__(self, data: PayloadInput, copy: bool = False) -> None:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            data = bytes(data)
        if len(data) == 0:
            raise TooShortError(self.MIN_LENGTH, 0, self.DATA_FORMAT)
        if data[0] != self.DATA_FORMAT:
            raise InvalidFormatError(self.DATA_FORMAT, data[0])
        if len(data) < self.MIN_LENGTH:
            raise TooShortError(self.MIN_LENGTH, len(data), self.DATA_FORMAT)
        self._raw: Buffer = data
        self._owned = isinstance(data, bytes)
        if copy:
            self.copy()

    # --- buffer ownership ---
    def copy(self) -> "RawAdvertisement":
        """Take an owned, immutable copy of the payload so later writes to the
        caller's buffer are no longer visible through this decoder."""
        if not self._owned:
            self._raw = bytes(self._raw)
            self._owned = True
        return self

    @property
    def is_owned(self) -> bool:
        return self._owned

    @property
    def raw_data(self) -> bytes:
        return bytes(self._raw)

    @property
    def data_format(self) -> int:
        return self.DATA_FORMAT

    # --- field helpers ---
    def _not_in_format(self, field: str) -> NotAvailableInFormatError:
        return NotAvailableInFormatError(field, self.DATA_FORMAT)

    def _invalid(self, field: str) -> ValueNotAvailableError:
        return ValueNotAvailableError(field, self.DATA_FORMAT)

    # --- accessors ---
    @abstractmethod
    def temperature(self) -> float:
        """Temperature in degrees Celsius."""

    @abstractmethod
    def humidity(self) -> float:
        """Relative humidity in percent."""

    @abstractmethod
    def pressure(self) -> int:
        """Atmospheric pressure in Pa."""

    @abstractmethod
    def acceleration_x(self) -> float:
        """Acceleration along X in g."""

    @abstractmethod
    def acceleration_y(self) -> float:
        """Acceleration along Y in g."""

    @abstractmethod
    def acceleration_z(self) -> float:
        """Acceleration along Z in g."""

    @abstractmethod
    def battery_voltage(self) -> float:
        """Battery voltage in V."""

    @abstractmethod
    def tx_power(self) -> float:
        """Transmission power in dBm."""

    @abstractmethod
    def movement_counter(self) -> int:
        """Number of movements seen by the accelerometer."""

    @abstractmethod
    def measurement_sequence(self) -> int:
        """Measurement sequence number."""

    @abstractmethod
    def mac_address(self) -> bytes:
        """MAC address of the broadcasting tag, 6 bytes."""

    def acceleration(self) -> Tuple[float, float, float]:
        return self.acceleration_x(), self.acceleration_y(), self.acceleration_z()

    def get(self, name: str, default: Any = None) -> Any:
        """
        Read a field by accessor name, returning ``default`` when the field has
        no value in this payload.

        Raises:
            AttributeError: If ``name`` is not a known accessor.
        """
        if name not in ACCESSORS:
            raise AttributeError(f"{self.__class__.__name__} has no field '{name}'")
        try:
            return getattr(self, name)()
        except FieldUnavailableError:
            return default

    # --- serialization ---
    def to_reading(self) -> AdvertisementReading:
        values: dict[str, Any] = {}
        for name in ACCESSORS:
            try:
                value = getattr(self, name)()
            except (FieldUnavailableError, OutOfRangeError):
                continue
            if name == "mac_address":
                values["mac"] = format_mac(value)
            else:
                values[name] = value
        return AdvertisementReading(raw=self.raw_data.hex(), data_format=self.DATA_FORMAT, **values)

    def as_dict(self) -> dict[str, Any]:
        return self.to_reading().as_dict()

    def to_json(self) -> str:
        return self.to_reading().to_json()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(raw={self.raw_data.hex()!r}, owned={self._owned})"
