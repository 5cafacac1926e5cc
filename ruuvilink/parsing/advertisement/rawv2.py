"""
Decoder for data format 5 (RAWv2).

24-byte layout, offsets from the start of the payload:

====  ==============================================  ===========
0     data format (0x05)
1-2   temperature, 0.005 degC steps (signed)           0x8000
3-4   humidity, 0.0025 % steps (unsigned)              0xFFFF
5-6   pressure, Pa minus 50000 (unsigned)              0xFFFF
7-12  acceleration X, Y, Z in mg (signed)              0x8000
13-14 power info: 11 bits voltage, 5 bits TX power     0xFFFF
15    movement counter                                 0xFF
16-17 measurement sequence number                      0xFFFF
18-23 MAC address                                      all 0xFF
====  ==============================================  ===========

The right-hand column is the pattern the tag writes when it could not measure
the quantity. Each accessor checks only its own bits, so one invalid field
never hides another.
"""
from __future__ import annotations

from ruuvilink.core.binary import int16_be, is_all, uint16_be
from ruuvilink.parsing.advertisement.base import RawAdvertisement

INVALID_SIGNED = 0x8000
INVALID_UNSIGNED = 0xFFFF
INVALID_BYTE = 0xFF


class RawV2Data(RawAdvertisement):
    DATA_FORMAT = 5
    MIN_LENGTH = 24

    def _signed(self, offset: int, field: str) -> int:
        if uint16_be(self._raw, offset) == INVALID_SIGNED:
            raise self._invalid(field)
        return int16_be(self._raw, offset)

    def _unsigned(self, offset: int, field: str) -> int:
        value = uint16_be(self._raw, offset)
        if value == INVALID_UNSIGNED:
            raise self._invalid(field)
        return value

    def temperature(self) -> float:
        return self._signed(1, "temperature") * 0.005

    def humidity(self) -> float:
        return self._unsigned(3, "humidity") * 0.0025

    def pressure(self) -> int:
        return self._unsigned(5, "pressure") + 50000

    def acceleration_x(self) -> float:
        return self._signed(7, "acceleration-x") / 1000.0

    def acceleration_y(self) -> float:
        return self._signed(9, "acceleration-y") / 1000.0

    def acceleration_z(self) -> float:
        return self._signed(11, "acceleration-z") / 1000.0

    # Voltage and TX power share one word; 0xFFFF invalidates both.
    def battery_voltage(self) -> float:
        power_info = self._unsigned(13, "battery voltage")
        return (power_info >> 5) / 1000.0 + 1.6

    def tx_power(self) -> float:
        power_info = self._unsigned(13, "TX power")
        return (power_info & 0x1F) * 2 - 40.0

    def movement_counter(self) -> int:
        value = self._raw[15]
        if value == INVALID_BYTE:
            raise self._invalid("movement counter")
        return value

    def measurement_sequence(self) -> int:
        return self._unsigned(16, "measurement sequence number")

    def mac_address(self) -> bytes:
        mac = bytes(self._raw[18:24])
        if is_all(mac, INVALID_BYTE):
            raise self._invalid("MAC address")
        return mac
