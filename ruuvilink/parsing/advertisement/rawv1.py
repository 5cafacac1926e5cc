"""
Decoder for data format 3 (RAWv1).

14-byte layout, offsets from the start of the payload:

====  =========================================================
0     data format (0x03)
1     humidity, 0.5 % steps
2     temperature integer part, bit 7 is the sign
3     temperature fraction, hundredths (0-99)
4-5   pressure, Pa minus 50000 (unsigned)
6-11  acceleration X, Y, Z in mg (signed)
12-13 battery voltage in mV (unsigned)
====  =========================================================

The format has no "invalid" markers; every field it carries is always
present. TX power, movement counter, sequence number and MAC do not exist in
this format.
"""
from __future__ import annotations

from ruuvilink.core.binary import get_bit, int16_be, uint16_be
from ruuvilink.errors import OutOfRangeError
from ruuvilink.parsing.advertisement.base import RawAdvertisement


class RawV1Data(RawAdvertisement):
    DATA_FORMAT = 3
    MIN_LENGTH = 14

    def temperature(self) -> float:
        whole = self._raw[2] & 0x7F
        fraction = self._raw[3]
        if fraction > 99:
            raise OutOfRangeError("temperature", fraction, "fractional part exceeds maximum value")
        sign = -1.0 if get_bit(self._raw[2], 7) else 1.0
        return (whole + fraction / 100.0) * sign

    def humidity(self) -> float:
        return self._raw[1] * 0.5

    def pressure(self) -> int:
        return uint16_be(self._raw, 4) + 50000

    def acceleration_x(self) -> float:
        return int16_be(self._raw, 6) / 1000.0

    def acceleration_y(self) -> float:
        return int16_be(self._raw, 8) / 1000.0

    def acceleration_z(self) -> float:
        return int16_be(self._raw, 10) / 1000.0

    def battery_voltage(self) -> float:
        return uint16_be(self._raw, 12) / 1000.0

    def tx_power(self) -> float:
        raise self._not_in_format("TX power")

    def movement_counter(self) -> int:
        raise self._not_in_format("movement counter")

    def measurement_sequence(self) -> int:
        raise self._not_in_format("measurement sequence number")

    def mac_address(self) -> bytes:
        raise self._not_in_format("MAC address")
