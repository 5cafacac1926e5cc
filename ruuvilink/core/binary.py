from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def uint16_be(data: Buffer, offset: int) -> int:
    return (data[offset] << 8) | data[offset + 1]


def int16_be(data: Buffer, offset: int) -> int:
    value = uint16_be(data, offset)
    return value - 0x10000 if value & 0x8000 else value


def get_bit(byte_value: int, bit_index: int) -> bool:
    if bit_index < 0 or bit_index > 7:
        raise ValueError("bit_index must be between 0 and 7")
    return bool(byte_value & (1 << bit_index))


def is_all(data: Buffer, value: int) -> bool:
    return len(data) > 0 and all(b == value for b in data)


def format_mac(mac: Buffer) -> str:
    if len(mac) != 6:
        raise ValueError(f"MAC address must be 6 bytes, got {len(mac)}")
    return ":".join(f"{b:02x}" for b in mac)
