"""
Helpers for locating the sensor payload inside BLE manufacturer-specific data.

On air the manufacturer data starts with the 16-bit company identifier in
little-endian order, followed by the payload the decoders understand. Some
stacks (bleak among them) strip the identifier and hand out a
``{company_id: payload}`` mapping instead.
"""
from __future__ import annotations

from typing import Mapping, Optional

from ruuvilink.core.binary import Buffer
from ruuvilink.errors import PayloadError

RUUVI_COMPANY_ID = 0x0499


def _company_prefix(company_id: int) -> bytes:
    return company_id.to_bytes(2, byteorder="little")


def is_ruuvi_manufacturer_data(data: Buffer, company_id: int = RUUVI_COMPANY_ID) -> bool:
    return len(data) >= 2 and bytes(data[:2]) == _company_prefix(company_id)


def strip_company_id(data: Buffer, company_id: int = RUUVI_COMPANY_ID) -> bytes:
    if not is_ruuvi_manufacturer_data(data, company_id):
        raise PayloadError(f"Manufacturer data does not start with company id 0x{company_id:04x}")
    return bytes(data[2:])


def payload_from_manufacturer_map(
    manufacturer_data: Optional[Mapping[int, Buffer]],
    company_id: int = RUUVI_COMPANY_ID,
) -> Optional[Buffer]:
    if not manufacturer_data:
        return None
    return manufacturer_data.get(company_id)
