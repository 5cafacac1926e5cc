"""
Decoders for RuuviTag manufacturer-data payloads.

``parse_advertisement`` reads the data format byte and returns the matching
decoder. Both decoders share one accessor contract, so callers never need to
check which format they received.
"""
from ruuvilink.parsing.advertisement.base import ACCESSORS, RawAdvertisement
from ruuvilink.parsing.advertisement.dispatch import (
    Advertisement,
    DECODERS,
    SUPPORTED_FORMATS,
    parse_advertisement,
    parse_advertisement_hex,
)
from ruuvilink.parsing.advertisement.manufacturer import (
    RUUVI_COMPANY_ID,
    is_ruuvi_manufacturer_data,
    payload_from_manufacturer_map,
    strip_company_id,
)
from ruuvilink.parsing.advertisement.model import AdvertisementReading
from ruuvilink.parsing.advertisement.rawv1 import RawV1Data
from ruuvilink.parsing.advertisement.rawv2 import RawV2Data

__all__ = [
    "ACCESSORS",
    "Advertisement",
    "AdvertisementReading",
    "DECODERS",
    "RawAdvertisement",
    "RawV1Data",
    "RawV2Data",
    "RUUVI_COMPANY_ID",
    "SUPPORTED_FORMATS",
    "is_ruuvi_manufacturer_data",
    "parse_advertisement",
    "parse_advertisement_hex",
    "payload_from_manufacturer_map",
    "strip_company_id",
]
