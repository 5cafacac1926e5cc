"""Tests for manufacturer-data helpers."""
import pytest

from ruuvilink.errors import PayloadError
from ruuvilink.parsing.advertisement import (
    RUUVI_COMPANY_ID,
    is_ruuvi_manufacturer_data,
    parse_advertisement,
    payload_from_manufacturer_map,
    strip_company_id,
)

PAYLOAD = bytes.fromhex("0512FC5394C37C0004FFFC040CAC364200CDCBB8334C884F")


def test_company_id_value():
    assert RUUVI_COMPANY_ID == 0x0499


def test_is_ruuvi_manufacturer_data():
    assert is_ruuvi_manufacturer_data(b"\x99\x04" + PAYLOAD)
    assert not is_ruuvi_manufacturer_data(b"\x04\x99" + PAYLOAD)
    assert not is_ruuvi_manufacturer_data(b"\x99")


def test_custom_company_id():
    assert is_ruuvi_manufacturer_data(b"\x4c\x00\x02", company_id=0x004C)


def test_strip_company_id():
    payload = strip_company_id(b"\x99\x04" + PAYLOAD)
    assert payload == PAYLOAD
    assert parse_advertisement(payload).measurement_sequence() == 205


def test_strip_company_id_rejects_other_vendor():
    with pytest.raises(PayloadError):
        strip_company_id(b"\x4c\x00" + PAYLOAD)


def test_payload_from_manufacturer_map():
    assert payload_from_manufacturer_map({0x0499: PAYLOAD}) == PAYLOAD
    assert payload_from_manufacturer_map({0x004C: b"\x02\x15"}) is None
    assert payload_from_manufacturer_map({}) is None
    assert payload_from_manufacturer_map(None) is None
