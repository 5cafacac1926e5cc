"""Tests for environment-driven settings."""
import pytest
from pydantic import ValidationError

from ruuvilink.config import DecoderSettings


def test_defaults(monkeypatch):
    for name in ("RUUVI_JSON_ONLY", "RUUVI_COMPANY_ID", "RUUVI_SCAN_DURATION", "RUUVI_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = DecoderSettings(_env_file=None)
    assert settings.json_only is False
    assert settings.company_id == 0x0499
    assert settings.copy_payloads is True
    assert settings.scan_duration is None
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("RUUVI_JSON_ONLY", "true")
    monkeypatch.setenv("RUUVI_COMPANY_ID", "0x004c")
    monkeypatch.setenv("RUUVI_SCAN_DURATION", "12.5")
    monkeypatch.setenv("RUUVI_LOG_LEVEL", "debug")
    settings = DecoderSettings(_env_file=None)
    assert settings.json_only is True
    assert settings.company_id == 0x004C
    assert settings.scan_duration == 12.5
    assert settings.log_level == "DEBUG"


def test_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("RUUVI_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        DecoderSettings(_env_file=None)


def test_init_by_field_name():
    settings = DecoderSettings(_env_file=None, scan_adapter="hci1", company_id=1177)
    assert settings.scan_adapter == "hci1"
    assert settings.company_id == 0x0499
