"""Tests for the command line front end."""
import io
import json

import pytest

from ruuvilink import cli
from ruuvilink.config import DecoderSettings

RAWV1_HEX = "03291A1ECE1EFC18F94202CA0B53"
RAWV2_HEX = "0512FC5394C37C0004FFFC040CAC364200CDCBB8334C884F"


def _run(argv, stdin_text=""):
    out, err = io.StringIO(), io.StringIO()
    code = cli.main(argv, stdin=io.StringIO(stdin_text), out=out, err=err)
    return code, out.getvalue(), err.getvalue()


def test_decode_prints_json_lines():
    code, out, err = _run(["decode", RAWV1_HEX, RAWV2_HEX])
    assert code == 0
    assert err == ""
    lines = [json.loads(line) for line in out.splitlines()]
    assert [line["format"] for line in lines] == [3, 5]
    assert "mac" not in lines[0]
    assert lines[1]["mac"] == "cb:b8:33:4c:88:4f"


def test_decode_from_stdin():
    code, out, _ = _run(["decode", "-"], stdin_text=f"# captured\n{RAWV2_HEX}\n\n")
    assert code == 0
    assert json.loads(out)["meas-seq"] == 205


def test_decode_reports_failures():
    code, out, err = _run(["decode", "0212", RAWV1_HEX])
    assert code == 1
    assert "0212" in err
    assert "format 2" in err
    assert json.loads(out)["pressure"] == 102766


def test_requires_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_scan_uses_settings_overrides(monkeypatch):
    captured = {}

    def fake_run_scan(settings, out):
        captured["settings"] = settings
        return 0

    monkeypatch.setattr(cli, "run_scan", fake_run_scan)
    monkeypatch.setattr(cli, "get_settings", lambda: DecoderSettings(_env_file=None))
    code, _, _ = _run(["scan", "--adapter", "hci1", "--duration", "2", "--json-only"])

    assert code == 0
    settings = captured["settings"]
    assert settings.scan_adapter == "hci1"
    assert settings.scan_duration == 2.0
    assert settings.json_only is True


def test_scan_keeps_settings_when_flags_absent(monkeypatch):
    captured = {}

    def fake_run_scan(settings, out):
        captured["settings"] = settings
        return 0

    monkeypatch.setattr(cli, "run_scan", fake_run_scan)
    monkeypatch.setattr(
        cli,
        "get_settings",
        lambda: DecoderSettings(_env_file=None, json_only=True, scan_adapter="hci0"),
    )
    _run(["scan"])
    assert captured["settings"].json_only is True
    assert captured["settings"].scan_adapter == "hci0"


def test_run_scan_prints_decoded_advertisements(monkeypatch):
    from types import SimpleNamespace

    from ruuvilink.scanning import scanner as scanner_module

    class FakeScanner:
        def __init__(self, detection_callback, **kwargs):
            self.callback = detection_callback

        async def start(self):
            device = SimpleNamespace(address="CB:B8:33:4C:88:4F", name=None)
            adv = SimpleNamespace(manufacturer_data={0x0499: bytes.fromhex(RAWV2_HEX)}, rssi=-48, local_name="Ruuvi")
            self.callback(device, adv)

        async def stop(self):
            pass

    monkeypatch.setattr(scanner_module, "BleakScanner", FakeScanner)
    out = io.StringIO()
    settings = DecoderSettings(_env_file=None, scan_duration=0, json_only=False)
    assert cli.run_scan(settings, out) == 0

    text = out.getvalue()
    assert "Peripheral CB:B8:33:4C:88:4F (Ruuvi) rssi=-48" in text
    assert json.loads(text.strip().splitlines()[-1])["movement-count"] == 66
