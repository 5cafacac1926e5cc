import argparse
import asyncio
import sys
from typing import Iterable, Iterator, List, Optional, TextIO

from ruuvilink.config import DecoderSettings, get_settings
from ruuvilink.errors import PayloadError
from ruuvilink.logging import create_logger
from ruuvilink.parsing.advertisement import parse_advertisement_hex
from ruuvilink.scanning.listener import AdvertisementEvent, AdvertisementListener


def _iter_payloads(values: Iterable[str], stdin: TextIO) -> Iterator[str]:
    for value in values:
        if value == "-":
            for line in stdin:
                line = line.strip()
                if line and not line.startswith("#"):
                    yield line
        else:
            yield value


def decode_payloads(payloads: Iterable[str], out: TextIO, err: TextIO) -> int:
    failures = 0
    for text in payloads:
        try:
            advertisement = parse_advertisement_hex(text)
        except PayloadError as exc:
            failures += 1
            print(f"{text}: {exc}", file=err)
            continue
        print(advertisement.to_json(), file=out)
    return 1 if failures else 0


def _print_event(event: AdvertisementEvent, json_only: bool, out: TextIO) -> None:
    if not json_only:
        print(f"\nPeripheral {event.address} ({event.name or 'unknown'}) rssi={event.rssi}", file=out)
        print(f"  Manufacturer payload = {event.advertisement.raw_data.hex()}", file=out)
    print(event.advertisement.to_json(), file=out, flush=True)


def run_scan(settings: DecoderSettings, out: TextIO) -> int:
    from ruuvilink.scanning.scanner import scan

    logger = create_logger(
        "ruuvilink.scan",
        settings.log_ring_size,
        settings.log_level,
        stream=None if settings.json_only else sys.stderr,
    )
    listener = AdvertisementListener(
        sink=lambda event: _print_event(event, settings.json_only, out),
        logger=logger,
        company_id=settings.company_id,
        copy_payloads=settings.copy_payloads,
    )
    try:
        asyncio.run(scan(listener, adapter=settings.scan_adapter, duration=settings.scan_duration))
    except KeyboardInterrupt:
        pass
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ruuvilink", description="Decode RuuviTag sensor advertisements.")
    sub = parser.add_subparsers(dest="command", required=True)

    decode = sub.add_parser("decode", help="Decode hex payloads and print them as JSON.")
    decode.add_argument("payloads", nargs="+", help="Payload hex strings, or '-' to read one per line from stdin.")

    scan = sub.add_parser("scan", help="Scan for tags over BLE and print decoded advertisements.")
    scan.add_argument("--adapter", type=str, default=None, help="Bluetooth adapter to use (e.g. hci0).")
    scan.add_argument("--duration", type=float, default=None, help="Seconds to scan; scans until Ctrl+C if omitted.")
    scan.add_argument(
        "--json-only",
        action="store_true",
        default=None,
        help="Only print decoded data as JSON, one object per line. Useful for piping into jq.",
    )
    return parser


def main(argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin, out: TextIO = sys.stdout, err: TextIO = sys.stderr) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "decode":
        return decode_payloads(_iter_payloads(args.payloads, stdin), out, err)

    overrides = {
        "scan_adapter": args.adapter,
        "scan_duration": args.duration,
        "json_only": args.json_only,
    }
    settings = get_settings().model_copy(update={k: v for k, v in overrides.items() if v is not None})
    return run_scan(settings, out)


if __name__ == "__main__":
    sys.exit(main())
