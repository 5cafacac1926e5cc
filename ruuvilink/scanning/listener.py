"""
Radio-agnostic handling of discovered advertisements.

The listener only relies on the attribute names BLE stacks commonly expose:
``device.address`` and ``advertisement_data.manufacturer_data`` /
``advertisement_data.rssi``. It never raises for bad payloads; those are
logged and counted so one misbehaving tag cannot stop a scan.
"""
from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from ruuvilink.errors import PayloadError
from ruuvilink.parsing.advertisement import (
    Advertisement,
    RUUVI_COMPANY_ID,
    parse_advertisement,
    payload_from_manufacturer_map,
)


@dataclass
class AdvertisementEvent:
    address: str
    advertisement: Advertisement
    rssi: Optional[int] = None
    name: Optional[str] = None
    received_at: dt.datetime = field(default_factory=lambda: dt.datetime.now(dt.UTC))

    def as_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "name": self.name,
            "rssi": self.rssi,
            "received_at": self.received_at.isoformat(),
            "data": self.advertisement.as_dict(),
        }


class AdvertisementListener:
    def __init__(
        self,
        sink: Callable[[AdvertisementEvent], None],
        logger: Optional[logging.Logger] = None,
        company_id: int = RUUVI_COMPANY_ID,
        copy_payloads: bool = True,
    ) -> None:
        self.sink = sink
        self.logger = logger or logging.getLogger(__name__)
        self.company_id = company_id
        self.copy_payloads = copy_payloads
        self.decoded = 0
        self.rejected = 0
        self.ignored = 0

    def __call__(self, device: Any, advertisement_data: Any) -> Optional[AdvertisementEvent]:
        payload = payload_from_manufacturer_map(
            getattr(advertisement_data, "manufacturer_data", None),
            self.company_id,
        )
        if payload is None:
            self.ignored += 1
            return None

        address = getattr(device, "address", "unknown")
        try:
            advertisement = parse_advertisement(payload, copy=self.copy_payloads)
        except PayloadError as exc:
            self.rejected += 1
            self.logger.warning(
                "payload_rejected",
                extra={"details": {"address": address, "raw": bytes(payload).hex(), "error": str(exc)}},
            )
            return None

        event = AdvertisementEvent(
            address=address,
            advertisement=advertisement,
            rssi=getattr(advertisement_data, "rssi", None),
            name=getattr(advertisement_data, "local_name", None) or getattr(device, "name", None),
        )
        self.decoded += 1
        self.logger.debug(
            "payload_decoded",
            extra={"details": {"address": address, "format": advertisement.data_format}},
        )
        self.sink(event)
        return event

    def stats(self) -> dict[str, int]:
        return {"decoded": self.decoded, "rejected": self.rejected, "ignored": self.ignored}
