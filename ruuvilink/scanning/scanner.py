from __future__ import annotations

import asyncio
from typing import Any, Optional

from bleak import BleakScanner

from ruuvilink.scanning.listener import AdvertisementListener


async def scan(
    listener: AdvertisementListener,
    adapter: Optional[str] = None,
    duration: Optional[float] = None,
    stop_event: Optional[asyncio.Event] = None,
) -> dict[str, int]:
    """
    Run a BLE scan feeding every advertisement to ``listener``.

    Scans for ``duration`` seconds, or until ``stop_event`` is set (or the task
    is cancelled) when no duration is given. Returns the listener counters.
    """
    kwargs: dict[str, Any] = {}
    if adapter:
        kwargs["adapter"] = adapter
    scanner = BleakScanner(detection_callback=listener, **kwargs)
    await scanner.start()
    listener.logger.info("scan_started", extra={"details": {"adapter": adapter, "duration": duration}})
    try:
        if duration is not None:
            await asyncio.sleep(duration)
        else:
            await (stop_event or asyncio.Event()).wait()
    finally:
        await scanner.stop()
        listener.logger.info("scan_stopped", extra={"details": listener.stats()})
    return listener.stats()
