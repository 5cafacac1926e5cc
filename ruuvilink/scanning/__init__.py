"""
Front-end plumbing between a BLE scanner and the payload decoders.

``listener`` has no radio dependency; ``scanner`` drives it from bleak.
"""
from ruuvilink.scanning.listener import AdvertisementEvent, AdvertisementListener

__all__ = ["AdvertisementEvent", "AdvertisementListener"]
