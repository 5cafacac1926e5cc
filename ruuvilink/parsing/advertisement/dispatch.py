from __future__ import annotations

from typing import Dict, Tuple, Type, Union

from ruuvilink.errors import PayloadError, UnsupportedFormatError
from ruuvilink.parsing.advertisement.base import PayloadInput
from ruuvilink.parsing.advertisement.rawv1 import RawV1Data
from ruuvilink.parsing.advertisement.rawv2 import RawV2Data

Advertisement = Union[RawV1Data, RawV2Data]

DECODERS: Dict[int, Type[Advertisement]] = {
    RawV1Data.DATA_FORMAT: RawV1Data,
    RawV2Data.DATA_FORMAT: RawV2Data,
}

SUPPORTED_FORMATS: Tuple[int, ...] = tuple(sorted(DECODERS))


def parse_advertisement(data: PayloadInput, copy: bool = False) -> Advertisement:
    """
    Pick the decoder for a manufacturer-data payload by its first byte.

    Args:
        data: The payload, starting at the data format byte (company id
            already stripped).
        copy: Take an owned copy of ``data``. Leave this off only when the
            result is used before the caller's buffer can change.

    Returns:
        A ``RawV1Data`` or ``RawV2Data`` instance.

    Raises:
        UnsupportedFormatError: If ``data`` is empty or its format byte is not
            one of ``SUPPORTED_FORMATS``.
        TooShortError: If the payload is shorter than its format requires.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        data = bytes(data)
    if len(data) == 0:
        raise UnsupportedFormatError(None)
    decoder = DECODERS.get(data[0])
    if decoder is None:
        raise UnsupportedFormatError(data[0])
    return decoder(data, copy=copy)


def parse_advertisement_hex(text: str, copy: bool = True) -> Advertisement:
    """Decode a payload given as hex text (``0x`` prefix, spaces and colons allowed)."""
    cleaned = "".join(text.split()).replace(":", "")
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    try:
        data = bytes.fromhex(cleaned)
    except ValueError as exc:
        raise PayloadError(f"Failed to decode payload hex: {exc}") from exc
    return parse_advertisement(data, copy=copy)
