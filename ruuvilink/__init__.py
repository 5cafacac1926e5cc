from ruuvilink.errors import (
    FieldUnavailableError,
    InvalidFormatError,
    NotAvailableInFormatError,
    OutOfRangeError,
    PayloadError,
    RuuviError,
    TooShortError,
    UnsupportedFormatError,
    ValueNotAvailableError,
)
from ruuvilink.parsing.advertisement import (
    Advertisement,
    AdvertisementReading,
    RawV1Data,
    RawV2Data,
    parse_advertisement,
    parse_advertisement_hex,
)
from ruuvilink.config import DecoderSettings
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "Advertisement",
    "AdvertisementReading",
    "DecoderSettings",
    "RawV1Data",
    "RawV2Data",
    "parse_advertisement",
    "parse_advertisement_hex",
    "RuuviError",
    "PayloadError",
    "InvalidFormatError",
    "TooShortError",
    "UnsupportedFormatError",
    "OutOfRangeError",
    "FieldUnavailableError",
    "NotAvailableInFormatError",
    "ValueNotAvailableError",
]

try:
    __version__ = version("ruuvilink")
except PackageNotFoundError:
    __version__ = "0.0.0"
