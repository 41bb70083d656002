"""
shortguid - URL-safe 22 character encoding for UUIDs

Provides lossless conversion between a UUID and its ShortGuid form
(``c9a646d3-9c61-4cb7-bfcd-ee2522c8f633`` <-> ``00amyWGct0y_ze4lIsj2Mw``),
with strict decoding that rejects aliased encodings.
"""

from shortguid.codec import (
    NIL,
    decode,
    decode_lenient,
    decode_strict,
    encode,
    try_decode,
)
from shortguid.config import ShortGuidSettings
from shortguid.exceptions import (
    InvalidEncodingError,
    ParseError,
    ShortGuidError,
    TamperedEncodingError,
)
from shortguid.generator import ShortGuidGenerator
from shortguid.parser import (
    ParseResult,
    parse,
    parse_short_guid,
    try_parse,
    try_parse_short_guid,
)
from shortguid.short_guid import ShortGuid
from shortguid.validator import ShortGuidValidator, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "NIL",
    "InvalidEncodingError",
    "ParseError",
    "ParseResult",
    "ShortGuid",
    "ShortGuidError",
    "ShortGuidGenerator",
    "ShortGuidSettings",
    "ShortGuidValidator",
    "TamperedEncodingError",
    "ValidationResult",
    "decode",
    "decode_lenient",
    "decode_strict",
    "encode",
    "parse",
    "parse_short_guid",
    "try_decode",
    "try_parse",
    "try_parse_short_guid",
]
