"""ShortGuid encoder and decoder.

A ShortGuid is the URL-safe base64 rendering of the 16 bytes of a UUID with
the two ``=`` padding characters removed::

    c9a646d3-9c61-4cb7-bfcd-ee2522c8f633  <->  00amyWGct0y_ze4lIsj2Mw

The bytes are taken in GUID (mixed-endian) order, i.e. ``UUID.bytes_le``:
the first three fields little-endian, the last eight bytes unchanged.
"""

import base64
import binascii
import re
import uuid

from shortguid.exceptions import InvalidEncodingError, ParseError, TamperedEncodingError

NIL = uuid.UUID(int=0)

ENCODED_LENGTH = 22

# Base64 characters plus their URL-safe substitutes. Padding is never part of
# the input; it is appended before decoding.
_DECODABLE = re.compile(r"[A-Za-z0-9+/_-]*")


def encode(value: uuid.UUID | str) -> str:
    """Encode a UUID as a 22 character ShortGuid string.

    Args:
        value: UUID instance, or a canonical UUID string

    Returns:
        ShortGuid string

    Raises:
        ParseError: If ``value`` is a string that is not a valid UUID

    Example:
        >>> encode(uuid.UUID("c9a646d3-9c61-4cb7-bfcd-ee2522c8f633"))
        '00amyWGct0y_ze4lIsj2Mw'
    """
    if isinstance(value, str):
        try:
            value = uuid.UUID(value)
        except ValueError as e:
            raise ParseError(value) from e

    encoded = base64.urlsafe_b64encode(value.bytes_le).decode("ascii")
    return encoded[:ENCODED_LENGTH]


def decode(text: str, *, strict: bool) -> uuid.UUID:
    """Decode a ShortGuid string into a UUID.

    Non-strict decoding accepts every string that base64-decodes to 16 bytes.
    The last character of a ShortGuid carries 4 bits that are not part of the
    identifier, so several strings decode to the same UUID. Strict decoding
    accepts only the one string that :func:`encode` produces.

    Args:
        text: ShortGuid string
        strict: Require ``text`` to be the canonical encoding

    Returns:
        Decoded UUID

    Raises:
        InvalidEncodingError: If ``text`` is not base64 for 16 bytes
        TamperedEncodingError: If ``strict`` and ``text`` is not canonical
    """
    if not isinstance(text, str):
        raise TypeError(f"ShortGuid must be a string, not {type(text).__name__}")

    if not _DECODABLE.fullmatch(text):
        raise InvalidEncodingError(text, "contains characters outside the base64 alphabet")

    try:
        blob = base64.urlsafe_b64decode(text + "==")
    except binascii.Error as e:
        raise InvalidEncodingError(text, str(e)) from e

    if len(blob) != 16:
        raise InvalidEncodingError(text, f"decodes to {len(blob)} bytes, expected 16")

    value = uuid.UUID(bytes_le=blob)

    if strict:
        expected = encode(value)
        if expected != text:
            raise TamperedEncodingError(text, expected)

    return value


def decode_strict(text: str) -> uuid.UUID:
    """Decode a ShortGuid, accepting only its canonical encoding."""
    return decode(text, strict=True)


def decode_lenient(text: str) -> uuid.UUID:
    """Decode a ShortGuid, accepting any string that decodes to 16 bytes."""
    return decode(text, strict=False)


def try_decode(text: str, *, strict: bool) -> tuple[bool, uuid.UUID]:
    """Decode a ShortGuid without raising.

    Returns:
        ``(True, value)`` on success, ``(False, NIL)`` otherwise
    """
    try:
        return True, decode(text, strict=strict)
    except (InvalidEncodingError, TamperedEncodingError):
        return False, NIL
