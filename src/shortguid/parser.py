"""Dual-format parsing of ShortGuid and canonical UUID strings.

Input is first decoded as a ShortGuid; if that fails it is parsed as a
canonical UUID (``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx``).

Note:
    The empty string parses as the nil UUID rather than failing, so optional
    identifier fields can round-trip through the same calls. Callers that
    need to reject empty input must check for it themselves.
"""

from dataclasses import dataclass
from uuid import UUID

from shortguid.codec import NIL, decode, encode
from shortguid.exceptions import (
    InvalidEncodingError,
    ParseError,
    TamperedEncodingError,
)
from shortguid.short_guid import ShortGuid


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a non-raising parse."""

    success: bool
    value: UUID = NIL
    short_guid: ShortGuid | None = None
    error: str | None = None


def _parse(text: str, strict: bool) -> tuple[UUID, str | None]:
    """Parse either format.

    Returns:
        The UUID, and the input text when it was the canonical short form
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a string, not {type(text).__name__}")

    if text == "":
        return NIL, None

    try:
        value = decode(text, strict=strict)
    except (InvalidEncodingError, TamperedEncodingError):
        pass
    else:
        return value, text if strict else None

    try:
        return UUID(text), None
    except ValueError as e:
        raise ParseError(text) from e


def parse(text: str, *, strict: bool) -> UUID:
    """Parse a ShortGuid or canonical UUID string.

    Args:
        text: ShortGuid or UUID string
        strict: Require short-form input to be the canonical encoding

    Returns:
        Parsed UUID (the nil UUID for an empty string)

    Raises:
        ParseError: If ``text`` matches neither format
    """
    value, _ = _parse(text, strict)
    return value


def parse_short_guid(text: str, *, strict: bool) -> ShortGuid:
    """Parse a ShortGuid or canonical UUID string into a :class:`ShortGuid`.

    Raises:
        ParseError: If ``text`` matches neither format
    """
    value, short_text = _parse(text, strict)
    if value == NIL:
        return ShortGuid.EMPTY
    if short_text is not None:
        return ShortGuid._from_pair(value, short_text)
    return ShortGuid._from_pair(value, encode(value))


def try_parse(text: str, *, strict: bool) -> ParseResult:
    """Parse without raising; see :func:`parse`."""
    try:
        value = parse(text, strict=strict)
    except ParseError as e:
        return ParseResult(success=False, error=str(e))
    return ParseResult(success=True, value=value)


def try_parse_short_guid(text: str, *, strict: bool) -> ParseResult:
    """Parse without raising; see :func:`parse_short_guid`.

    On failure ``short_guid`` is :attr:`ShortGuid.EMPTY`.
    """
    try:
        short_guid = parse_short_guid(text, strict=strict)
    except ParseError as e:
        return ParseResult(success=False, short_guid=ShortGuid.EMPTY, error=str(e))
    return ParseResult(success=True, value=short_guid.uuid, short_guid=short_guid)
