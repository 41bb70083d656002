"""ShortGuid value type."""

import functools
from typing import Any, ClassVar
from uuid import UUID, uuid4

from shortguid.codec import NIL, decode, encode


@functools.total_ordering
class ShortGuid:
    """A UUID paired with its 22 character ShortGuid encoding.

    The stored text is always the canonical encoding of the stored UUID.
    Equality, ordering and hashing use the UUID only, so two instances are
    equal whichever textual form they were created from.

    Example:
        >>> sg = ShortGuid("00amyWGct0y_ze4lIsj2Mw")
        >>> sg.uuid
        UUID('c9a646d3-9c61-4cb7-bfcd-ee2522c8f633')
        >>> sg == "c9a646d3-9c61-4cb7-bfcd-ee2522c8f633"
        True
    """

    __slots__ = ("_uuid", "_value")

    EMPTY: ClassVar["ShortGuid"]

    def __init__(self, text: str, *, strict: bool = True):
        """Decode a ShortGuid string.

        Only the short form is accepted here; use :meth:`from_string` for
        input that may also be a canonical UUID.

        Args:
            text: ShortGuid string
            strict: Require ``text`` to be the canonical encoding

        Raises:
            InvalidEncodingError: If ``text`` is not a ShortGuid
            TamperedEncodingError: If ``strict`` and ``text`` is not canonical
        """
        self._uuid = decode(text, strict=strict)
        self._value = text if strict else encode(self._uuid)

    @classmethod
    def _from_pair(cls, value: UUID, text: str) -> "ShortGuid":
        # Caller guarantees encode(value) == text.
        instance = cls.__new__(cls)
        instance._uuid = value
        instance._value = text
        return instance

    @classmethod
    def from_uuid(cls, value: UUID) -> "ShortGuid":
        """Create a ShortGuid from a UUID."""
        if not isinstance(value, UUID):
            raise TypeError(f"Expected UUID, not {type(value).__name__}")
        return cls._from_pair(value, encode(value))

    from_identifier = from_uuid

    @classmethod
    def from_string(cls, text: str, *, strict: bool = True) -> "ShortGuid":
        """Create a ShortGuid from either a ShortGuid or a canonical UUID string.

        An empty string gives :attr:`EMPTY`. This mirrors :func:`shortguid.parse`
        and is a deliberate, if surprising, default for optional identifiers.

        Raises:
            ParseError: If ``text`` matches neither format
        """
        from shortguid.parser import parse_short_guid

        return parse_short_guid(text, strict=strict)

    @classmethod
    def new(cls) -> "ShortGuid":
        """Create a ShortGuid for a new random (version 4) UUID."""
        return cls.from_uuid(uuid4())

    @property
    def uuid(self) -> UUID:
        """Underlying UUID."""
        return self._uuid

    identifier = uuid

    @property
    def value(self) -> str:
        """Encoded 22 character string."""
        return self._value

    @property
    def is_empty(self) -> bool:
        """True for the all-zero UUID."""
        return self._uuid == NIL

    def equals_uuid(self, other: UUID) -> bool:
        """Compare against a UUID."""
        return self._uuid == other

    def equals_string(self, other: str) -> bool:
        """Compare against a ShortGuid or canonical UUID string.

        Short-form input must be canonical; an aliased encoding of the same
        UUID does not compare equal.
        """
        from shortguid.parser import try_parse

        result = try_parse(other, strict=True)
        return result.success and self._uuid == result.value

    def equals(self, other: Any) -> bool:
        """Compare against a ShortGuid, UUID or string."""
        if isinstance(other, ShortGuid):
            return self._uuid == other._uuid
        if isinstance(other, UUID):
            return self.equals_uuid(other)
        if isinstance(other, str):
            return self.equals_string(other)
        return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (ShortGuid, UUID, str)):
            return self.equals(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, ShortGuid):
            return self._uuid < other._uuid
        if isinstance(other, UUID):
            return self._uuid < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._uuid)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"ShortGuid({self._value!r})"


ShortGuid.EMPTY = ShortGuid.from_uuid(NIL)
