"""Tests for the ShortGuid value type."""

import uuid

import pytest
from shortguid import (
    NIL,
    InvalidEncodingError,
    ParseError,
    ShortGuid,
    TamperedEncodingError,
)

SAMPLE_UUID_STRING = "c9a646d3-9c61-4cb7-bfcd-ee2522c8f633"
SAMPLE_UUID = uuid.UUID(SAMPLE_UUID_STRING)
SAMPLE_SHORT_GUID = "00amyWGct0y_ze4lIsj2Mw"
ALIASED_SHORT_GUID = SAMPLE_SHORT_GUID[:-1] + "x"


def assert_is_sample(short_guid: ShortGuid) -> None:
    assert short_guid.value == SAMPLE_SHORT_GUID
    assert short_guid.uuid == SAMPLE_UUID


class TestShortGuidInit:
    """Tests for ShortGuid.__init__()."""

    def test_init_decodes_short_guid(self) -> None:
        """Test construction from a ShortGuid string."""
        assert_is_sample(ShortGuid(SAMPLE_SHORT_GUID))

    def test_init_rejects_uuid_string(self) -> None:
        """Test that the constructor only accepts the short form."""
        with pytest.raises(InvalidEncodingError):
            ShortGuid(SAMPLE_UUID_STRING)

    def test_init_rejects_tampered(self) -> None:
        """Test that strict construction rejects aliases."""
        with pytest.raises(TamperedEncodingError):
            ShortGuid("bullshitmustnotbevalid")

    def test_init_lenient_stores_canonical(self) -> None:
        """Test that lenient construction keeps the canonical encoding."""
        short_guid = ShortGuid(ALIASED_SHORT_GUID, strict=False)

        assert_is_sample(short_guid)

    def test_immutable(self) -> None:
        """Test that value and uuid cannot be reassigned."""
        short_guid = ShortGuid(SAMPLE_SHORT_GUID)

        with pytest.raises(AttributeError):
            short_guid.value = "AAAAAAAAAAAAAAAAAAAAAA"  # type: ignore[misc]

        with pytest.raises(AttributeError):
            short_guid.uuid = NIL  # type: ignore[misc]


class TestShortGuidFactories:
    """Tests for ShortGuid factory methods."""

    def test_from_uuid(self) -> None:
        """Test construction from a UUID."""
        assert_is_sample(ShortGuid.from_uuid(SAMPLE_UUID))

    def test_from_identifier_alias(self) -> None:
        """Test that from_identifier is from_uuid."""
        assert_is_sample(ShortGuid.from_identifier(SAMPLE_UUID))

    def test_from_uuid_rejects_string(self) -> None:
        """Test that from_uuid requires a UUID instance."""
        with pytest.raises(TypeError):
            ShortGuid.from_uuid(SAMPLE_UUID_STRING)  # type: ignore[arg-type]

    def test_from_string_short_form(self) -> None:
        """Test from_string with a ShortGuid."""
        assert_is_sample(ShortGuid.from_string(SAMPLE_SHORT_GUID))

    def test_from_string_long_form(self) -> None:
        """Test from_string with a canonical UUID."""
        assert_is_sample(ShortGuid.from_string(SAMPLE_UUID_STRING))

    def test_from_string_empty(self) -> None:
        """Test that an empty string gives EMPTY."""
        assert ShortGuid.from_string("") is ShortGuid.EMPTY

    def test_from_string_garbage(self) -> None:
        """Test that garbage raises ParseError."""
        with pytest.raises(ParseError):
            ShortGuid.from_string("Nothing to see here...")

    def test_new(self) -> None:
        """Test that new() gives distinct random ShortGuids."""
        first = ShortGuid.new()
        second = ShortGuid.new()

        assert first != second
        assert first.uuid.version == 4
        assert len(first.value) == 22


class TestShortGuidEmpty:
    """Tests for ShortGuid.EMPTY."""

    def test_empty_is_nil(self) -> None:
        """Test that EMPTY wraps the nil UUID."""
        assert ShortGuid.EMPTY.uuid == NIL
        assert ShortGuid.EMPTY.value == "A" * 22
        assert ShortGuid.EMPTY.is_empty is True

    def test_empty_equals_nil(self) -> None:
        """Test EMPTY equality with the nil UUID in both directions."""
        assert ShortGuid.EMPTY == NIL
        assert NIL == ShortGuid.EMPTY

    def test_non_empty(self) -> None:
        """Test is_empty for a real identifier."""
        assert ShortGuid(SAMPLE_SHORT_GUID).is_empty is False


class TestShortGuidEquality:
    """Tests for ShortGuid equality."""

    def test_equals_self(self) -> None:
        """Test equality with itself and an equal instance."""
        short_guid = ShortGuid(SAMPLE_SHORT_GUID)

        assert short_guid == short_guid
        assert short_guid == ShortGuid.from_uuid(SAMPLE_UUID)
        assert short_guid.equals(ShortGuid.from_string(SAMPLE_UUID_STRING))

    def test_equals_uuid_symmetric(self) -> None:
        """Test that ShortGuid/UUID equality agrees both ways."""
        short_guid = ShortGuid(SAMPLE_SHORT_GUID)

        assert short_guid == SAMPLE_UUID
        assert SAMPLE_UUID == short_guid
        assert short_guid.equals_uuid(SAMPLE_UUID)
        assert short_guid != uuid.uuid4()
        assert uuid.uuid4() != short_guid

    def test_equals_strings(self) -> None:
        """Test equality with both string forms."""
        short_guid = ShortGuid(SAMPLE_SHORT_GUID)

        assert short_guid == SAMPLE_SHORT_GUID
        assert short_guid == SAMPLE_UUID_STRING
        assert SAMPLE_SHORT_GUID == short_guid
        assert SAMPLE_UUID_STRING == short_guid
        assert short_guid.equals_string(SAMPLE_UUID_STRING.upper())

    def test_not_equal_to_alias(self) -> None:
        """Test that a non-canonical encoding is not equal."""
        assert ShortGuid(SAMPLE_SHORT_GUID) != ALIASED_SHORT_GUID

    def test_not_equal_to_garbage(self) -> None:
        """Test that unparseable strings are not equal."""
        assert ShortGuid(SAMPLE_SHORT_GUID) != "Nothing to see here..."

    def test_empty_equals_empty_string(self) -> None:
        """Test that EMPTY equals the empty string."""
        assert ShortGuid.EMPTY == ""
        assert ShortGuid(SAMPLE_SHORT_GUID) != ""

    def test_not_equal_to_other_types(self) -> None:
        """Test comparison with None and unrelated types."""
        short_guid = ShortGuid(SAMPLE_SHORT_GUID)

        assert short_guid != None  # noqa: E711
        assert not short_guid.equals(None)
        assert short_guid != 42
        assert not short_guid.equals(SAMPLE_UUID.int)


class TestShortGuidHashing:
    """Tests for ShortGuid hashing."""

    def test_hash_matches_uuid(self) -> None:
        """Test that the hash is the UUID's hash."""
        assert hash(ShortGuid(SAMPLE_SHORT_GUID)) == hash(SAMPLE_UUID)

    def test_set_deduplicates(self) -> None:
        """Test that equal ShortGuids collapse in a set."""
        values = {
            ShortGuid(SAMPLE_SHORT_GUID),
            ShortGuid.from_uuid(SAMPLE_UUID),
            ShortGuid(ALIASED_SHORT_GUID, strict=False),
        }

        assert len(values) == 1

    def test_dict_lookup_by_uuid(self) -> None:
        """Test that a UUID finds a ShortGuid key."""
        lookup = {ShortGuid(SAMPLE_SHORT_GUID): "sample"}

        assert lookup[SAMPLE_UUID] == "sample"


class TestShortGuidOrdering:
    """Tests for ShortGuid ordering."""

    def test_ordering(self) -> None:
        """Test ordering follows the UUIDs."""
        low = ShortGuid.from_uuid(uuid.UUID(int=1))
        high = ShortGuid.from_uuid(uuid.UUID(int=2))

        assert low < high
        assert high > low
        assert low <= low
        assert sorted([high, low]) == [low, high]

    def test_ordering_against_uuid(self) -> None:
        """Test ordering against a raw UUID."""
        low = ShortGuid.from_uuid(uuid.UUID(int=1))

        assert low < uuid.UUID(int=2)
        assert uuid.UUID(int=2) > low

    def test_ordering_unsupported_type(self) -> None:
        """Test that ordering against a string raises TypeError."""
        with pytest.raises(TypeError):
            ShortGuid.EMPTY < "AAAAAAAAAAAAAAAAAAAAAA"  # noqa: B015


class TestShortGuidDisplay:
    """Tests for string conversion."""

    def test_str(self) -> None:
        """Test that str() gives the encoded value."""
        assert str(ShortGuid(SAMPLE_SHORT_GUID)) == SAMPLE_SHORT_GUID

    def test_repr(self) -> None:
        """Test repr()."""
        assert repr(ShortGuid(SAMPLE_SHORT_GUID)) == f"ShortGuid('{SAMPLE_SHORT_GUID}')"
