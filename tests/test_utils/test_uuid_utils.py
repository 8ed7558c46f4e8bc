"""Unit tests for UUID utilities."""

import uuid

from utils.uuid_utils import parse_uuid


class TestParseUuid:
    """Tests for parse_uuid function."""

    def test_parse_valid_uuid(self):
        """Should return the UUID for a canonical string."""
        value = "fc5d5ffb-36cc-4c8d-a288-f5215af7fb80"
        assert parse_uuid(value) == uuid.UUID(value)

    def test_parse_uuid_uppercase(self):
        """Should accept uppercase hex digits."""
        value = "FC5D5FFB-36CC-4C8D-A288-F5215AF7FB80"
        assert parse_uuid(value) == uuid.UUID(value.lower())

    def test_parse_uuid_with_whitespace(self):
        """Should ignore leading/trailing whitespace."""
        value = "  fc5d5ffb-36cc-4c8d-a288-f5215af7fb80  "
        assert parse_uuid(value) == uuid.UUID(value.strip())

    def test_parse_uuid_instance_passthrough(self):
        """Should return UUID instances unchanged."""
        value = uuid.uuid4()
        assert parse_uuid(value) is value

    def test_parse_invalid_string(self):
        """Should return None for strings that are not UUIDs."""
        assert parse_uuid("not-an-id") is None
        assert parse_uuid("fc5d5ffb-36cc-4c8d") is None

    def test_parse_empty_and_none(self):
        """Should return None for empty input."""
        assert parse_uuid("") is None
        assert parse_uuid(None) is None
