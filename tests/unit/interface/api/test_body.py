"""Unit tests for request body decoding."""

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from discuss.interface.api.body import describe_invalid_fields, parse_json_body


class TestParseJsonBody:
    """Tests for parse_json_body."""

    def test_object_body(self):
        """A JSON object should decode."""
        body = parse_json_body(b'{"raw": "Hi", "extra": 1}')

        assert body.ok
        assert body.pick("raw", "subject") == {"raw": "Hi"}

    def test_malformed_json(self):
        """Invalid JSON should give an error instead of raising."""
        body = parse_json_body(b'{"raw": ')

        assert not body.ok
        assert body.error.startswith("Malformed JSON")

    @pytest.mark.parametrize("raw", [b"", b"nope", b"{'raw': 1}"])
    def test_invalid_json_variants(self, raw):
        """Empty, non-JSON and loosely quoted bodies should be malformed."""
        body = parse_json_body(raw)

        assert body.error.startswith("Malformed JSON: ")
        assert body.data is None

    def test_nested_values_kept(self):
        """Nested values should come through as plain Python objects."""
        body = parse_json_body(b'{"raw": "Hi", "meta": {"tags": ["a", 1]}}')

        assert body.data == {"raw": "Hi", "meta": {"tags": ["a", 1]}}

    @pytest.mark.parametrize("raw", [b"[1, 2]", b'"text"', b"null"])
    def test_non_object_json(self, raw):
        """JSON values other than objects should be rejected."""
        body = parse_json_body(raw)

        assert body.error == "Request body must be a JSON object"
        assert body.pick("raw") == {}


class TestDescribeInvalidFields:
    """Tests for describe_invalid_fields."""

    def test_names_the_field(self):
        """The message should name each rejected field."""

        class Payload(BaseModel):
            pid: int

        with pytest.raises(PydanticValidationError) as exc_info:
            Payload(pid="abc")

        message = describe_invalid_fields(exc_info.value)
        assert message.startswith("Invalid request body (")
        assert "pid" in message
