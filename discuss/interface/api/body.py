"""JSON request body decoding.

Routes read the raw body and decode it here so that malformed input comes
back as a value the route can answer with, instead of an exception.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

_JSON_OBJECT = TypeAdapter(dict[str, Any])


@dataclass(frozen=True)
class ParsedBody:
    """Result of decoding a request body: either ``data`` or ``error``."""

    data: dict[str, Any] | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the body decoded to a JSON object."""
        return self.error is None

    def pick(self, *keys: str) -> dict[str, Any]:
        """Subset of the decoded object limited to ``keys``."""
        data = self.data or {}
        return {key: data[key] for key in keys if key in data}


def parse_json_body(raw: bytes) -> ParsedBody:
    """Decode a JSON object request body.

    Args:
        raw: Request body bytes

    Returns:
        Parsed body with the decoded object, or with an error message
    """
    try:
        return ParsedBody(data=_JSON_OBJECT.validate_json(raw))
    except PydanticValidationError as e:
        error = e.errors()[0]
        if error["type"] == "json_invalid":
            return ParsedBody(error=f"Malformed JSON: {error['msg']}")
        return ParsedBody(error="Request body must be a JSON object")


def describe_invalid_fields(error: PydanticValidationError) -> str:
    """Short human-readable description of rejected body fields."""
    problems = [
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in error.errors()
    ]
    return "Invalid request body (" + "; ".join(problems) + ")"
