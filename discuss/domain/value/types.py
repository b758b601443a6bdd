"""Domain value objects."""

from enum import Enum

from pydantic import field_validator

from discuss.domain.value.common import RootValueObject, ValueObject
from discuss.domain.value.identifiers import UserId

DUBLIN_CORE_PREFIX = "dc:"


class CommentFlag(str, Enum):
    """Display flags attached to a comment view."""

    PRIVATE = "private"


class SourceId(RootValueObject[str]):
    """Raw identifier of the commented-on content.

    Either a canonical URL or a ``dc:``-prefixed Dublin Core identifier.
    The value is carried verbatim; the prefix only labels its origin.
    """

    @field_validator("root")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Validate the identifier is not empty."""
        if not v:
            raise ValueError("Source identifier cannot be empty")
        return v

    @property
    def is_dublin_core(self) -> bool:
        """Whether the identifier is a Dublin Core id rather than a URL."""
        return self.root.startswith(DUBLIN_CORE_PREFIX)


class RequestContext(ValueObject):
    """Identity of the caller for a single request."""

    user_id: UserId
    roles: tuple[str, ...] = ()

    def has_role(self, role: str) -> bool:
        """Check whether the caller holds a role."""
        return role in self.roles
