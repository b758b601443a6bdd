"""Domain value objects."""

from discuss.domain.value.identifiers import (
    BadgeId,
    CommentId,
    FileId,
    TrackerId,
    UserId,
)
from discuss.domain.value.types import (
    DUBLIN_CORE_PREFIX,
    CommentFlag,
    RequestContext,
    SourceId,
)

__all__ = [
    # Identifiers
    "BadgeId",
    "CommentId",
    "FileId",
    "TrackerId",
    "UserId",
    # Types
    "DUBLIN_CORE_PREFIX",
    "CommentFlag",
    "RequestContext",
    "SourceId",
]
