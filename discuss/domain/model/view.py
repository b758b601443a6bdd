"""API-facing views derived from stored records.

Views are built per request and never persisted.
"""

from typing import Optional

from discuss.domain.model.common import DomainModel
from discuss.domain.value import BadgeId, CommentFlag, CommentId, UserId


class CommentView(DomainModel):
    """Stable API shape of a single comment.

    Nesting is not part of the view; the comment tree keeps child links
    separately and renders them on output.
    """

    cid: CommentId
    pid: Optional[CommentId] = None
    uid: UserId
    created: int
    changed: int
    private: int = 0
    raw: str = ""
    flags: list[CommentFlag] = []


class UserProfileView(DomainModel):
    """Author profile joined into a thread response."""

    uid: UserId
    profile_img: str = ""
    points: int = 0
    username: str = ""
    full_name: str = ""
    initials: str = ""
    alt_img: str = ""
    badges: list[BadgeId] = []
