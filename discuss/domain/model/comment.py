"""Comment records.

A comment is stored flat: threading is expressed only through ``pid``,
the id of the parent comment (None for a top-level comment).
"""

from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, TrackerId, UserId


class CommentDraft(DomainModel):
    """Fields for a comment that has not been stored yet.

    The store assigns ``cid`` and the timestamps on create.
    """

    entity_id: TrackerId
    uid: UserId
    pid: Optional[CommentId] = None
    subject: str
    body: str
    is_private: bool = True
    status: int = 1
    entity_type: str = "node"
    field_name: str = "field_c"
    comment_type: str = "page_comment"


class Comment(DomainModel):
    """Stored comment.

    Optional fields mirror what the store may leave unset on older rows.
    """

    cid: CommentId
    uid: UserId
    entity_id: TrackerId
    pid: Optional[CommentId] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    is_private: Optional[bool] = None
    status: int = 1
    entity_type: str = "node"
    field_name: str = "field_c"
    comment_type: str = "page_comment"
    created: int = Field(default=0, ge=0)  # Unix timestamp
    changed: int = Field(default=0, ge=0)  # Unix timestamp
