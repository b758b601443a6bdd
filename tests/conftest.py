"""Test configuration and helpers."""

import time

import logfire

from discuss.domain.model import Comment, UserAccount
from discuss.domain.value import CommentId, TrackerId, UserId

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_comment(
    cid: int,
    pid: int | None = None,
    uid: int = 1,
    entity_id: int = 1,
    body: str | None = "Comment body",
    is_private: bool | None = False,
) -> Comment:
    """Helper to build stored comments with fixed ids.

    Args:
        cid: Comment id
        pid: Parent comment id, None for a top-level comment
        uid: Author id
        entity_id: Owning tracker id
        body: Comment text
        is_private: Stored private flag

    Returns:
        Comment with creation and change times set to now
    """
    now = int(time.time())
    return Comment(
        cid=CommentId(cid),
        pid=CommentId(pid) if pid is not None else None,
        uid=UserId(uid),
        entity_id=TrackerId(entity_id),
        subject="Subject",
        body=body,
        is_private=is_private,
        status=1,
        created=now,
        changed=now,
    )


def make_account(uid: int, name: str | None = None, **kwargs) -> UserAccount:
    """Helper to build stored user accounts."""
    return UserAccount(uid=UserId(uid), name=name, **kwargs)
