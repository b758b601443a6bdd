"""Mappers for converting between database rows and domain records."""

from typing import Any, Dict

from discuss.domain.model import Comment, StoredFile, Tracker, UserAccount
from discuss.domain.value import BadgeId, CommentId, FileId, TrackerId, UserId


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment record."""
    return Comment(
        cid=CommentId(row["cid"]),
        pid=CommentId(row["pid"]) if row.get("pid") else None,
        uid=UserId(row["uid"]),
        entity_id=TrackerId(row["entity_id"]),
        entity_type=row["entity_type"],
        field_name=row["field_name"],
        comment_type=row["comment_type"],
        subject=row.get("subject"),
        body=row.get("body"),
        is_private=row.get("is_private"),
        status=row["status"],
        created=row["created"],
        changed=row["changed"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment record to database dict."""
    return comment.model_dump()


def row_to_tracker(row: Dict[str, Any]) -> Tracker:
    """Convert database row to Tracker record."""
    return Tracker(
        id=TrackerId(row["id"]),
        kind=row["kind"],
        title=row.get("title"),
        source_id=row["source_id"],
        is_locked=row["is_locked"],
        status=row["status"],
    )


def row_to_user_account(row: Dict[str, Any]) -> UserAccount:
    """Convert database row to UserAccount record."""
    return UserAccount(
        uid=UserId(row["uid"]),
        name=row.get("name"),
        profile_image_id=(
            FileId(row["profile_image_id"]) if row.get("profile_image_id") else None
        ),
        points=row.get("points"),
        badge_ids=[BadgeId(b) for b in row.get("badge_ids") or []],
    )


def row_to_file(row: Dict[str, Any]) -> StoredFile:
    """Convert database row to StoredFile record."""
    return StoredFile(
        fid=FileId(row["fid"]),
        uri=row["uri"],
        filename=row.get("filename"),
    )
