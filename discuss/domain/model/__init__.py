"""Domain records and views."""

from discuss.domain.model.badge import Badge
from discuss.domain.model.comment import Comment, CommentDraft
from discuss.domain.model.file import StoredFile
from discuss.domain.model.tracker import Tracker, TrackerDraft
from discuss.domain.model.user import UserAccount
from discuss.domain.model.view import CommentView, UserProfileView

__all__ = [
    "Badge",
    "Comment",
    "CommentDraft",
    "CommentView",
    "StoredFile",
    "Tracker",
    "TrackerDraft",
    "UserAccount",
    "UserProfileView",
]
