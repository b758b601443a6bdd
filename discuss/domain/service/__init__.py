"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentTree, build_comment_tree, transform_comment
from .profile_service import (
    BadgeCatalog,
    FileUrlGenerator,
    ProfileService,
    coerce_points,
)
from .session_service import SessionResolver
from .tracker_service import TrackerService

__all__ = [
    "BadgeCatalog",
    "CommentService",
    "CommentTree",
    "FileUrlGenerator",
    "ProfileService",
    "Service",
    "SessionResolver",
    "TrackerService",
    "build_comment_tree",
    "coerce_points",
    "transform_comment",
]
