"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .file import InMemoryFileRepository
from .tracker import InMemoryTrackerRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryFileRepository",
    "InMemoryTrackerRepository",
    "InMemoryUserRepository",
]
