"""PostgreSQL repository implementations."""

from discuss.persistence.repository.comment import PostgresCommentRepository
from discuss.persistence.repository.file import PostgresFileRepository
from discuss.persistence.repository.tracker import PostgresTrackerRepository
from discuss.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresFileRepository",
    "PostgresTrackerRepository",
    "PostgresUserRepository",
]
