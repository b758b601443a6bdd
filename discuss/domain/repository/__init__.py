"""Repository interfaces.

Interfaces live in the domain layer; implementations live in
``discuss.persistence``.
"""

from discuss.domain.repository.comment import CommentRepository
from discuss.domain.repository.file import FileRepository
from discuss.domain.repository.tracker import TrackerRepository
from discuss.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "FileRepository",
    "TrackerRepository",
    "UserRepository",
]
