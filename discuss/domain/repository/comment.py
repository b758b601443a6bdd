"""Comment repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from discuss.domain.model.comment import Comment, CommentDraft
from discuss.domain.value import CommentId, TrackerId


class CommentRepository(ABC):
    """Repository for stored comments.

    Lookups return ids; records are fetched separately with
    :meth:`load_many` so that any number of ids costs one round trip.
    """

    @abstractmethod
    async def find_by_owner(self, owner_id: TrackerId) -> list[CommentId]:
        """Find ids of all comments attached to a tracker.

        Args:
            owner_id: The tracker the comments belong to

        Returns:
            Comment ids in ascending order
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> list[CommentId]:
        """Find a comment id, returned in the same list shape as other lookups.

        Args:
            comment_id: The comment id to look up

        Returns:
            A single-element list if the comment exists, otherwise empty
        """
        pass

    @abstractmethod
    async def load_many(
        self, comment_ids: Iterable[CommentId]
    ) -> dict[CommentId, Comment]:
        """Load comments in one round trip.

        Args:
            comment_ids: Ids to load; unknown ids are skipped

        Returns:
            Mapping of id to comment
        """
        pass

    @abstractmethod
    async def create(self, draft: CommentDraft) -> Comment:
        """Store a new comment.

        Args:
            draft: Comment fields

        Returns:
            The stored comment with its assigned id and timestamps

        Raises:
            StorageError: If the store rejects the write
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Persist changes to an existing comment.

        Args:
            comment: Updated comment

        Returns:
            The saved comment with a refreshed ``changed`` timestamp

        Raises:
            StorageError: If the store rejects the write
        """
        pass

    @abstractmethod
    async def delete(self, comments: Iterable[Comment]) -> None:
        """Delete comments.

        Args:
            comments: Comments to delete

        Raises:
            StorageError: If the store rejects the delete
        """
        pass
