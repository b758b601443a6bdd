"""Comment domain service."""

import logfire

from discuss.domain.model.comment import Comment, CommentDraft
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, TrackerId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def get_comments_for_tracker(
        self, tracker_id: TrackerId | None
    ) -> list[Comment]:
        """Get all comments attached to a tracker.

        Args:
            tracker_id: Tracker id, or None when the source has no tracker yet

        Returns:
            Comments in ascending cid order
        """
        if tracker_id is None:
            return []

        with logfire.span(
            "comment_service.get_comments_for_tracker", tracker_id=tracker_id
        ):
            cids = await self.comment_repository.find_by_owner(tracker_id)
            comments = await self.comment_repository.load_many(cids)
            logfire.info(
                "Comments retrieved for tracker",
                tracker_id=tracker_id,
                count=len(comments),
            )
            return [comments[cid] for cid in sorted(comments)]

    async def get_comments_by_id(self, comment_id: CommentId) -> list[Comment]:
        """Get a comment wrapped in a list (empty when it does not exist).

        Args:
            comment_id: Comment id

        Returns:
            Zero or one comment
        """
        with logfire.span("comment_service.get_comments_by_id", comment_id=comment_id):
            cids = await self.comment_repository.find_by_id(comment_id)
            comments = await self.comment_repository.load_many(cids)
            return list(comments.values())

    async def get_comment(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by id.

        Args:
            comment_id: Comment id

        Returns:
            Comment if found, None otherwise
        """
        comments = await self.comment_repository.load_many([comment_id])
        comment = comments.get(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=comment_id)
        return comment

    async def create_comment(self, draft: CommentDraft) -> Comment:
        """Store a new comment.

        Args:
            draft: Comment fields

        Returns:
            Created comment

        Raises:
            StorageError: If the store rejects the write
        """
        with logfire.span(
            "comment_service.create_comment",
            entity_id=draft.entity_id,
            uid=draft.uid,
            pid=draft.pid,
        ):
            comment = await self.comment_repository.create(draft)
            logfire.info(
                "Comment created",
                comment_id=comment.cid,
                entity_id=comment.entity_id,
                private=comment.is_private,
            )
            return comment

    async def update_comment(
        self, comment: Comment, body: str | None, is_private: bool
    ) -> Comment:
        """Update a comment's body and private flag.

        Args:
            comment: Comment to update
            body: New body, or None to keep the current one
            is_private: New private flag

        Returns:
            Saved comment

        Raises:
            StorageError: If the store rejects the write
        """
        with logfire.span("comment_service.update_comment", comment_id=comment.cid):
            changes: dict[str, object] = {"is_private": is_private}
            if body is not None:
                changes["body"] = body
            saved = await self.comment_repository.save(
                comment.model_copy(update=changes)
            )
            logfire.info(
                "Comment updated",
                comment_id=saved.cid,
                body_changed=body is not None,
                private=is_private,
            )
            return saved

    async def delete_comment(self, comment_id: CommentId) -> bool:
        """Delete a comment if it exists.

        Args:
            comment_id: Comment id

        Returns:
            True if a comment was deleted, False if it did not exist

        Raises:
            StorageError: If the store rejects the delete
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            comments = await self.comment_repository.load_many([comment_id])
            if not comments:
                logfire.info("Comment to delete does not exist", comment_id=comment_id)
                return False
            await self.comment_repository.delete(comments.values())
            logfire.info("Comment deleted", comment_id=comment_id)
            return True

    async def publish_comment(self, comment: Comment) -> Comment:
        """Mark a comment as published.

        Args:
            comment: Comment to publish

        Returns:
            Saved comment
        """
        with logfire.span("comment_service.publish_comment", comment_id=comment.cid):
            return await self.comment_repository.save(
                comment.model_copy(update={"status": 1})
            )
