"""In-memory comment repository for testing."""

import time
from collections.abc import Iterable

from discuss.domain.error import StorageError
from discuss.domain.model.comment import Comment, CommentDraft
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.value import CommentId, TrackerId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, entity_type: str = "node") -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._next_cid = 1
        self.entity_type = entity_type
        self.load_calls = 0

    async def find_by_owner(self, owner_id: TrackerId) -> list[CommentId]:
        """Find ids of all comments attached to a tracker."""
        return sorted(
            c.cid
            for c in self._comments.values()
            if c.entity_id == owner_id and c.entity_type == self.entity_type
        )

    async def find_by_id(self, comment_id: CommentId) -> list[CommentId]:
        """Find a comment id."""
        return [comment_id] if comment_id in self._comments else []

    async def load_many(
        self, comment_ids: Iterable[CommentId]
    ) -> dict[CommentId, Comment]:
        """Load comments, counting each call as one round trip."""
        self.load_calls += 1
        return {
            cid: self._comments[cid] for cid in comment_ids if cid in self._comments
        }

    async def create(self, draft: CommentDraft) -> Comment:
        """Store a comment under the next id."""
        now = int(time.time())
        comment = Comment(
            cid=CommentId(self._next_cid),
            created=now,
            changed=now,
            **draft.model_dump(),
        )
        self._next_cid += 1
        self._comments[comment.cid] = comment
        return comment

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment.

        Saving a comment with an unseen id stores it as-is, which lets tests
        seed rows with fixed ids.
        """
        if comment.cid in self._comments:
            comment = comment.model_copy(update={"changed": int(time.time())})
        self._comments[comment.cid] = comment
        self._next_cid = max(self._next_cid, comment.cid + 1)
        return comment

    async def delete(self, comments: Iterable[Comment]) -> None:
        """Delete comments."""
        for comment in comments:
            if comment.cid not in self._comments:
                raise StorageError(f"Comment {comment.cid} does not exist")
            del self._comments[comment.cid]
