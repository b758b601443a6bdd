"""PostgreSQL implementation of Comment repository."""

import time
from collections.abc import Iterable

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.error import StorageError
from discuss.domain.model import Comment, CommentDraft
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, TrackerId
from discuss.persistence.mappers import comment_to_dict, row_to_comment
from discuss.persistence.repository.errors import lookup_errors, write_errors
from discuss.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession, entity_type: str = "node") -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            entity_type: Entity type that thread comments are attached under
        """
        self.session = session
        self.entity_type = entity_type

    async def find_by_owner(self, owner_id: TrackerId) -> list[CommentId]:
        """Find ids of all comments attached to a tracker."""
        stmt = (
            select(comments_table.c.cid)
            .where(comments_table.c.entity_id == owner_id)
            .where(comments_table.c.entity_type == self.entity_type)
            .order_by(comments_table.c.cid)
        )
        with lookup_errors("find comments by owner"):
            result = await self.session.execute(stmt)
        return [CommentId(cid) for cid in result.scalars().all()]

    async def find_by_id(self, comment_id: CommentId) -> list[CommentId]:
        """Find a comment id."""
        stmt = select(comments_table.c.cid).where(comments_table.c.cid == comment_id)
        with lookup_errors("find comment by id"):
            result = await self.session.execute(stmt)
        return [CommentId(cid) for cid in result.scalars().all()]

    async def load_many(
        self, comment_ids: Iterable[CommentId]
    ) -> dict[CommentId, Comment]:
        """Load comments with a single IN query."""
        ids = list(set(comment_ids))
        if not ids:
            return {}
        stmt = select(comments_table).where(comments_table.c.cid.in_(ids))
        with lookup_errors("load comments"):
            result = await self.session.execute(stmt)
        comments = [row_to_comment(row._asdict()) for row in result.fetchall()]
        return {comment.cid: comment for comment in comments}

    async def create(self, draft: CommentDraft) -> Comment:
        """Insert a comment and return it with its assigned id."""
        now = int(time.time())
        values = {**draft.model_dump(), "created": now, "changed": now}
        stmt = insert(comments_table).values(**values).returning(comments_table)
        with write_errors("create comment"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict())

    async def save(self, comment: Comment) -> Comment:
        """Update an existing comment."""
        values = comment_to_dict(comment)
        values.pop("cid")
        values["changed"] = int(time.time())
        stmt = (
            update(comments_table)
            .where(comments_table.c.cid == comment.cid)
            .values(**values)
            .returning(comments_table)
        )
        with write_errors("save comment"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        if row is None:
            raise StorageError(f"Comment {comment.cid} no longer exists")
        return row_to_comment(row._asdict())

    async def delete(self, comments: Iterable[Comment]) -> None:
        """Delete comments with a single statement."""
        ids = [comment.cid for comment in comments]
        if not ids:
            return
        stmt = delete(comments_table).where(comments_table.c.cid.in_(ids))
        with write_errors("delete comments"):
            await self.session.execute(stmt)
