"""Unit tests for comment update, delete and publish use cases."""

import pytest

from discuss.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    PublishCommentRequest,
    PublishCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from discuss.domain.error import NotFoundError, ValidationError
from discuss.domain.repository import CommentRepository
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_updates_body_and_private(self, unit_env):
        """Body and private flag should both change."""
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(1, body="Old", is_private=False))
        use_case = await unit_env.get(UpdateCommentUseCase)

        response = await use_case.execute(
            UpdateCommentRequest(comment_id=1, raw="New", private=True)
        )

        assert response.success == "1"
        assert response.comment_id == 1
        assert response.message == "Comment updated successfully"
        assert response.comment.raw == "New"
        assert response.comment.private == 1

    @pytest.mark.asyncio
    async def test_missing_raw_keeps_body(self, unit_env):
        """Without raw only the private flag should change."""
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(1, body="Old", is_private=True))
        use_case = await unit_env.get(UpdateCommentUseCase)

        response = await use_case.execute(UpdateCommentRequest(comment_id=1))

        assert response.comment.raw == "Old"
        assert response.comment.private == 0

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        """Updating a missing comment should raise NotFoundError."""
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(UpdateCommentRequest(comment_id=404, raw="x"))

    @pytest.mark.asyncio
    async def test_cid_in_body_rejected(self, unit_env):
        """A comment id in the body should be rejected."""
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(1))
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(UpdateCommentRequest(comment_id=1, cid=1))


class TestGetCommentUseCase:
    """Tests for GetCommentUseCase."""

    @pytest.mark.asyncio
    async def test_existing_and_missing(self, unit_env):
        """Existing comments come back as a one-element list; missing as empty."""
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(3, pid=1, body="Reply"))
        use_case = await unit_env.get(GetCommentUseCase)

        found = await use_case.execute(GetCommentRequest(comment_id=3))
        missing = await use_case.execute(GetCommentRequest(comment_id=4))

        assert [c.cid for c in found.comments] == [3]
        assert found.comments[0].pid == 1
        assert found.comments[0].raw == "Reply"
        assert missing.comments == []


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_existing(self, unit_env):
        """Deleting should acknowledge with the comment id."""
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(8))
        use_case = await unit_env.get(DeleteCommentUseCase)

        response = await use_case.execute(DeleteCommentRequest(comment_id=8))

        assert response.success == "1"
        assert response.comment_id == 8
        assert response.message == "Comment deleted successfully"
        assert await comment_repo.find_by_id(8) == []

    @pytest.mark.asyncio
    async def test_delete_missing_is_benign(self, unit_env):
        """Deleting a missing comment should succeed with a message."""
        use_case = await unit_env.get(DeleteCommentUseCase)

        response = await use_case.execute(DeleteCommentRequest(comment_id=8))

        assert response.success is None
        assert response.message == "Comment does not exist"


class TestPublishCommentUseCase:
    """Tests for PublishCommentUseCase."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("comment_id", [1, 999])
    async def test_always_not_implemented(self, unit_env, comment_id):
        """Publishing should report that it is not implemented."""
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(1))
        use_case = await unit_env.get(PublishCommentUseCase)

        response = await use_case.execute(PublishCommentRequest(comment_id=comment_id))

        assert response.message == "Endpoint is not implemented"
        assert response.success is None
