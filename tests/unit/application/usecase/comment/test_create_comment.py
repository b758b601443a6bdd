"""Unit tests for CreateCommentUseCase."""

import pytest

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from discuss.domain.error import StorageError, ValidationError
from discuss.domain.repository import CommentRepository
from discuss.domain.service import TrackerService
from discuss.domain.value import CommentId, RequestContext, SourceId, UserId
from discuss.util.codec import encode_source_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

SOURCE = "dc:10.1000/xyz123"


def _request(**fields) -> CreateCommentRequest:
    defaults = {
        "source_token": encode_source_id(SOURCE),
        "context": RequestContext(user_id=UserId(5), roles=("authenticated",)),
        "raw": "Nice result",
        "subject": "Re: result",
    }
    defaults.update(fields)
    return CreateCommentRequest(**defaults)


async def _create_tracker(unit_env):
    tracker_service = await unit_env.get(TrackerService)
    return await tracker_service.create_tracker(
        SourceId(SOURCE), title=None, is_locked=False
    )


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_creates_comment_on_resolved_tracker(self, unit_env):
        """The comment should attach to the tracker of the source."""
        # Arrange
        tracker = await _create_tracker(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        # Act
        response = await use_case.execute(_request())

        # Assert
        assert response.success == "1"
        assert response.message == "Comment inserted successfully"
        assert response.comment.uid == 5
        assert response.comment.raw == "Nice result"
        stored = (await comment_repo.load_many([response.comment.cid]))[
            response.comment.cid
        ]
        assert stored.entity_id == tracker.id
        assert stored.subject == "Re: result"
        assert stored.entity_type == "node"
        assert stored.comment_type == "page_comment"

    @pytest.mark.asyncio
    async def test_private_by_default(self, unit_env):
        """Comments without an explicit private flag should be private."""
        await _create_tracker(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        response = await use_case.execute(_request())

        assert response.comment.private == 1
        assert response.comment.flags == ["private"]

    @pytest.mark.asyncio
    async def test_explicit_public(self, unit_env):
        """private=False should create a public comment."""
        await _create_tracker(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        response = await use_case.execute(_request(private=False))

        assert response.comment.private == 0
        assert response.comment.flags == []

    @pytest.mark.asyncio
    async def test_reply_keeps_parent(self, unit_env):
        """A pid should be stored as the parent."""
        await _create_tracker(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)
        parent = await use_case.execute(_request())

        reply = await use_case.execute(_request(pid=parent.comment.cid))

        assert reply.comment.pid == CommentId(parent.comment.cid)

    @pytest.mark.asyncio
    async def test_explicit_entity_id_without_tracker(self, unit_env):
        """An entity_id in the body should be used when no tracker resolves."""
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        response = await use_case.execute(_request(entity_id=77))

        stored = (await comment_repo.load_many([response.comment.cid]))[
            response.comment.cid
        ]
        assert stored.entity_id == 77

    @pytest.mark.asyncio
    async def test_no_tracker_is_storage_error(self, unit_env):
        """Without a tracker or entity_id the comment cannot be stored."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(StorageError):
            await use_case.execute(_request())

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("fields", "message"),
        [
            ({"cid": 12}, "Comment ID should not be provided."),
            ({"raw": None}, "Comment body cannot be empty"),
            ({"raw": ""}, "Comment body cannot be empty"),
            ({"subject": None}, "Comment subject cannot be empty"),
            ({"raw": None, "subject": None}, "Comment body cannot be empty"),
        ],
    )
    async def test_validation(self, unit_env, fields, message):
        """Invalid requests should be rejected before anything is stored."""
        await _create_tracker(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        with pytest.raises(ValidationError, match=message):
            await use_case.execute(_request(**fields))

        assert comment_repo.load_calls == 0
        assert await comment_repo.find_by_owner(1) == []
