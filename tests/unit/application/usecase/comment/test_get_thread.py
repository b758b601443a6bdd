"""Unit tests for GetThreadUseCase."""

import asyncio
import json

import pytest

from discuss.application.usecase.comment import GetThreadRequest, GetThreadUseCase
from discuss.domain.error import DeadlineExceededError
from discuss.domain.repository import CommentRepository, UserRepository
from discuss.domain.service import (
    BadgeCatalog,
    CommentService,
    ProfileService,
    TrackerService,
)
from discuss.domain.value import RequestContext, SourceId, UserId
from discuss.util.codec import encode_source_id
from tests.conftest import make_account, make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

SOURCE = "https://example.org/articles/1"


def _context(user_id: int = 0, *roles: str) -> RequestContext:
    return RequestContext(user_id=UserId(user_id), roles=roles)


async def _seed_thread(unit_env) -> None:
    tracker_service = await unit_env.get(TrackerService)
    comment_repo = await unit_env.get(CommentRepository)
    user_repo = await unit_env.get(UserRepository)

    tracker = await tracker_service.create_tracker(
        SourceId(SOURCE), title="Article", is_locked=False
    )
    await comment_repo.save(make_comment(1, uid=10, entity_id=tracker.id))
    await comment_repo.save(make_comment(2, pid=1, uid=11, entity_id=tracker.id))
    await comment_repo.save(make_comment(3, pid=99, uid=12, entity_id=tracker.id))
    await comment_repo.save(
        make_comment(4, uid=10, entity_id=tracker.id, is_private=True)
    )
    await user_repo.save(make_account(10, "ada", points=120))
    await user_repo.save(make_account(11, "grace"))


class TestGetThreadUseCase:
    """Tests for GetThreadUseCase."""

    @pytest.mark.asyncio
    async def test_thread_envelope(self, unit_env):
        """The envelope should nest replies and join profiles."""
        # Arrange
        await _seed_thread(unit_env)
        use_case = await unit_env.get(GetThreadUseCase)
        token = encode_source_id(SOURCE)

        # Act
        response = await use_case.execute(
            GetThreadRequest(source_token=token, context=_context(11))
        )

        # Assert
        assert response.page == 0
        assert response.page_size == 20
        assert response.nid == token
        assert response.best_reply is None
        assert [node.cid for node in response.comments] == [1, 4]
        assert [child.cid for child in response.tree.children_of(1)] == [2]
        assert response.comment_count == 2
        assert response.comments[1].private == 1
        assert response.comments[1].flags == ["private"]

    @pytest.mark.asyncio
    async def test_rendered_json_nests_replies(self, unit_env):
        """The rendered envelope should carry replies under their parents."""
        # Arrange
        await _seed_thread(unit_env)
        use_case = await unit_env.get(GetThreadUseCase)

        # Act
        response = await use_case.execute(
            GetThreadRequest(source_token=encode_source_id(SOURCE), context=_context(11))
        )
        data = json.loads(response.to_json())

        # Assert
        assert data["comment_count"] == 2
        assert "tree" not in data
        assert [c["cid"] for c in data["comments"]] == [1, 4]
        reply = data["comments"][0]["children"][0]
        assert reply["cid"] == 2
        assert reply["pid"] == 1
        assert reply["children"] == []
        assert data["comments"][1]["children"] == []
        assert data["requester"]["uid"] == 11

    @pytest.mark.asyncio
    async def test_long_reply_chain(self, unit_env):
        """A chain of a thousand nested replies should render without error."""
        # Arrange
        depth = 1000
        tracker_service = await unit_env.get(TrackerService)
        comment_repo = await unit_env.get(CommentRepository)
        tracker = await tracker_service.create_tracker(
            SourceId(SOURCE), title="Article", is_locked=False
        )
        for cid in range(1, depth + 1):
            await comment_repo.save(
                make_comment(cid, pid=cid - 1 or None, entity_id=tracker.id)
            )
        use_case = await unit_env.get(GetThreadUseCase)

        # Act
        response = await use_case.execute(
            GetThreadRequest(source_token=encode_source_id(SOURCE), context=_context())
        )
        rendered = response.to_json()

        # Assert
        assert response.comment_count == 1
        assert [view.cid for view in response.tree.walk()] == list(range(1, depth + 1))
        assert rendered.count('"children":[') == depth
        assert rendered.count('"cid":') == depth
        assert rendered.endswith("]}" * (depth + 1))

    @pytest.mark.asyncio
    async def test_profiles_cover_authors_and_requester(self, unit_env):
        """Profiles should exist for every author, orphans included, and the requester."""
        # Arrange
        await _seed_thread(unit_env)
        use_case = await unit_env.get(GetThreadUseCase)

        # Act
        response = await use_case.execute(
            GetThreadRequest(source_token=encode_source_id(SOURCE), context=_context(50))
        )

        # Assert
        assert set(response.profiles) == {10, 11, 12, 50}
        assert response.profiles[10].username == "ada"
        assert response.profiles[10].badges == [2]
        assert response.requester.uid == 50
        assert response.requester.profile == response.profiles[50]

    @pytest.mark.asyncio
    async def test_requester_block(self, unit_env):
        """Requester block should report admin status and a fresh token."""
        # Arrange
        use_case = await unit_env.get(GetThreadUseCase)
        token = encode_source_id(SOURCE)

        # Act
        admin = await use_case.execute(
            GetThreadRequest(source_token=token, context=_context(1, "administrator"))
        )
        member = await use_case.execute(
            GetThreadRequest(source_token=token, context=_context(2, "authenticated"))
        )

        # Assert
        assert admin.requester.admin == 1
        assert member.requester.admin == 0
        assert admin.requester.token
        assert admin.requester.token != member.requester.token
        badge_catalog = await unit_env.get(BadgeCatalog)
        assert admin.badges == badge_catalog.all_badges()
        assert admin.requester.badges == admin.badges

    @pytest.mark.asyncio
    async def test_unknown_source_gives_empty_thread(self, unit_env):
        """A source without a tracker should give an empty thread."""
        use_case = await unit_env.get(GetThreadUseCase)

        response = await use_case.execute(
            GetThreadRequest(
                source_token=encode_source_id("dc:unknown"), context=_context()
            )
        )

        assert response.comments == []
        assert response.comment_count == 0
        assert set(response.profiles) == {0}

    @pytest.mark.asyncio
    async def test_undecodable_token_gives_empty_thread(self, unit_env):
        """An undecodable token should give an empty thread."""
        use_case = await unit_env.get(GetThreadUseCase)

        response = await use_case.execute(
            GetThreadRequest(source_token="%%%", context=_context())
        )

        assert response.comments == []
        assert response.nid == "%%%"

    @pytest.mark.asyncio
    async def test_deadline_exceeded(self, unit_env):
        """A slow lookup should fail with DeadlineExceededError."""
        # Arrange
        tracker_service = await unit_env.get(TrackerService)

        async def slow_resolve(source_id):
            await asyncio.sleep(5)

        tracker_service.resolve_content_id = slow_resolve
        use_case = GetThreadUseCase(
            tracker_service=tracker_service,
            comment_service=await unit_env.get(CommentService),
            profile_service=await unit_env.get(ProfileService),
            badge_catalog=await unit_env.get(BadgeCatalog),
            page_size=20,
            admin_role="administrator",
            timeout_seconds=0.05,
        )

        # Act & Assert
        with pytest.raises(DeadlineExceededError):
            await use_case.execute(
                GetThreadRequest(
                    source_token=encode_source_id(SOURCE), context=_context()
                )
            )
