"""Unit tests for TrackerService."""

import pytest

from discuss.domain.model import TrackerDraft
from discuss.domain.repository import TrackerRepository
from discuss.domain.service import TrackerService
from discuss.domain.value import SourceId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestResolveContentId:
    """Tests for resolve_content_id."""

    @pytest.mark.asyncio
    async def test_resolves_created_tracker(self, unit_env):
        """A created tracker should be found by its source identifier."""
        tracker_service = await unit_env.get(TrackerService)
        tracker = await tracker_service.create_tracker(
            SourceId("https://example.org/a"), title="A", is_locked=False
        )

        resolved = await tracker_service.resolve_content_id("https://example.org/a")

        assert resolved == tracker.id

    @pytest.mark.asyncio
    async def test_unknown_or_missing_source(self, unit_env):
        """Unknown or undecodable sources should resolve to None."""
        tracker_service = await unit_env.get(TrackerService)

        assert await tracker_service.resolve_content_id("https://nowhere") is None
        assert await tracker_service.resolve_content_id(None) is None
        assert await tracker_service.resolve_content_id("") is None

    @pytest.mark.asyncio
    async def test_inactive_and_other_kinds_ignored(self, unit_env):
        """Inactive trackers and trackers of other kinds should not match."""
        tracker_service = await unit_env.get(TrackerService)
        tracker_repo = await unit_env.get(TrackerRepository)
        await tracker_repo.create(
            TrackerDraft(kind="commenttracker", source_id="dc:1", status=False)
        )
        await tracker_repo.create(TrackerDraft(kind="article", source_id="dc:1"))

        assert await tracker_service.resolve_content_id("dc:1") is None

    @pytest.mark.asyncio
    async def test_duplicate_trackers_first_wins(self, unit_env):
        """With several active trackers, the first created should be used."""
        tracker_service = await unit_env.get(TrackerService)
        first = await tracker_service.create_tracker(
            SourceId("dc:dup"), title=None, is_locked=False
        )
        await tracker_service.create_tracker(
            SourceId("dc:dup"), title=None, is_locked=False
        )

        assert await tracker_service.resolve_content_id("dc:dup") == first.id
