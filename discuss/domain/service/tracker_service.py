"""Tracker domain service."""

import logfire

from discuss.domain.model.tracker import Tracker, TrackerDraft
from discuss.domain.repository import TrackerRepository
from discuss.domain.value import SourceId, TrackerId

from .base import Service


class TrackerService(Service):
    """Resolves source identifiers to trackers and creates trackers."""

    def __init__(self, tracker_repository: TrackerRepository, tracker_kind: str) -> None:
        """Initialize tracker service.

        Args:
            tracker_repository: Tracker repository
            tracker_kind: Content kind that tracker records are stored under
        """
        self.tracker_repository = tracker_repository
        self.tracker_kind = tracker_kind

    async def resolve_content_id(self, source_id: str | None) -> TrackerId | None:
        """Find the active tracker for a raw source identifier.

        When several active trackers share a source identifier, the first
        in storage order is used.

        Args:
            source_id: Decoded source identifier, or None if decoding failed

        Returns:
            Tracker id, or None when no active tracker exists
        """
        if not source_id:
            return None

        with logfire.span("tracker_service.resolve_content_id", source_id=source_id):
            matches = await self.tracker_repository.find_active_by_source(
                self.tracker_kind, source_id
            )
            if not matches:
                logfire.info("No tracker for source", source_id=source_id)
                return None
            if len(matches) > 1:
                logfire.warn(
                    "Multiple active trackers for source",
                    source_id=source_id,
                    tracker_ids=matches,
                )
            return matches[0]

    async def create_tracker(
        self, source_id: SourceId, title: str | None, is_locked: bool
    ) -> Tracker:
        """Create an active tracker for a source identifier.

        Args:
            source_id: Raw source identifier
            title: Optional title
            is_locked: Whether the thread is locked

        Returns:
            Created tracker

        Raises:
            StorageError: If the store rejects the write
        """
        with logfire.span(
            "tracker_service.create_tracker",
            source_id=source_id.root,
            dublin_core=source_id.is_dublin_core,
        ):
            tracker = await self.tracker_repository.create(
                TrackerDraft(
                    kind=self.tracker_kind,
                    source_id=source_id.root,
                    title=title,
                    is_locked=is_locked,
                    status=True,
                )
            )
            logfire.info("Tracker created", tracker_id=tracker.id)
            return tracker
