"""Tracker repository interface."""

from abc import ABC, abstractmethod

from discuss.domain.model.tracker import Tracker, TrackerDraft
from discuss.domain.value import TrackerId


class TrackerRepository(ABC):
    """Repository for trackers."""

    @abstractmethod
    async def find_active_by_source(
        self, kind: str, source_id: str
    ) -> list[TrackerId]:
        """Find active trackers of a kind for a source identifier.

        Args:
            kind: Tracker content kind
            source_id: Raw (decoded) source identifier

        Returns:
            Matching tracker ids in storage order
        """
        pass

    @abstractmethod
    async def create(self, draft: TrackerDraft) -> Tracker:
        """Store a new tracker.

        Raises:
            StorageError: If the store rejects the write
        """
        pass
