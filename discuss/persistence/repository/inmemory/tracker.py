"""In-memory tracker repository for testing."""

from discuss.domain.model.tracker import Tracker, TrackerDraft
from discuss.domain.repository.tracker import TrackerRepository
from discuss.domain.value import TrackerId


class InMemoryTrackerRepository(TrackerRepository):
    """In-memory implementation of TrackerRepository for testing."""

    def __init__(self) -> None:
        self._trackers: dict[TrackerId, Tracker] = {}
        self._next_id = 1

    async def find_active_by_source(
        self, kind: str, source_id: str
    ) -> list[TrackerId]:
        """Find active trackers for a source in insertion order."""
        return [
            t.id
            for t in self._trackers.values()
            if t.kind == kind and t.status and t.source_id == source_id
        ]

    async def create(self, draft: TrackerDraft) -> Tracker:
        """Store a tracker under the next id."""
        tracker = Tracker(id=TrackerId(self._next_id), **draft.model_dump())
        self._next_id += 1
        self._trackers[tracker.id] = tracker
        return tracker
