"""PostgreSQL implementation of Tracker repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Tracker, TrackerDraft
from discuss.domain.repository import TrackerRepository
from discuss.domain.value import TrackerId
from discuss.persistence.mappers import row_to_tracker
from discuss.persistence.repository.errors import lookup_errors, write_errors
from discuss.persistence.tables import trackers_table


class PostgresTrackerRepository(TrackerRepository):
    """PostgreSQL implementation of TrackerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_active_by_source(
        self, kind: str, source_id: str
    ) -> list[TrackerId]:
        """Find active trackers for a source, oldest first."""
        stmt = (
            select(trackers_table.c.id)
            .where(trackers_table.c.kind == kind)
            .where(trackers_table.c.status.is_(True))
            .where(trackers_table.c.source_id == source_id)
            .order_by(trackers_table.c.id)
        )
        with lookup_errors("find trackers by source"):
            result = await self.session.execute(stmt)
        return [TrackerId(tid) for tid in result.scalars().all()]

    async def create(self, draft: TrackerDraft) -> Tracker:
        """Insert a tracker and return it with its assigned id."""
        stmt = (
            insert(trackers_table).values(**draft.model_dump()).returning(trackers_table)
        )
        with write_errors("create tracker"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_tracker(row._asdict())
