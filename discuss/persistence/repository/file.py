"""PostgreSQL implementation of File repository."""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import StoredFile
from discuss.domain.repository import FileRepository
from discuss.domain.value import FileId
from discuss.persistence.mappers import row_to_file
from discuss.persistence.repository.errors import lookup_errors
from discuss.persistence.tables import files_table


class PostgresFileRepository(FileRepository):
    """PostgreSQL implementation of FileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def load_many(self, file_ids: Iterable[FileId]) -> dict[FileId, StoredFile]:
        """Load file records with a single IN query."""
        ids = list(set(file_ids))
        if not ids:
            return {}
        stmt = select(files_table).where(files_table.c.fid.in_(ids))
        with lookup_errors("load files"):
            result = await self.session.execute(stmt)
        files = [row_to_file(row._asdict()) for row in result.fetchall()]
        return {stored.fid: stored for stored in files}
