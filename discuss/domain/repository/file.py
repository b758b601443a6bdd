"""Stored file repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from discuss.domain.model.file import StoredFile
from discuss.domain.value import FileId


class FileRepository(ABC):
    """Repository for stored files."""

    @abstractmethod
    async def load_many(self, file_ids: Iterable[FileId]) -> dict[FileId, StoredFile]:
        """Load file records in one round trip.

        Args:
            file_ids: Ids to load; unknown ids are skipped

        Returns:
            Mapping of id to file record
        """
        pass
