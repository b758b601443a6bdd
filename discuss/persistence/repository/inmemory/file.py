"""In-memory file repository for testing."""

from collections.abc import Iterable

from discuss.domain.model.file import StoredFile
from discuss.domain.repository.file import FileRepository
from discuss.domain.value import FileId


class InMemoryFileRepository(FileRepository):
    """In-memory implementation of FileRepository for testing."""

    def __init__(self) -> None:
        self._files: dict[FileId, StoredFile] = {}
        self.load_calls = 0

    async def load_many(self, file_ids: Iterable[FileId]) -> dict[FileId, StoredFile]:
        """Load file records, counting each call as one round trip."""
        self.load_calls += 1
        return {fid: self._files[fid] for fid in file_ids if fid in self._files}

    async def save(self, stored_file: StoredFile) -> StoredFile:
        """Save or update a file record."""
        self._files[stored_file.fid] = stored_file
        return stored_file
