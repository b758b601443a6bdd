"""Stored file records."""

from typing import Optional

from discuss.domain.model.common import DomainModel
from discuss.domain.value import FileId


class StoredFile(DomainModel):
    """Stored file asset, addressed by a stream URI such as ``public://a.png``."""

    fid: FileId
    uri: str
    filename: Optional[str] = None
