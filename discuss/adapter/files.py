"""Public URL generation for stored files."""

from urllib.parse import quote

from discuss.config import FileSettings
from discuss.domain.model.file import StoredFile
from discuss.domain.service import FileUrlGenerator

PUBLIC_SCHEME = "public://"


class PublicFileUrlGenerator(FileUrlGenerator):
    """Maps ``public://`` URIs under the configured public base URL.

    URIs with any other scheme are assumed to be absolute already.
    """

    def __init__(self, settings: FileSettings) -> None:
        self.base_url = settings.public_base_url.rstrip("/")

    def file_url(self, stored_file: StoredFile) -> str:
        uri = stored_file.uri
        if uri.startswith(PUBLIC_SCHEME):
            return f"{self.base_url}/{quote(uri[len(PUBLIC_SCHEME):])}"
        return uri
