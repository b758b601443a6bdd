"""Create tracker use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.error import ValidationError
from discuss.domain.service import TrackerService
from discuss.domain.value import SourceId
from discuss.util.codec import decode_source_text


class CreateTrackerRequest(BaseModel):
    """Create tracker request."""

    source_token: str
    title: str | None = None
    is_locked: bool | None = None


class CreateTrackerResponse(BaseModel):
    """Create tracker response."""

    success: str = "1"
    message: str = "Comment tracker inserted successfully"


class CreateTrackerUseCase(BaseUseCase):
    """Use case for anchoring a new comment thread to a source identifier."""

    def __init__(self, tracker_service: TrackerService) -> None:
        self.tracker_service = tracker_service

    async def execute(self, request: CreateTrackerRequest) -> CreateTrackerResponse:
        """Execute create tracker flow.

        Raises:
            ValidationError: If the source token does not decode
            StorageError: If the write fails
        """
        source_id = decode_source_text(request.source_token)
        if not source_id:
            raise ValidationError("Invalid source identifier")

        await self.tracker_service.create_tracker(
            SourceId(source_id), title=request.title, is_locked=bool(request.is_locked)
        )
        return CreateTrackerResponse()
