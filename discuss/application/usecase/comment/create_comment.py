"""Create comment use case."""

from typing import Any

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.config import CommentSettings
from discuss.domain.error import StorageError, ValidationError
from discuss.domain.model import CommentDraft, CommentView
from discuss.domain.service import CommentService, TrackerService, transform_comment
from discuss.domain.value import CommentId, RequestContext, TrackerId
from discuss.util.codec import decode_source_text


class CreateCommentRequest(BaseModel):
    """Create comment request.

    ``cid`` is accepted only so that a caller-supplied id can be rejected.
    """

    source_token: str
    context: RequestContext
    raw: str | None = None
    subject: str | None = None
    pid: int | None = None
    entity_id: int | None = None
    private: bool | None = None
    cid: Any = None


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    success: str = "1"
    comment: CommentView
    message: str = "Comment inserted successfully"


class CreateCommentUseCase(BaseUseCase):
    """Use case for posting a comment to a tracker's thread."""

    def __init__(
        self,
        comment_service: CommentService,
        tracker_service: TrackerService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            tracker_service: Tracker resolution
            comment_settings: Attachment metadata for new comments
        """
        self.comment_service = comment_service
        self.tracker_service = tracker_service
        self.comment_settings = comment_settings

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Comments are private unless the caller explicitly sets ``private``.

        Raises:
            ValidationError: If an id is supplied or body/subject are empty
            StorageError: If no tracker can own the comment or the write fails
        """
        if request.cid:
            raise ValidationError("Comment ID should not be provided.")
        if not request.raw:
            raise ValidationError("Comment body cannot be empty")
        if not request.subject:
            raise ValidationError("Comment subject cannot be empty")

        tracker_id = await self.tracker_service.resolve_content_id(
            decode_source_text(request.source_token)
        )
        entity_id = TrackerId(request.entity_id) if request.entity_id else tracker_id
        if entity_id is None:
            raise StorageError("No active comment tracker exists for this source")

        draft = CommentDraft(
            entity_id=entity_id,
            uid=request.context.user_id,
            pid=CommentId(request.pid) if request.pid else None,
            subject=request.subject,
            body=request.raw,
            is_private=True if request.private is None else request.private,
            status=1,
            entity_type=self.comment_settings.entity_type,
            field_name=self.comment_settings.field_name,
            comment_type=self.comment_settings.comment_type,
        )
        comment = await self.comment_service.create_comment(draft)

        return CreateCommentResponse(comment=transform_comment(comment))
