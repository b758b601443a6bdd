"""Publish comment use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.error import NotFoundError
from discuss.domain.service import CommentService
from discuss.domain.value import CommentId

# Publishing is not offered yet; the endpoint answers with a notice instead.
PUBLISHING_ENABLED = False


class PublishCommentRequest(BaseModel):
    """Publish comment request."""

    comment_id: int


class PublishCommentResponse(BaseModel):
    """Publish comment response."""

    success: str | None = None
    comment_id: int | None = None
    message: str


class PublishCommentUseCase(BaseUseCase):
    """Use case for publishing a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: PublishCommentRequest) -> PublishCommentResponse:
        if not PUBLISHING_ENABLED:
            return PublishCommentResponse(message="Endpoint is not implemented")

        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        if comment is None:
            raise NotFoundError("Comment", str(request.comment_id))
        await self.comment_service.publish_comment(comment)

        return PublishCommentResponse(
            success="1",
            comment_id=request.comment_id,
            message="Comment published successfully",
        )
