"""Delete comment use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import CommentService
from discuss.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int


class DeleteCommentResponse(BaseModel):
    """Delete comment response.

    ``success`` and ``comment_id`` are omitted when nothing was deleted.
    """

    success: str | None = None
    comment_id: int | None = None
    message: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment.

    Deleting a comment that does not exist succeeds with a message.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        deleted = await self.comment_service.delete_comment(
            CommentId(request.comment_id)
        )
        if not deleted:
            return DeleteCommentResponse(message="Comment does not exist")

        return DeleteCommentResponse(
            success="1",
            comment_id=request.comment_id,
            message="Comment deleted successfully",
        )
