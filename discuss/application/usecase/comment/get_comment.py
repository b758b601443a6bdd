"""Get single comment use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.model import CommentView
from discuss.domain.service import CommentService, transform_comment
from discuss.domain.value import CommentId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: int


class GetCommentResponse(BaseModel):
    """Get comment response: zero or one comment."""

    comments: list[CommentView]


class GetCommentUseCase(BaseUseCase):
    """Use case for fetching a single comment by id."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        comments = await self.comment_service.get_comments_by_id(
            CommentId(request.comment_id)
        )
        return GetCommentResponse(
            comments=[transform_comment(comment) for comment in comments]
        )
