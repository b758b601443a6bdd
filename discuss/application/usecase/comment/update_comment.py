"""Update comment use case."""

from typing import Any

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.error import NotFoundError, ValidationError
from discuss.domain.model import CommentView
from discuss.domain.service import CommentService, transform_comment
from discuss.domain.value import CommentId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    raw: str | None = None
    private: bool | None = None
    cid: Any = None


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    success: str = "1"
    comment_id: int
    comment: CommentView
    message: str = "Comment updated successfully"


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's body and private flag.

    Any caller may edit any comment; ownership is not checked here.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        The body is replaced only when ``raw`` is non-empty. The private
        flag is always written; a missing value clears it.

        Raises:
            NotFoundError: If the comment does not exist
            ValidationError: If a comment id is supplied in the body
            StorageError: If the write fails
        """
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        if comment is None:
            raise NotFoundError("Comment", str(request.comment_id))

        if request.cid:
            raise ValidationError("Comment ID should not be provided.")

        updated = await self.comment_service.update_comment(
            comment,
            body=request.raw or None,
            is_private=bool(request.private),
        )

        return UpdateCommentResponse(
            comment_id=request.comment_id,
            comment=transform_comment(updated),
        )
