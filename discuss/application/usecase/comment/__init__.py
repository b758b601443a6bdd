"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentResponse, GetCommentUseCase
from .get_thread import (
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    RequesterInfo,
)
from .publish_comment import (
    PublishCommentRequest,
    PublishCommentResponse,
    PublishCommentUseCase,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentResponse",
    "GetCommentUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "PublishCommentRequest",
    "PublishCommentResponse",
    "PublishCommentUseCase",
    "RequesterInfo",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
