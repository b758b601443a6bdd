"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    PublishCommentRequest,
    PublishCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from discuss.domain.error import (
    DeadlineExceededError,
    LookupUnavailableError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from discuss.domain.model import CommentView
from discuss.domain.service import SessionResolver
from discuss.interface.api.body import describe_invalid_fields, parse_json_body
from discuss.interface.api.responses import error_response

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


@router.get("/thread/{source_token}", response_model=None)
async def get_thread(
    source_token: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    session_resolver: FromDishka[SessionResolver],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Get the comment thread for an encoded source identifier.

    Sources without a tracker return an empty thread.

    Args:
        source_token: Encoded source identifier
        get_thread_use_case: Get thread use case from DI
        session_resolver: Session resolution from DI
        auth_token: Session token from cookie (optional)

    Returns:
        Thread envelope with nested comments and author profiles, rendered
        without recursion so reply chains of any depth are served
    """
    request = GetThreadRequest(
        source_token=source_token, context=session_resolver.resolve(auth_token)
    )
    try:
        response = await get_thread_use_case.execute(request)
    except (LookupUnavailableError, DeadlineExceededError) as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    return Response(content=response.to_json(), media_type="application/json")


@router.post("/thread/{source_token}", response_model=CreateCommentResponse)
async def create_comment(
    source_token: str,
    http_request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    session_resolver: FromDishka[SessionResolver],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse | JSONResponse:
    """Post a comment to the thread of an encoded source identifier.

    Body: ``{raw, subject, pid?, entity_id?, private?}``. Comments are
    private unless ``private`` is given.

    Args:
        source_token: Encoded source identifier
        http_request: Incoming request (raw body)
        create_comment_use_case: Create comment use case from DI
        session_resolver: Session resolution from DI
        auth_token: Session token from cookie (optional)

    Returns:
        Created comment
    """
    body = parse_json_body(await http_request.body())
    if not body.ok:
        return error_response(status.HTTP_400_BAD_REQUEST, body.error)

    try:
        request = CreateCommentRequest(
            source_token=source_token,
            context=session_resolver.resolve(auth_token),
            **body.pick("raw", "subject", "pid", "entity_id", "private", "cid"),
        )
    except PydanticValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, describe_invalid_fields(e))

    try:
        return await create_comment_use_case.execute(request)
    except ValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except StorageError as e:
        logfire.warn("Comment insert rejected", error=str(e))
        return error_response(status.HTTP_406_NOT_ACCEPTABLE, str(e))
    except LookupUnavailableError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


@router.get("/{comment_id}", response_model=list[CommentView])
async def get_comment(
    comment_id: int,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> list[CommentView]:
    """Get a single comment.

    Args:
        comment_id: Comment id
        get_comment_use_case: Get comment use case from DI

    Returns:
        List with the comment, or an empty list if it does not exist
    """
    response = await get_comment_use_case.execute(
        GetCommentRequest(comment_id=comment_id)
    )
    return response.comments


@router.put("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: int,
    http_request: Request,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> UpdateCommentResponse | JSONResponse:
    """Update a comment's body and private flag.

    Body: ``{raw?, private}``.

    Args:
        comment_id: Comment id
        http_request: Incoming request (raw body)
        update_comment_use_case: Update comment use case from DI

    Returns:
        Updated comment
    """
    body = parse_json_body(await http_request.body())
    if not body.ok:
        return error_response(status.HTTP_400_BAD_REQUEST, body.error)

    try:
        request = UpdateCommentRequest(
            comment_id=comment_id, **body.pick("raw", "private", "cid")
        )
    except PydanticValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, describe_invalid_fields(e))

    try:
        return await update_comment_use_case.execute(request)
    except NotFoundError:
        return error_response(status.HTTP_404_NOT_FOUND, "Record not found")
    except ValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except (StorageError, LookupUnavailableError) as e:
        logfire.error("Comment update failed", comment_id=comment_id, error=str(e))
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


@router.delete("/{comment_id}")
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> JSONResponse:
    """Delete a comment.

    Deleting a missing comment succeeds with "Comment does not exist".

    Args:
        comment_id: Comment id
        delete_comment_use_case: Delete comment use case from DI

    Returns:
        Deletion acknowledgment
    """
    try:
        response = await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id)
        )
    except LookupUnavailableError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    except StorageError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    return JSONResponse(response.model_dump(exclude_none=True))


@router.post("/{comment_id}/publish")
async def publish_comment(
    comment_id: int,
    publish_comment_use_case: FromDishka[PublishCommentUseCase],
) -> JSONResponse:
    """Publish a comment (not available yet).

    Args:
        comment_id: Comment id
        publish_comment_use_case: Publish comment use case from DI

    Returns:
        Notice that the endpoint is not implemented
    """
    try:
        response = await publish_comment_use_case.execute(
            PublishCommentRequest(comment_id=comment_id)
        )
    except NotFoundError as e:
        return error_response(status.HTTP_404_NOT_FOUND, str(e))
    except (StorageError, LookupUnavailableError) as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    return JSONResponse(response.model_dump(exclude_none=True))
