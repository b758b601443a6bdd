"""Tracker routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from discuss.application.usecase.tracker import (
    CreateTrackerRequest,
    CreateTrackerResponse,
    CreateTrackerUseCase,
)
from discuss.domain.error import StorageError, ValidationError
from discuss.interface.api.body import describe_invalid_fields, parse_json_body
from discuss.interface.api.responses import error_response

router = APIRouter(prefix="/tracker", tags=["trackers"], route_class=DishkaRoute)


@router.post("/{source_token}", response_model=CreateTrackerResponse)
async def create_tracker(
    source_token: str,
    http_request: Request,
    create_tracker_use_case: FromDishka[CreateTrackerUseCase],
) -> CreateTrackerResponse | JSONResponse:
    """Create a comment tracker for an encoded source identifier.

    Body: ``{title?, is_locked?}``.

    Args:
        source_token: Encoded source identifier
        http_request: Incoming request (raw body)
        create_tracker_use_case: Create tracker use case from DI

    Returns:
        Creation acknowledgment
    """
    body = parse_json_body(await http_request.body())
    if not body.ok:
        return error_response(status.HTTP_400_BAD_REQUEST, body.error)

    try:
        request = CreateTrackerRequest(
            source_token=source_token, **body.pick("title", "is_locked")
        )
    except PydanticValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, describe_invalid_fields(e))

    try:
        return await create_tracker_use_case.execute(request)
    except ValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except StorageError as e:
        logfire.warn("Tracker insert rejected", error=str(e))
        return error_response(status.HTTP_406_NOT_ACCEPTABLE, str(e))
