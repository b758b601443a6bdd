"""JSON error responses and application-wide error handlers."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an error response.

    Args:
        status_code: HTTP status
        message: Human-readable message

    Returns:
        ``{"error": message}`` response
    """
    return JSONResponse({"error": message}, status_code=status_code)


async def _handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = [
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in exc.errors()
    ]
    return error_response(status.HTTP_400_BAD_REQUEST, "; ".join(problems))


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def install_error_handlers(app: FastAPI) -> None:
    """Register handlers that keep every error in the ``{"error": ...}`` shape."""
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(Exception, _handle_unexpected)
