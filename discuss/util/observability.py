"""Logfire tracing and structured logs.

Domain services log through logfire directly:

    logfire.info("Comment created", comment_id=comment.cid)

    with logfire.span("comment_service.create_comment", entity_id=entity_id):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from discuss import __version__
from discuss.config import Settings

SERVICE_NAME = "discuss-api"


def sends_to_logfire(settings: Settings) -> bool:
    """Whether telemetry leaves the process.

    An explicit ``send_to_logfire`` wins; otherwise a configured token
    turns cloud export on.
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process, before the app is imported."""
    send = sends_to_logfire(settings)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=__version__,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``; headers are not recorded."""
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run on ``engine``.

    Statements carry a SQL comment with the active span context.
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
