"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from discuss.config import Settings
from discuss.interface.api.responses import install_error_handlers
from discuss.interface.api.routes import comments, health, trackers
from discuss.util.di.container import create_container, setup_di
from discuss.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, scripts/start_app.py handles this.

    Args:
        container: DI container to serve requests from. Defaults to the
            production container.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Discuss API",
        description="Threaded comments for trackers, with author profiles and badges",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Session cookies travel cross-origin, so credentials must be allowed
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    install_error_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(trackers.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
