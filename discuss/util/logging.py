"""Standard library logging setup.

Application events go through logfire; this configures the stdlib loggers
used by uvicorn, SQLAlchemy, Alembic and the operational scripts.
"""

import logging
import sys

from discuss.config import Settings

_LEVELS = {
    "production": logging.WARNING,
    "staging": logging.INFO,
    "development": logging.INFO,
    "test": logging.WARNING,
}

# Chatty third-party loggers never go below WARNING
_QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "asyncpg")


def log_level(settings: Settings) -> int:
    """Log level for the environment; debug mode forces DEBUG."""
    if settings.debug:
        return logging.DEBUG
    return _LEVELS.get(settings.environment, logging.INFO)


def setup_logging(settings: Settings) -> None:
    """Send stdlib logs to stdout at the environment's level."""
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    logging.getLogger("discuss").setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, conventionally ``get_logger(__name__)``."""
    return logging.getLogger(name)
