#!/usr/bin/env python3
"""Apply database migrations, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from discuss.config import Settings
from discuss.util.logging import get_logger, setup_logging
from discuss.util.observability import configure_logfire

logger = get_logger(__name__)


def main(revision: str = "head") -> int:
    """Upgrade the schema to ``revision``."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logger.info("Upgrading schema to %s", revision)
    try:
        with logfire.span("migrations.upgrade", revision=revision):
            command.upgrade(Config("alembic.ini"), revision)
    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail loudly so the service never starts on a stale schema
        raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
