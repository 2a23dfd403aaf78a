#!/usr/bin/env python3
"""Apply Alembic migrations up to head."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from quill.config import Settings
from quill.util.logging import get_logger, setup_logging
from quill.util.observability import configure_logfire

logger = get_logger(__name__)


def main() -> int:
    """Run migrations and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logger.info("Upgrading database schema to head")
        logfire.info("Starting database migrations")

        command.upgrade(Config("alembic.ini"), "head")

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
