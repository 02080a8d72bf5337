#!/usr/bin/env python3
"""Apply alembic migrations before the API starts.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c9a2b7d40
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from overflow.config import Settings
from overflow.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)

    revision = argv[0] if argv else "head"
    config = Config("alembic.ini")

    with logfire.span(
        "migrations.upgrade", revision=revision, environment=settings.environment
    ):
        try:
            command.upgrade(config, revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve against a stale schema
            raise

    logfire.info("Database migrated", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
