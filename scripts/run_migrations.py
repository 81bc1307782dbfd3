#!/usr/bin/env python3
"""Apply database migrations for the user service.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade (or downgrade) to revision
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from knot.config import Settings
from knot.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Run migrations and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"

    alembic_cfg = Config("alembic.ini")

    try:
        with logfire.span("migrations.run", target=target):
            if target == "base" or target.startswith("-"):
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)
        logfire.info("Database migrations completed", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            target=target,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
