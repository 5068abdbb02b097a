#!/usr/bin/env python3
"""Apply Alembic migrations up to head, reporting failures to Logfire."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory

from blogcraft.config import Settings
from blogcraft.util.logging import setup_logging
from blogcraft.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> int:
    """Upgrade the database schema to the latest revision."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    alembic_cfg = Config(str(ALEMBIC_INI))
    head = ScriptDirectory.from_config(alembic_cfg).get_current_head()

    with logfire.span("run_migrations", target=head, environment=settings.environment):
        try:
            command.upgrade(alembic_cfg, "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=head,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the deploy fails instead of serving a stale schema
            raise

    logfire.info("Database schema is at head", revision=head)
    return 0


if __name__ == "__main__":
    sys.exit(main())
