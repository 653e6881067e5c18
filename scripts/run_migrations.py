#!/usr/bin/env python3
"""Bring the database schema to the latest alembic revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from civicfix.config import Settings
from civicfix.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def main(revision: str = "head") -> int:
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config(ALEMBIC_INI), revision)
        except Exception as e:
            logfire.error(
                "Migration failed",
                revision=revision,
                error=str(e),
                _exc_info=sys.exc_info(),
            )
            # Deploys must not start the API against a half-migrated schema
            raise
        logfire.info("Schema at revision", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
