#!/usr/bin/env python3
"""Upgrade the database schema to the latest alembic revision.

Exits non-zero on failure so deploys stop before the API starts on a
stale schema.
"""

from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from ranker.util.observability import bootstrap_process, reported_failure

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> None:
    bootstrap_process()
    with reported_failure("Schema upgrade failed"):
        with logfire.span("alembic upgrade head"):
            command.upgrade(Config(str(ALEMBIC_INI)), "head")
    logfire.info("Schema is at head")


if __name__ == "__main__":
    main()
