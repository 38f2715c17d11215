"""Standard library logging for third-party packages.

Ranker code logs through logfire; uvicorn, SQLAlchemy and alembic still
use ``logging`` and are configured here.
"""

import logging
import sys

from ranker.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Loggers that are noisy at INFO; raised to INFO only in debug mode
CHATTY_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore", "asyncio")


def setup_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    chatty_level = logging.INFO if settings.debug else logging.WARNING
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(chatty_level)

    logging.getLogger(__name__).info(
        "Logging configured (environment=%s, level=%s)",
        settings.environment,
        logging.getLevelName(level),
    )
