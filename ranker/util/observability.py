"""Logfire setup and instrumentation.

Application code logs through logfire directly:

    logfire.info("Vote applied", restaurant_id=str(restaurant_id), score=score)

    with logfire.span("vote_service.cast_vote", restaurant_id=str(restaurant_id)):
        ...
"""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from ranker.config import Settings
from ranker.util.logging import setup_logging

SERVICE_NAME = "ranker-backend"
SERVICE_VERSION = "0.1.0"


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process.

    Spans always go to the console; they are exported to Logfire cloud
    only when ``settings.observability.should_export`` is true.
    """
    observability = settings.observability
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=observability.should_export,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        exporting=observability.should_export,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health probes."""
    logfire.instrument_fastapi(app, excluded_urls="/health")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement, tagging the SQL with the current span."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


@contextmanager
def reported_failure(message: str) -> Iterator[None]:
    """Log any exception escaping the block to logfire, then re-raise it."""
    try:
        yield
    except Exception as e:
        logfire.error(
            message, error=str(e), error_type=type(e).__name__, _exc_info=True
        )
        raise


def bootstrap_process() -> Settings:
    """Load settings and set up logging and logfire for a process entry point."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)
    return settings
