"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ranker.config import Settings
from ranker.interface.api.error_handlers import register_error_handlers
from ranker.interface.api.routes import (
    comments,
    health,
    requests,
    restaurants,
    votes,
)
from ranker.util.di.container import create_container, setup_di
from ranker.util.observability import SERVICE_VERSION, instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API around ``container`` (the production wiring by default).

    Call ``configure_logfire`` first; instrumentation attaches to whatever
    logfire configuration is active.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Halal Hot Chicken Ranker API",
        description="Community ranking of halal hot chicken spots",
        version=SERVICE_VERSION,
    )

    instrument_fastapi(app_instance)

    # Voting is anonymous, so no credentials cross origins
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "Cache-Control"],
        max_age=600,
    )

    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(restaurants.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(requests.router)

    return app_instance


app = create_app()
