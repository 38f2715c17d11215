"""Container construction."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from ranker.util.di import Component, build_providers


def create_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the container; production everywhere unless components are mocked."""
    return make_async_container(*build_providers(mocked), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    setup_dishka(container, app)
