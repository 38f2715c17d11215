"""Fixtures for end-to-end API tests.

The app runs against the mocked container, so no database is needed.
"""

import pytest
from fastapi.testclient import TestClient

from ranker.application.usecase.restaurant import (
    SeedCatalogRequest,
    SeedCatalogUseCase,
)
from ranker.domain.service import Mailer
from ranker.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def container():
    """Fresh mocked container per test."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client backed by the test container."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def seeded(client, container):
    """Seed the default catalog and return it (in catalog order)."""

    async def _seed():
        async with container() as request_container:
            use_case = await request_container.get(SeedCatalogUseCase)
            return await use_case.execute(SeedCatalogRequest())

    return client.portal.call(_seed).restaurants


@pytest.fixture
def mailer(client, container):
    """The mock mailer shared with the running app."""
    return client.portal.call(container.get, Mailer)
