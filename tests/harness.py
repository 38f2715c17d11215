"""Fixture factory shared by unit and integration tests."""

import pytest_asyncio

from ranker.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Make a fixture that yields a request-scoped container.

    Everything is mocked unless named in ``unmock``; the container is
    closed after the test. Assign the result to a module-level name and
    request that name as a fixture:

        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_vote(unit_env):
            vote_service = await unit_env.get(VoteService)
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _env
