"""Integration tests for the PostgreSQL repositories.

Require a migrated PostgreSQL reachable through DATABASE__URL.
Run with: pytest -m integration
"""

import asyncio

import pytest

from ranker.domain.repository import CommentRepository, RestaurantRepository
from ranker.domain.service import CommentService
from ranker.domain.value import VoteDelta
from tests.conftest import make_restaurant
from tests.di import build_test_container
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


class TestRestaurantRepositoryIntegration:
    """Integration tests for PostgresRestaurantRepository."""

    @pytest.mark.asyncio
    async def test_ranking_orders_by_score_then_insertion(self, integration_env):
        """Score decides the order; ties keep insertion order."""
        repo = await integration_env.get(RestaurantRepository)
        await repo.delete_all()
        tied_first = await repo.save(make_restaurant("Tied First", upvotes=1))
        leader = await repo.save(make_restaurant("Leader", upvotes=4))
        tied_second = await repo.save(make_restaurant("Tied Second", upvotes=2, downvotes=1))

        ranked = await repo.find_all_ranked()

        assert [r.id for r in ranked] == [leader.id, tied_first.id, tied_second.id]

    @pytest.mark.asyncio
    async def test_apply_vote_delta_refuses_negative(self, integration_env):
        """The guarded update leaves counters untouched when refused."""
        repo = await integration_env.get(RestaurantRepository)
        await repo.delete_all()
        restaurant = await repo.save(make_restaurant("Guarded"))

        result = await repo.apply_vote_delta(
            restaurant.id, VoteDelta(upvotes=-1, downvotes=1)
        )

        assert result is None
        stored = await repo.find_by_id(restaurant.id)
        assert stored.upvotes == 0
        assert stored.downvotes == 0

    @pytest.mark.asyncio
    async def test_delete_all_cascades_comments(self, integration_env):
        """Clearing restaurants removes their comments."""
        repo = await integration_env.get(RestaurantRepository)
        comment_repo = await integration_env.get(CommentRepository)
        comment_service = await integration_env.get(CommentService)
        await repo.delete_all()
        restaurant = await repo.save(make_restaurant("Doomed"))
        await comment_service.create_comment(restaurant.id, "Bye")

        deleted = await repo.delete_all()

        assert deleted == 1
        assert await comment_repo.count_by_restaurant(restaurant.id) == 0


@pytest.mark.asyncio
async def test_concurrent_votes_are_not_lost():
    """Votes in separate sessions all land (no lost updates)."""
    container = build_test_container(unmock={"persistence"})
    try:
        async with container() as setup:
            repo = await setup.get(RestaurantRepository)
            await repo.delete_all()
            restaurant = await repo.save(make_restaurant("Contested"))

        async def vote(delta: VoteDelta) -> None:
            async with container() as request_container:
                repo = await request_container.get(RestaurantRepository)
                await repo.apply_vote_delta(restaurant.id, delta)

        await asyncio.gather(
            *[vote(VoteDelta(upvotes=1)) for _ in range(8)],
            *[vote(VoteDelta(downvotes=1)) for _ in range(3)],
        )

        async with container() as check:
            repo = await check.get(RestaurantRepository)
            stored = await repo.find_by_id(restaurant.id)
            assert stored.upvotes == 8
            assert stored.downvotes == 3
            assert stored.score == 5
    finally:
        await container.close()
