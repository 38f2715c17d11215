"""Unit tests for RestaurantService."""

from uuid import uuid4

import pytest

from ranker.domain.repository import RestaurantRepository
from ranker.domain.service import RestaurantService
from ranker.domain.value import RestaurantId
from tests.conftest import make_restaurant
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRestaurantService:
    """Tests for catalog operations."""

    @pytest.mark.asyncio
    async def test_create_restaurant_starts_at_zero(self, unit_env):
        """New restaurants have no votes or comments."""
        restaurant_service = await unit_env.get(RestaurantService)

        restaurant = await restaurant_service.create_restaurant(
            name=" Birdside HTX ", website="https://birdsidehtx.com"
        )

        assert restaurant.name.root == "Birdside HTX"
        assert restaurant.upvotes == 0
        assert restaurant.downvotes == 0
        assert restaurant.score == 0
        assert restaurant.comment_count == 0

    @pytest.mark.asyncio
    async def test_get_missing_restaurant_returns_none(self, unit_env):
        """Unknown IDs yield None."""
        restaurant_service = await unit_env.get(RestaurantService)

        assert await restaurant_service.get_restaurant_by_id(RestaurantId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_list_ranked_orders_by_score(self, unit_env):
        """Highest score comes first."""
        restaurant_service = await unit_env.get(RestaurantService)
        restaurant_repo = await unit_env.get(RestaurantRepository)
        low = await restaurant_repo.save(make_restaurant("Low", downvotes=2))
        high = await restaurant_repo.save(make_restaurant("High", upvotes=7))
        mid = await restaurant_repo.save(make_restaurant("Mid", upvotes=1))

        ranked = await restaurant_service.list_ranked()

        assert [r.id for r in ranked] == [high.id, mid.id, low.id]

    @pytest.mark.asyncio
    async def test_clear_catalog_returns_count(self, unit_env):
        """Clearing reports how many restaurants were removed."""
        restaurant_service = await unit_env.get(RestaurantService)
        await restaurant_service.create_restaurant(name="One")
        await restaurant_service.create_restaurant(name="Two")

        deleted = await restaurant_service.clear_catalog()

        assert deleted == 2
        assert await restaurant_service.list_ranked() == []

    @pytest.mark.asyncio
    async def test_increment_comment_count(self, unit_env):
        """Comment count goes up by one."""
        restaurant_service = await unit_env.get(RestaurantService)
        restaurant = await restaurant_service.create_restaurant(name="Counted")

        await restaurant_service.increment_comment_count(restaurant.id)

        updated = await restaurant_service.get_restaurant_by_id(restaurant.id)
        assert updated.comment_count == 1
