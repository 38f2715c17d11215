"""Restaurant catalog service."""

from datetime import datetime
from uuid import uuid4

import logfire

from ranker.domain.model.restaurant import Restaurant
from ranker.domain.repository import RestaurantRepository
from ranker.domain.value import RestaurantId, RestaurantName


class RestaurantService:
    """Reads the ranking and maintains the catalog.

    Vote counters are not touched here; see ``VoteService``.
    """

    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self.restaurant_repository = restaurant_repository

    async def get_restaurant_by_id(
        self, restaurant_id: RestaurantId
    ) -> Restaurant | None:
        return await self.restaurant_repository.find_by_id(restaurant_id)

    async def list_ranked(self) -> list[Restaurant]:
        """All restaurants, highest score first, ties in catalog order."""
        with logfire.span("restaurant_service.list_ranked") as span:
            restaurants = await self.restaurant_repository.find_all_ranked()
            span.set_attribute("count", len(restaurants))
            return restaurants

    async def create_restaurant(
        self,
        name: str,
        description: str = "",
        website: str = "",
        image_url: str = "",
    ) -> Restaurant:
        """Add a restaurant with no votes and no comments.

        Raises:
            ValueError: If the name is blank or longer than 200 characters
        """
        now = datetime.now()
        restaurant = Restaurant(
            id=RestaurantId(uuid4()),
            name=RestaurantName(name),
            description=description,
            website=website,
            image_url=image_url,
            created_at=now,
            updated_at=now,
        )
        await self.restaurant_repository.save(restaurant)
        logfire.info(
            "Restaurant added", restaurant_id=str(restaurant.id), name=str(restaurant.name)
        )
        return restaurant

    async def clear_catalog(self) -> int:
        """Delete every restaurant (and its comments); returns how many."""
        deleted = await self.restaurant_repository.delete_all()
        logfire.warn("Catalog cleared", deleted=deleted)
        return deleted

    async def increment_comment_count(self, restaurant_id: RestaurantId) -> None:
        await self.restaurant_repository.increment_comment_count(restaurant_id)
