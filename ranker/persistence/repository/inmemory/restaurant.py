"""In-memory restaurant repository for testing."""

from typing import Optional

from ranker.domain.model.restaurant import Restaurant
from ranker.domain.repository.restaurant import RestaurantRepository
from ranker.domain.value import RestaurantId, VoteDelta
from ranker.persistence.repository.inmemory.comment import InMemoryCommentRepository


class InMemoryRestaurantRepository(RestaurantRepository):
    """In-memory implementation of RestaurantRepository for testing.

    Dict insertion order doubles as the tie-break order for ranking.
    Methods never await between read and write, so each update is
    atomic with respect to other coroutines.
    """

    def __init__(self, comments: Optional[InMemoryCommentRepository] = None) -> None:
        self._restaurants: dict[RestaurantId, Restaurant] = {}
        self._comments = comments

    async def find_by_id(self, restaurant_id: RestaurantId) -> Optional[Restaurant]:
        """Find a restaurant by ID."""
        return self._restaurants.get(restaurant_id)

    async def find_all_ranked(self) -> list[Restaurant]:
        """Find all restaurants, highest score first (stable sort)."""
        return sorted(self._restaurants.values(), key=lambda r: r.score, reverse=True)

    async def count(self) -> int:
        """Count all restaurants."""
        return len(self._restaurants)

    async def save(self, restaurant: Restaurant) -> Restaurant:
        """Save or update a restaurant."""
        self._restaurants[restaurant.id] = restaurant
        return restaurant

    async def delete_all(self) -> int:
        """Delete every restaurant along with the linked comment log, if any."""
        deleted = len(self._restaurants)
        if self._comments is not None:
            self._comments.discard_for(set(self._restaurants))
        self._restaurants.clear()
        return deleted

    async def apply_vote_delta(
        self, restaurant_id: RestaurantId, delta: VoteDelta
    ) -> Optional[Restaurant]:
        """Apply a delta to the vote counters."""
        restaurant = self._restaurants.get(restaurant_id)
        if restaurant is None or not restaurant.can_apply(delta):
            return None

        updated = restaurant.with_votes(delta)
        self._restaurants[restaurant_id] = updated
        return updated

    async def increment_comment_count(self, restaurant_id: RestaurantId) -> None:
        """Increment comment_count by 1."""
        restaurant = self._restaurants.get(restaurant_id)
        if restaurant:
            self._restaurants[restaurant_id] = restaurant.with_comment_added()
