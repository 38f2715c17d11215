"""Comment log held in a list."""

from collections.abc import Collection, Sequence

from ranker.domain.model.comment import Comment
from ranker.domain.repository.comment import CommentRepository
from ranker.domain.value import RestaurantId


class InMemoryCommentRepository(CommentRepository):
    """Appends to a list, so iteration order is creation order."""

    def __init__(self) -> None:
        self._log: list[Comment] = []

    async def find_by_restaurant(self, restaurant_id: RestaurantId) -> list[Comment]:
        return [c for c in self._log if c.restaurant_id == restaurant_id]

    async def find_by_restaurants(
        self, restaurant_ids: Sequence[RestaurantId]
    ) -> dict[RestaurantId, list[Comment]]:
        grouped: dict[RestaurantId, list[Comment]] = {rid: [] for rid in restaurant_ids}
        for comment in self._log:
            if comment.restaurant_id in grouped:
                grouped[comment.restaurant_id].append(comment)
        return grouped

    async def save(self, comment: Comment) -> Comment:
        self._log.append(comment)
        return comment

    async def count_by_restaurant(self, restaurant_id: RestaurantId) -> int:
        return len(await self.find_by_restaurant(restaurant_id))

    def discard_for(self, restaurant_ids: Collection[RestaurantId]) -> None:
        """Drop the comments of deleted restaurants (the SQL foreign key cascade)."""
        self._log = [c for c in self._log if c.restaurant_id not in restaurant_ids]
