"""Comment storage contract."""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from ranker.domain.model.comment import Comment
from ranker.domain.value import RestaurantId


class CommentRepository(ABC):
    """Append-only comment log. Reads are always oldest first."""

    @abstractmethod
    async def find_by_restaurant(self, restaurant_id: RestaurantId) -> List[Comment]:
        ...

    @abstractmethod
    async def find_by_restaurants(
        self, restaurant_ids: Sequence[RestaurantId]
    ) -> Dict[RestaurantId, List[Comment]]:
        """Every requested ID is a key, with an empty list if it has no comments."""

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        ...

    @abstractmethod
    async def count_by_restaurant(self, restaurant_id: RestaurantId) -> int:
        ...
