"""Restaurant storage contract."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ranker.domain.model.restaurant import Restaurant
from ranker.domain.value import RestaurantId, VoteDelta


class RestaurantRepository(ABC):
    """Stores restaurants and their counters.

    Counter changes go through ``apply_vote_delta`` and
    ``increment_comment_count``, which must be atomic at the storage
    level: two concurrent calls on one restaurant both take effect.
    """

    @abstractmethod
    async def find_by_id(self, restaurant_id: RestaurantId) -> Optional[Restaurant]:
        ...

    @abstractmethod
    async def find_all_ranked(self) -> List[Restaurant]:
        """Highest score first; equal scores in the order they were added."""

    @abstractmethod
    async def count(self) -> int:
        ...

    @abstractmethod
    async def save(self, restaurant: Restaurant) -> Restaurant:
        """Insert, or overwrite every column of an existing row."""

    @abstractmethod
    async def delete_all(self) -> int:
        """Empty the catalog, comments included; returns rows removed."""

    @abstractmethod
    async def apply_vote_delta(
        self, restaurant_id: RestaurantId, delta: VoteDelta
    ) -> Optional[Restaurant]:
        """Add ``delta`` to the counters in one guarded update.

        Returns:
            The restaurant after the update, or None when no row matched:
            the restaurant is missing, or a counter would have gone
            negative (in which case nothing changes)
        """

    @abstractmethod
    async def increment_comment_count(self, restaurant_id: RestaurantId) -> None:
        ...
