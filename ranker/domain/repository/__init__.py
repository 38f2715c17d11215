"""Storage contracts; implementations live in ``ranker.persistence``."""

from ranker.domain.repository.comment import CommentRepository
from ranker.domain.repository.restaurant import RestaurantRepository

__all__ = [
    "CommentRepository",
    "RestaurantRepository",
]
