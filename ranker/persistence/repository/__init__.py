"""PostgreSQL repository implementations."""

from ranker.persistence.repository.comment import PostgresCommentRepository
from ranker.persistence.repository.restaurant import PostgresRestaurantRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresRestaurantRepository",
]
