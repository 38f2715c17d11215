"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .restaurant import InMemoryRestaurantRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryRestaurantRepository",
]
