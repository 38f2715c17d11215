"""Domain value objects for the ranker."""

from ranker.domain.value.identifiers import (
    CommentId,
    RestaurantId,
    parse_restaurant_id,
)
from ranker.domain.value.types import (
    ANONYMOUS_AUTHOR,
    CommentAuthor,
    RestaurantName,
    VoteAction,
    VoteDelta,
)

__all__ = [
    # Identifiers
    "RestaurantId",
    "CommentId",
    "parse_restaurant_id",
    # Types
    "ANONYMOUS_AUTHOR",
    "CommentAuthor",
    "RestaurantName",
    "VoteAction",
    "VoteDelta",
]
