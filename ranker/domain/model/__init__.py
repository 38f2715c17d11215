"""Domain model entities for the ranker."""

from ranker.domain.model.comment import Comment
from ranker.domain.model.restaurant import Restaurant
from ranker.domain.model.restaurant_request import RestaurantRequest
from ranker.domain.model.vote import VoteTransition

__all__ = [
    "Comment",
    "Restaurant",
    "RestaurantRequest",
    "VoteTransition",
]
