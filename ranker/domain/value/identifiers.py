"""Entity identifiers."""

from typing import NewType
from uuid import UUID

from ranker.domain.error import NotFoundError

RestaurantId = NewType("RestaurantId", UUID)
CommentId = NewType("CommentId", UUID)


def parse_restaurant_id(value: str) -> RestaurantId:
    """Parse a client-supplied restaurant ID.

    Malformed input cannot name any restaurant, so it raises NotFoundError
    exactly like an unknown ID does.
    """
    try:
        return RestaurantId(UUID(value))
    except ValueError:
        raise NotFoundError("Restaurant", value) from None
