"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from ranker.domain.model import Restaurant
from ranker.domain.value import RestaurantId, RestaurantName

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_restaurant(
    name: str = "Test Chicken",
    upvotes: int = 0,
    downvotes: int = 0,
    comment_count: int = 0,
) -> Restaurant:
    """Helper function to build a restaurant with consistent counters.

    Args:
        name: Display name
        upvotes: Initial upvotes
        downvotes: Initial downvotes
        comment_count: Initial comment count

    Returns:
        Restaurant whose score matches its counters
    """
    now = datetime.now()
    return Restaurant(
        id=RestaurantId(uuid4()),
        name=RestaurantName(name),
        description=f"{name} description",
        website="https://example.com",
        image_url="/images/test.jpg",
        upvotes=upvotes,
        downvotes=downvotes,
        score=upvotes - downvotes,
        comment_count=comment_count,
        created_at=now,
        updated_at=now,
    )
