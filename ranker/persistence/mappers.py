"""Row <-> entity conversion.

Entities are frozen pydantic models, so there is no ORM mapping; rows
come back from Core queries as mappings and go in as plain dicts.
"""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from ranker.domain.model import Comment, Restaurant
from ranker.domain.value import CommentAuthor, CommentId, RestaurantId, RestaurantName


def _uuid(value: Any) -> UUID:
    # asyncpg hands back UUIDs; sqlite-style drivers hand back strings
    return value if isinstance(value, UUID) else UUID(str(value))


def row_to_restaurant(row: Mapping[str, Any]) -> Restaurant:
    return Restaurant(
        id=RestaurantId(_uuid(row["id"])),
        name=RestaurantName(row["name"]),
        description=row.get("description") or "",
        website=row.get("website") or "",
        image_url=row.get("image_url") or "",
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        score=row["score"],
        comment_count=row["comment_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def restaurant_to_dict(restaurant: Restaurant) -> dict[str, Any]:
    """Column values for an insert or upsert; ``position`` is assigned by the database."""
    return restaurant.model_dump()


def row_to_comment(row: Mapping[str, Any]) -> Comment:
    return Comment(
        id=CommentId(_uuid(row["id"])),
        restaurant_id=RestaurantId(_uuid(row["restaurant_id"])),
        text=row["text"],
        author=CommentAuthor(row["author"]),
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> dict[str, Any]:
    return comment.model_dump()
