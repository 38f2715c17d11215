"""Comment entity. Comments are append-only: never edited, never deleted."""

from datetime import datetime

from pydantic import Field, field_validator

from ranker.domain.model.common import DomainModel
from ranker.domain.value import CommentAuthor, CommentId, RestaurantId


class Comment(DomainModel):
    id: CommentId
    restaurant_id: RestaurantId
    text: str = Field(min_length=1, max_length=10000)
    author: CommentAuthor = Field(default_factory=CommentAuthor.anonymous)
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("text", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v
