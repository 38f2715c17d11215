"""Domain value objects for the ranker.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import computed_field, field_validator

from ranker.domain.value.common import RootValueObject, ValueObject

ANONYMOUS_AUTHOR = "Anonymous"


class VoteAction(str, Enum):
    """Direction of a client's vote on a restaurant."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class VoteDelta(ValueObject):
    """Counter changes produced by a vote transition.

    Score is derived, so a delta can never break score == upvotes - downvotes.
    """

    upvotes: int = 0
    downvotes: int = 0

    @computed_field
    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes

    @property
    def is_zero(self) -> bool:
        return self.upvotes == 0 and self.downvotes == 0


class RestaurantName(RootValueObject[str]):
    """Display name of a restaurant, trimmed, 1-200 characters."""

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 1 or len(v) > 200:
            raise ValueError("Restaurant name must be 1-200 characters")
        return v


class CommentAuthor(RootValueObject[str]):
    """Name a commenter signs with.

    Blank names fall back to "Anonymous".
    """

    @field_validator("root")
    @classmethod
    def validate_author(cls, v: str) -> str:
        v = v.strip()
        if not v:
            return ANONYMOUS_AUTHOR
        if len(v) > 100:
            raise ValueError("Author name must be at most 100 characters")
        return v

    @classmethod
    def anonymous(cls) -> "CommentAuthor":
        return cls(ANONYMOUS_AUTHOR)
