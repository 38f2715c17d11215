"""Restaurant aggregate root.

Restaurants are the votable items of the ranker. Their vote counters are
only ever changed through vote transitions (see ``ranker.domain.model.vote``).
"""

from datetime import datetime

from pydantic import Field, model_validator

from ranker.domain.model.common import DomainModel
from ranker.domain.value import RestaurantId, RestaurantName, VoteDelta


class Restaurant(DomainModel):
    """Restaurant aggregate root.

    Business rules:
    - upvotes and downvotes are never negative
    - score always equals upvotes - downvotes
    - comment_count mirrors the number of appended comments
    """

    id: RestaurantId
    name: RestaurantName
    description: str = ""
    website: str = ""
    image_url: str = ""
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    score: int = 0
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_score(self) -> "Restaurant":
        """Score is derived from the two counters."""
        if self.score != self.upvotes - self.downvotes:
            raise ValueError(
                f"Score {self.score} does not match upvotes - downvotes "
                f"({self.upvotes} - {self.downvotes})"
            )
        return self

    def can_apply(self, delta: VoteDelta) -> bool:
        """Whether applying the delta keeps both counters non-negative."""
        return (
            self.upvotes + delta.upvotes >= 0
            and self.downvotes + delta.downvotes >= 0
        )

    def with_votes(self, delta: VoteDelta) -> "Restaurant":
        """Return a copy with the delta applied to the vote counters.

        Raises:
            ValueError: If a counter would go negative
        """
        return self.evolve(
            upvotes=self.upvotes + delta.upvotes,
            downvotes=self.downvotes + delta.downvotes,
            score=self.score + delta.score,
            updated_at=datetime.now(),
        )

    def with_comment_added(self) -> "Restaurant":
        """Return a copy with the comment count incremented."""
        return self.evolve(
            comment_count=self.comment_count + 1, updated_at=datetime.now()
        )
