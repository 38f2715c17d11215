"""Restaurant request.

A visitor's suggestion for a spot that should be added to the ranking.
Requests are forwarded to the operator and not stored.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from ranker.domain.model.common import DomainModel


class RestaurantRequest(DomainModel):
    """Suggestion for a new restaurant."""

    name: str = Field(min_length=1, max_length=200)
    location: str = Field(min_length=1, max_length=300)
    link: Optional[str] = Field(default=None, max_length=2000)
    submitted_at: datetime = Field(default_factory=datetime.now)

    @field_validator("name", "location", "link", mode="before")
    @classmethod
    def strip_whitespace(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if isinstance(v, str) else v

    @field_validator("link")
    @classmethod
    def blank_link_is_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None
