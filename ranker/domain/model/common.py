"""Shared base for domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable, validated entity.

    Entities change by producing a new copy through ``evolve``, which
    re-runs validation so invariants hold on every copy.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def evolve(self, **changes: Any) -> Self:
        return type(self)(**{**dict(self), **changes})
