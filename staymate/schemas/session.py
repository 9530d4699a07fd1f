"""Immutable snapshot of the listing session handed to presentation layers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from staymate.schemas.property import Property
from staymate.schemas.search import SearchCriteria


class SessionSnapshot(BaseModel):
    """Everything a view needs to render the listing page."""

    model_config = ConfigDict(frozen=True)

    criteria: SearchCriteria | None = Field(
        None, description="Criteria behind the current results, if any were applied."
    )
    results: tuple[Property, ...]
    no_matches: bool
    message: str | None = None
    favorites: tuple[Property, ...]
    inspected: Property | None = None


__all__ = ["SessionSnapshot"]
