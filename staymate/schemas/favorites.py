"""Pydantic schemas that power the favorites and drag-and-drop surface."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from staymate.schemas.property import Property

TRANSFER_KIND = "staymate/property"
"""Payload kind marker distinguishing listing drags from unrelated draggables."""


class DropRegion(str, Enum):
    """Page regions that take part in drag-and-drop gestures."""

    LISTINGS = "listings"
    FAVORITES = "favorites"


class TransferEnvelope(BaseModel):
    """Drag payload identifying the listing being moved.

    Only the identifier travels with the gesture; the receiving side resolves
    it against the catalog so the payload can never drift from the record.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["staymate/property"]
    property_id: str = Field(..., min_length=1, max_length=128)


class FavoritesResponse(BaseModel):
    """Favorites in insertion order."""

    total: int
    favorites: list[Property]


class DropResult(BaseModel):
    """Outcome of a drop gesture. Rejected drops are reported, never raised."""

    region: DropRegion
    accepted: bool = Field(
        ..., description="True when the drop added a new listing to favorites."
    )
    property_id: str | None = None
    favorites: FavoritesResponse


class DragOverResponse(BaseModel):
    region: DropRegion
    allow_drop: bool


__all__ = [
    "DragOverResponse",
    "DropRegion",
    "DropResult",
    "FavoritesResponse",
    "TRANSFER_KIND",
    "TransferEnvelope",
]
