"""Request-side schemas for listing searches."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

ANY_PROPERTY_TYPE = "Any"
"""Wildcard type option that matches every listing."""


class SearchCriteria(BaseModel):
    """Raw search form as submitted by the user.

    Numeric bounds are kept as typed (``int`` or free text) so that the filter
    engine, not the transport layer, decides how malformed input behaves.
    """

    type: str | None = Field(
        None,
        description="Exact listing type, or 'Any' to match every type.",
    )
    min_price: int | str | None = Field(None, description="Inclusive lower price bound")
    max_price: int | str | None = Field(None, description="Inclusive upper price bound")
    min_bedrooms: int | str | None = Field(None, description="Inclusive lower bedroom bound")
    max_bedrooms: int | str | None = Field(None, description="Inclusive upper bedroom bound")
    postal_code_area: str | None = Field(
        None,
        description="Case-insensitive substring matched against the postal code area.",
    )
    added_after: date | None = Field(
        None,
        description="Only listings added on or after this date.",
    )

    @field_validator("min_price", "max_price", "min_bedrooms", "max_bedrooms", mode="before")
    @classmethod
    def _bound_as_typed(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        # Fractional numbers and booleans become text the filter engine ignores.
        return str(value)

    @field_validator("added_after", mode="before")
    @classmethod
    def _truncate_datetime(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and not value.strip():
            return None
        return value


__all__ = ["ANY_PROPERTY_TYPE", "SearchCriteria"]
