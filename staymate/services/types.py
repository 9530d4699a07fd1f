"""Shared type definitions for the listing services package."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class PropertySearchFilters:
    """Normalized listing search filters consumed by the filter predicate.

    ``None`` on any field means the corresponding constraint is open.
    """

    property_type: str | None = None
    min_price: int | None = None
    max_price: int | None = None
    min_bedrooms: int | None = None
    max_bedrooms: int | None = None
    postal_code_area: str | None = None
    added_after: date | None = None

    @property
    def is_unconstrained(self) -> bool:
        return all(
            value is None
            for value in (
                self.property_type,
                self.min_price,
                self.max_price,
                self.min_bedrooms,
                self.max_bedrooms,
                self.postal_code_area,
                self.added_after,
            )
        )
