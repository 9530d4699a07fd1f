"""Pydantic schemas describing listing records and their presentation payloads."""

from __future__ import annotations

from datetime import date
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MONTH_NAMES: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Dataset records spell months in full ("January") or abbreviated ("Jan") form,
# in any case. The table is the only place month names turn into ordinals.
MONTH_ORDINALS: Final[dict[str, int]] = {
    **{name.lower(): index for index, name in enumerate(MONTH_NAMES, start=1)},
    **{name[:3].lower(): index for index, name in enumerate(MONTH_NAMES, start=1)},
    "sept": 9,
}


def month_ordinal(month: str | None) -> int | None:
    """Return the 1-based calendar ordinal for ``month`` or ``None`` when unknown."""

    if not month:
        return None
    return MONTH_ORDINALS.get(month.strip().lower().rstrip("."))


def _whole_number(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return None


class AddedDate(BaseModel):
    """Listing date as stored in the dataset: year, month name and day.

    Components are kept as written. A year or day that is not a whole number,
    an unknown month name, or a day missing from that month leaves
    ``calendar_date`` empty instead of rejecting the record.
    """

    model_config = ConfigDict(frozen=True)

    year: int | str
    month: str
    day: int | str
    calendar_date: date | None = Field(
        default=None,
        exclude=True,
        repr=False,
        description=(
            "Resolved calendar date. Left empty when any component does not"
            " resolve to a real day."
        ),
    )

    @field_validator("year", "day", mode="before")
    @classmethod
    def _keep_raw_number(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            return str(value)
        return value

    @field_validator("month", mode="before")
    @classmethod
    def _month_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @model_validator(mode="before")
    @classmethod
    def _resolve_calendar_date(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        resolved = dict(data)
        resolved.pop("calendar_date", None)
        month = resolved.get("month")
        ordinal = month_ordinal(month) if isinstance(month, str) else None
        year = _whole_number(resolved.get("year"))
        day = _whole_number(resolved.get("day"))
        if ordinal is not None and year is not None and day is not None:
            try:
                resolved["calendar_date"] = date(year, ordinal, day)
            except (OverflowError, ValueError):
                pass
        return resolved

    @property
    def is_resolved(self) -> bool:
        return self.calendar_date is not None

    def display(self) -> str:
        """Render the date the way listing cards show it, e.g. ``January 5, 2023``."""

        return f"{self.month} {self.day}, {self.year}"


class Property(BaseModel):
    """Immutable listing record loaded from the static catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1, description="Stable unique listing identifier")
    type: str = Field(..., description="Listing category such as House or Flat")
    location: str = ""
    price: int = Field(..., ge=0, description="Asking price, currency agnostic")
    bedrooms: int = Field(..., ge=0)
    tenure: str = ""
    postal_code_area: str = Field(..., alias="Postalcode area")
    added: AddedDate
    description: str = ""
    picture: str | None = None
    pictures: list[str] = Field(default_factory=list)
    floor_plan: str | None = Field(None, alias="floorPlan")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_identifier(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return str(value)
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("picture", "floor_plan", mode="before")
    @classmethod
    def _empty_string_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("pictures", mode="before")
    @classmethod
    def _single_picture_to_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value


class PropertyListResponse(BaseModel):
    """Current listing results plus the explicit empty-state marker."""

    properties: list[Property]
    total: int
    no_matches: bool
    message: str | None = None


class PropertyDetail(BaseModel):
    """Overlay payload combining the record with resolved presentation assets."""

    record: Property
    gallery: list[str] = Field(
        default_factory=list,
        description="Resolved gallery image references, never empty.",
    )
    floor_plan: str = Field(..., description="Resolved floor plan reference")
    map_url: str = Field(..., description="Embeddable map URL for the location")
    price_display: str
    added_display: str


__all__ = [
    "AddedDate",
    "MONTH_NAMES",
    "MONTH_ORDINALS",
    "Property",
    "PropertyDetail",
    "PropertyListResponse",
    "month_ordinal",
]
