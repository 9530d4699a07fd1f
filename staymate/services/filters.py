"""Listing filtering helpers backing the search form."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from staymate.schemas.property import Property
from staymate.schemas.search import ANY_PROPERTY_TYPE, SearchCriteria
from staymate.services.types import PropertySearchFilters

logger = logging.getLogger(__name__)

NO_MATCHES_MESSAGE = "No properties match your search criteria."

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def parse_bound(value: int | str | None, *, field: str) -> int | None:
    """Return ``value`` as an integer bound, or ``None`` when it imposes nothing.

    Blank text means the bound is unset. Text that is not a whole number
    (after trimming whitespace and dropping ``,``/``_`` thousands separators)
    disables the bound instead of failing the search.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value

    text = value.strip()
    if not text:
        return None

    candidate = text.replace(",", "").replace("_", "")
    if not _INTEGER_PATTERN.fullmatch(candidate):
        logger.debug("Ignoring malformed %s bound: %r", field, value)
        return None
    return int(candidate)


def normalize_search_criteria(criteria: SearchCriteria) -> PropertySearchFilters:
    """Return sanitized search inputs for consistent listing filtering."""

    property_type = (criteria.type or "").strip()
    if property_type == ANY_PROPERTY_TYPE:
        property_type = ""

    postal_code_area = (criteria.postal_code_area or "").strip()

    return PropertySearchFilters(
        property_type=property_type or None,
        min_price=parse_bound(criteria.min_price, field="min_price"),
        max_price=parse_bound(criteria.max_price, field="max_price"),
        min_bedrooms=parse_bound(criteria.min_bedrooms, field="min_bedrooms"),
        max_bedrooms=parse_bound(criteria.max_bedrooms, field="max_bedrooms"),
        postal_code_area=postal_code_area.lower() or None,
        added_after=criteria.added_after,
    )


def matches_filters(listing: Property, filters: PropertySearchFilters) -> bool:
    """Evaluate the conjunction of every per-field predicate for ``listing``."""

    if filters.property_type is not None and listing.type != filters.property_type:
        return False

    if filters.min_price is not None and listing.price < filters.min_price:
        return False
    if filters.max_price is not None and listing.price > filters.max_price:
        return False

    if filters.min_bedrooms is not None and listing.bedrooms < filters.min_bedrooms:
        return False
    if filters.max_bedrooms is not None and listing.bedrooms > filters.max_bedrooms:
        return False

    if (
        filters.postal_code_area is not None
        and filters.postal_code_area not in listing.postal_code_area.lower()
    ):
        return False

    if filters.added_after is not None:
        # Listings with an unresolvable added date never satisfy the bound.
        added_on = listing.added.calendar_date
        if added_on is None or added_on < filters.added_after:
            return False

    return True


def filter_properties(
    properties: Iterable[Property],
    *,
    filters: PropertySearchFilters,
) -> list[Property]:
    """Return listings that satisfy the provided filters, in input order."""

    if filters.is_unconstrained:
        return list(properties)
    return [listing for listing in properties if matches_filters(listing, filters)]


def apply_search_criteria(
    properties: Iterable[Property],
    criteria: SearchCriteria,
) -> list[Property]:
    """Normalize ``criteria`` and filter ``properties`` in one step."""

    filters = normalize_search_criteria(criteria)
    results = filter_properties(properties, filters=filters)
    logger.debug("Search matched %d listing(s) for %s", len(results), filters)
    return results


__all__ = [
    "NO_MATCHES_MESSAGE",
    "apply_search_criteria",
    "filter_properties",
    "matches_filters",
    "normalize_search_criteria",
    "parse_bound",
]
