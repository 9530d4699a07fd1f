from datetime import date

from fastapi import APIRouter, Depends, Query

from staymate.schemas.property import PropertyListResponse
from staymate.schemas.search import SearchCriteria
from staymate.services.catalog import PropertyCatalog
from staymate.services.dependencies import get_catalog, get_listing_session
from staymate.services.filters import NO_MATCHES_MESSAGE, apply_search_criteria
from staymate.services.session import ListingSession

router = APIRouter()


def _list_response(results: list) -> PropertyListResponse:
    return PropertyListResponse(
        properties=results,
        total=len(results),
        no_matches=not results,
        message=None if results else NO_MATCHES_MESSAGE,
    )


@router.get("/", response_model=PropertyListResponse)
async def search_properties(
    type: str | None = Query(None, description="Listing type, or 'Any'."),
    min_price: str | None = Query(None, description="Inclusive lower price bound."),
    max_price: str | None = Query(None, description="Inclusive upper price bound."),
    min_bedrooms: str | None = Query(None, description="Inclusive lower bedroom bound."),
    max_bedrooms: str | None = Query(None, description="Inclusive upper bedroom bound."),
    postal_code_area: str | None = Query(
        None, description="Case-insensitive postal code area fragment."
    ),
    added_after: date | None = Query(
        None, description="Only listings added on or after this date (YYYY-MM-DD)."
    ),
    catalog: PropertyCatalog = Depends(get_catalog),
) -> PropertyListResponse:
    """Filter the catalog without touching the session's current results.

    Numeric bounds are accepted as free text; values that are not whole
    numbers are ignored rather than rejected.

    Examples:
        /search/?type=Flat
        /search/?min_price=200000&postal_code_area=nw
    """

    criteria = SearchCriteria(
        type=type,
        min_price=min_price,
        max_price=max_price,
        min_bedrooms=min_bedrooms,
        max_bedrooms=max_bedrooms,
        postal_code_area=postal_code_area,
        added_after=added_after,
    )
    return _list_response(apply_search_criteria(catalog, criteria))


@router.post("/", response_model=PropertyListResponse)
async def submit_search(
    criteria: SearchCriteria,
    session: ListingSession = Depends(get_listing_session),
) -> PropertyListResponse:
    """Apply the submitted search form to the session's listing view."""

    return _list_response(list(session.search(criteria)))


@router.delete("/", response_model=PropertyListResponse)
async def reset_search(
    session: ListingSession = Depends(get_listing_session),
) -> PropertyListResponse:
    """Drop the current criteria and show the whole catalog again."""

    return _list_response(list(session.reset_search()))
