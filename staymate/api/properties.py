"""Routes exposing the current listing results and per-listing detail."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from staymate.schemas.property import PropertyDetail, PropertyListResponse
from staymate.services.dependencies import get_listing_session, get_presentation_service
from staymate.services.filters import NO_MATCHES_MESSAGE
from staymate.services.property_presentation_service import PropertyPresentationService
from staymate.services.session import ListingSession

router = APIRouter()


@router.get("/", response_model=PropertyListResponse)
async def list_properties(
    session: ListingSession = Depends(get_listing_session),
) -> PropertyListResponse:
    """Return the listings produced by the most recent search (all by default)."""

    results = list(session.results)
    return PropertyListResponse(
        properties=results,
        total=len(results),
        no_matches=not results,
        message=None if results else NO_MATCHES_MESSAGE,
    )


@router.get("/{property_id}", response_model=PropertyDetail)
async def get_property(
    property_id: str,
    session: ListingSession = Depends(get_listing_session),
    presentation: PropertyPresentationService = Depends(get_presentation_service),
) -> PropertyDetail:
    """Return the detail payload (gallery, floor plan, map) for one listing."""

    listing = session.catalog.get(property_id)
    if listing is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return presentation.detail(listing)


@router.get("/{property_id}/transfer", response_model=str)
async def get_transfer_payload(
    property_id: str,
    session: ListingSession = Depends(get_listing_session),
) -> str:
    """Return the drag payload a listing card attaches on drag-start."""

    try:
        return session.drag_start(property_id)
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
