"""Routes driving the single-listing detail overlay."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from staymate.schemas.property import PropertyDetail
from staymate.services.dependencies import get_listing_session, get_presentation_service
from staymate.services.property_presentation_service import PropertyPresentationService
from staymate.services.session import ListingSession

router = APIRouter()


@router.get("/", response_model=PropertyDetail | None)
async def get_inspected(
    session: ListingSession = Depends(get_listing_session),
    presentation: PropertyPresentationService = Depends(get_presentation_service),
) -> PropertyDetail | None:
    """Return the listing currently shown in the overlay, or ``null``."""

    if session.inspected is None:
        return None
    return presentation.detail(session.inspected)


@router.put("/{property_id}", response_model=PropertyDetail)
async def inspect_property(
    property_id: str,
    session: ListingSession = Depends(get_listing_session),
    presentation: PropertyPresentationService = Depends(get_presentation_service),
) -> PropertyDetail:
    """Open the overlay on a listing, replacing any listing already shown."""

    try:
        listing = session.inspect(property_id)
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return presentation.detail(listing)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
async def dismiss_inspected(
    session: ListingSession = Depends(get_listing_session),
) -> Response:
    """Close the overlay."""

    session.dismiss()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
