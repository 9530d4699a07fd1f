"""FastAPI router exposing the session favorites and drag-and-drop gestures."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from staymate.schemas.favorites import (
    DragOverResponse,
    DropRegion,
    DropResult,
    FavoritesResponse,
)
from staymate.services.dependencies import get_listing_session
from staymate.services.session import ListingSession

router = APIRouter()


def _favorites_response(session: ListingSession) -> FavoritesResponse:
    favorites = session.favorites.list()
    return FavoritesResponse(total=len(favorites), favorites=favorites)


@router.get("/", response_model=FavoritesResponse)
async def list_favorites(
    session: ListingSession = Depends(get_listing_session),
) -> FavoritesResponse:
    """Return favorited listings in the order they were added."""

    return _favorites_response(session)


@router.delete("/", response_model=FavoritesResponse)
async def clear_favorites(
    session: ListingSession = Depends(get_listing_session),
) -> FavoritesResponse:
    """Remove every favorite."""

    session.clear_favorites()
    return _favorites_response(session)


@router.post("/dragover", response_model=DragOverResponse)
async def drag_over(
    region: DropRegion = Query(DropRegion.FAVORITES, description="Region being hovered"),
    session: ListingSession = Depends(get_listing_session),
) -> DragOverResponse:
    """Tell the client whether the hovered region accepts drops."""

    return DragOverResponse(region=region, allow_drop=session.drag_over(region))


@router.post("/drop", response_model=DropResult)
async def drop(
    request: Request,
    region: DropRegion = Query(DropRegion.FAVORITES, description="Region receiving the drop"),
    session: ListingSession = Depends(get_listing_session),
) -> DropResult:
    """Favorite the listing carried by a drag payload.

    Unusable payloads never produce an error response; the result simply
    reports ``accepted=False``.
    """

    payload = await request.body()
    added = session.drop(region, payload)
    return DropResult(
        region=region,
        accepted=added is not None,
        property_id=added.id if added is not None else None,
        favorites=_favorites_response(session),
    )


@router.post("/{property_id}", response_model=FavoritesResponse)
async def add_favorite(
    property_id: str,
    session: ListingSession = Depends(get_listing_session),
) -> FavoritesResponse:
    """Favorite a listing. Favoriting it again changes nothing."""

    try:
        session.add_favorite(property_id)
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _favorites_response(session)


@router.delete("/{property_id}", response_model=FavoritesResponse)
async def remove_favorite(
    property_id: str,
    session: ListingSession = Depends(get_listing_session),
) -> FavoritesResponse:
    """Unfavorite a listing. Unknown or absent ids are ignored."""

    session.remove_favorite(property_id)
    return _favorites_response(session)
