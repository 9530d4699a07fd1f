from fastapi import APIRouter, Depends

from staymate.schemas.session import SessionSnapshot
from staymate.services.dependencies import get_listing_session
from staymate.services.session import ListingSession

router = APIRouter()


@router.get("/", response_model=SessionSnapshot)
async def get_session_snapshot(
    session: ListingSession = Depends(get_listing_session),
) -> SessionSnapshot:
    """Return results, favorites and the inspected listing in one payload."""

    return session.snapshot()
