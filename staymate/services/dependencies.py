"""FastAPI dependency wiring for listing services.

Services are built once during application startup and parked on
``app.state``. Keeping the lookups here leaves the service modules free of
web-layer concerns and gives tests a single seam for
``app.dependency_overrides``.
"""

from __future__ import annotations

from fastapi import Depends, Request

from staymate.services.catalog import PropertyCatalog
from staymate.services.image_resolver import ImageResolver
from staymate.services.property_presentation_service import PropertyPresentationService
from staymate.services.session import ListingSession
from staymate.settings import AppSettings


def build_presentation_service(settings: AppSettings) -> PropertyPresentationService:
    """Wire the image resolver and map settings into a presentation service."""

    images = ImageResolver(
        fallback_picture=settings.fallback_picture,
        fallback_floor_plan=settings.fallback_floor_plan,
        asset_root=settings.asset_root,
    )
    return PropertyPresentationService(images, map_embed_url=settings.map_embed_url)


def get_listing_session(request: Request) -> ListingSession:
    """Return the process-wide listing session created at startup."""

    return request.app.state.listing_session


def get_catalog(
    session: ListingSession = Depends(get_listing_session),
) -> PropertyCatalog:
    return session.catalog


def get_presentation_service(request: Request) -> PropertyPresentationService:
    return request.app.state.presentation_service


__all__ = [
    "build_presentation_service",
    "get_catalog",
    "get_listing_session",
    "get_presentation_service",
]
