"""Presentation-focused listing helpers composing the detail overlay payload."""

from __future__ import annotations

from urllib.parse import quote

from staymate.schemas.property import Property, PropertyDetail
from staymate.services.image_resolver import ImageResolver

# Characters ``encodeURIComponent`` leaves unescaped, so embedded map URLs are
# byte-for-byte what a browser would build.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_map_embed_url(location: str, *, base_url: str) -> str:
    """Return an embeddable map URL centred on the free-text ``location``."""

    query = quote(location, safe=_URI_COMPONENT_SAFE)
    return f"{base_url.rstrip('/')}?q={query}&output=embed"


def format_price(price: int) -> str:
    return f"${price:,}"


class PropertyPresentationService:
    """Compose overlay payloads from catalog records."""

    def __init__(self, images: ImageResolver, *, map_embed_url: str) -> None:
        self._images = images
        self._map_embed_url = map_embed_url

    @property
    def images(self) -> ImageResolver:
        return self._images

    def detail(self, listing: Property) -> PropertyDetail:
        return PropertyDetail(
            record=listing,
            gallery=self._images.gallery(listing),
            floor_plan=self._images.floor_plan(listing),
            map_url=build_map_embed_url(listing.location, base_url=self._map_embed_url),
            price_display=format_price(listing.price),
            added_display=listing.added.display(),
        )


__all__ = [
    "PropertyPresentationService",
    "build_map_embed_url",
    "format_price",
]
