"""Helpers for resolving listing image references with fallback assets.

Listing cards show ``picture``, the detail overlay shows the ``pictures``
gallery and the ``floor_plan``. Any of those may be missing from the dataset,
blank, or point at a file that is not on disk. A missing asset is never fatal:
the helpers below substitute the configured default picture or floor plan.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final
from urllib.parse import urlsplit

from staymate.schemas.property import Property

# References with these schemes live on another host; we cannot check them and
# pass them through untouched.
_REMOTE_SCHEMES: Final[frozenset[str]] = frozenset({"http", "https", "data"})


class ImageResolver:
    """Resolve listing image references against an optional asset directory."""

    def __init__(
        self,
        *,
        fallback_picture: str,
        fallback_floor_plan: str,
        asset_root: Path | None = None,
    ) -> None:
        self._fallback_picture = fallback_picture
        self._fallback_floor_plan = fallback_floor_plan
        self._asset_root = asset_root

    def _usable(self, reference: str | None) -> str | None:
        """Return the trimmed reference when it can be served, else ``None``."""

        if not reference:
            return None
        candidate = reference.strip()
        if not candidate:
            return None

        if urlsplit(candidate).scheme.lower() in _REMOTE_SCHEMES:
            return candidate
        if self._asset_root is None:
            return candidate
        if (self._asset_root / candidate.lstrip("/")).is_file():
            return candidate
        return None

    def picture(self, listing: Property) -> str:
        """Primary card image, falling back to the first gallery image."""

        for reference in (listing.picture, *listing.pictures):
            usable = self._usable(reference)
            if usable:
                return usable
        return self._fallback_picture

    def gallery(self, listing: Property) -> list[str]:
        """Gallery images for the overlay; never empty."""

        images = [
            usable
            for usable in (self._usable(reference) for reference in listing.pictures)
            if usable
        ]
        if images:
            return images
        return [self.picture(listing)]

    def floor_plan(self, listing: Property) -> str:
        return self._usable(listing.floor_plan) or self._fallback_floor_plan


__all__ = ["ImageResolver"]
