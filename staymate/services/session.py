"""Owned state for one browsing session of the listing page.

:class:`ListingSession` is the only mutable state in the service: the current
search criteria and results, the favorites set, and the inspected listing.
Every user action maps to exactly one transition method, and views read
:meth:`ListingSession.snapshot` rather than reaching into the session.
"""

from __future__ import annotations

import logging

from staymate.schemas.favorites import DropRegion
from staymate.schemas.property import Property
from staymate.schemas.search import SearchCriteria
from staymate.schemas.session import SessionSnapshot
from staymate.services.catalog import PropertyCatalog
from staymate.services.favorites_service import FavoritesStore
from staymate.services.filters import NO_MATCHES_MESSAGE, apply_search_criteria
from staymate.services.transfer import decode_transfer, encode_transfer

logger = logging.getLogger(__name__)


class ListingSession:
    """Transitions for search, favorites, drag-and-drop and the detail overlay."""

    def __init__(self, catalog: PropertyCatalog) -> None:
        self._catalog = catalog
        self._criteria: SearchCriteria | None = None
        self._results: tuple[Property, ...] = catalog.properties
        self._favorites = FavoritesStore()
        self._inspected: Property | None = None

    @property
    def catalog(self) -> PropertyCatalog:
        return self._catalog

    @property
    def favorites(self) -> FavoritesStore:
        return self._favorites

    @property
    def results(self) -> tuple[Property, ...]:
        return self._results

    @property
    def inspected(self) -> Property | None:
        return self._inspected

    # -- search ------------------------------------------------------------------

    def search(self, criteria: SearchCriteria) -> tuple[Property, ...]:
        """Replace the current results with the catalog filtered by ``criteria``."""

        self._criteria = criteria
        self._results = tuple(apply_search_criteria(self._catalog, criteria))
        logger.info("Search returned %d of %d listing(s)", len(self._results), len(self._catalog))
        return self._results

    def reset_search(self) -> tuple[Property, ...]:
        self._criteria = None
        self._results = self._catalog.properties
        return self._results

    # -- favorites ---------------------------------------------------------------

    def add_favorite(self, property_id: str) -> bool:
        """Favorite a catalog listing. Unknown ids raise :class:`LookupError`."""

        return self._favorites.add(self._catalog.require(property_id))

    def remove_favorite(self, property_id: str) -> bool:
        return self._favorites.remove(property_id)

    def clear_favorites(self) -> int:
        return self._favorites.clear()

    # -- drag and drop -----------------------------------------------------------

    def drag_start(self, property_id: str) -> str:
        """Return the transfer payload to attach when a listing card is dragged."""

        return encode_transfer(self._catalog.require(property_id))

    def drag_over(self, region: DropRegion) -> bool:
        """Both regions accept drags so the platform does not reject the drop."""

        return region in (DropRegion.LISTINGS, DropRegion.FAVORITES)

    def drop(self, region: DropRegion, payload: str | bytes | None) -> Property | None:
        """Handle a drop gesture and return the listing newly favorited, if any.

        Only drops on the favorites region act. Payloads that are missing,
        malformed, or name a listing outside the catalog are ignored.
        """

        if region is not DropRegion.FAVORITES:
            return None

        envelope = decode_transfer(payload)
        if envelope is None:
            return None

        listing = self._catalog.get(envelope.property_id)
        if listing is None:
            logger.debug("Ignoring drop for unknown property %s", envelope.property_id)
            return None

        if not self._favorites.add(listing):
            return None
        return listing

    # -- detail overlay ----------------------------------------------------------

    def inspect(self, property_id: str) -> Property:
        """Show ``property_id`` in the overlay, replacing whatever was open."""

        listing = self._catalog.require(property_id)
        self._inspected = listing
        return listing

    def dismiss(self) -> None:
        self._inspected = None

    # -- observation -------------------------------------------------------------

    def snapshot(self) -> SessionSnapshot:
        no_matches = not self._results
        return SessionSnapshot(
            criteria=self._criteria,
            results=self._results,
            no_matches=no_matches,
            message=NO_MATCHES_MESSAGE if no_matches else None,
            favorites=tuple(self._favorites.list()),
            inspected=self._inspected,
        )


__all__ = ["ListingSession"]
