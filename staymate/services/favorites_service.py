"""Session-lived favorites set.

A favorite is either absent or present. ``add`` moves absent -> present,
``remove`` and ``clear`` move present -> absent; ``add`` on a present listing
and ``remove`` on an absent one are self-loops. Members keep insertion order for
display and membership is keyed by listing id.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from staymate.schemas.property import Property

logger = logging.getLogger(__name__)


def _identifier(target: Property | str) -> str:
    return target if isinstance(target, str) else target.id


class FavoritesStore:
    """Insertion-ordered favorites keyed by :attr:`Property.id`."""

    def __init__(self, initial: Iterable[Property] = ()) -> None:
        self._entries: dict[str, Property] = {}
        for listing in initial:
            self.add(listing)

    def add(self, listing: Property) -> bool:
        """Insert ``listing`` unless already present. Returns ``True`` on change."""

        if listing.id in self._entries:
            return False
        self._entries[listing.id] = listing
        logger.debug("Added property %s to favorites", listing.id)
        return True

    def remove(self, target: Property | str) -> bool:
        """Remove a listing (or bare id) if present. Returns ``True`` on change."""

        property_id = _identifier(target)
        if self._entries.pop(property_id, None) is None:
            return False
        logger.debug("Removed property %s from favorites", property_id)
        return True

    def clear(self) -> int:
        """Empty the set unconditionally and return how many entries were dropped."""

        dropped = len(self._entries)
        self._entries.clear()
        if dropped:
            logger.debug("Cleared %d favorite(s)", dropped)
        return dropped

    def contains(self, target: Property | str) -> bool:
        return _identifier(target) in self._entries

    def __contains__(self, target: object) -> bool:
        if isinstance(target, (Property, str)):
            return self.contains(target)
        return False

    def __iter__(self) -> Iterator[Property]:
        return iter(tuple(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def ids(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def list(self) -> list[Property]:
        """Return current members in insertion order."""

        return [*self._entries.values()]


__all__ = ["FavoritesStore"]
