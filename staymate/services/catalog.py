"""Loading and lookup for the static property catalog.

The dataset is read exactly once per process. Structural problems (unreadable
file, invalid JSON, records that do not fit the :class:`Property` schema, or
duplicate identifiers) raise :class:`DatasetError` so a broken catalog never
starts serving. Added dates whose month name cannot be resolved are not
structural: such records load normally, are flagged with a warning here, and
are simply never matched by an "added after" search.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from staymate.schemas.property import Property

logger = logging.getLogger(__name__)


class DatasetError(ValueError):
    """Raised when the property dataset cannot be turned into a catalog."""


class PropertyCatalog:
    """Read-only, insertion-ordered collection of listings keyed by id."""

    def __init__(self, properties: Iterable[Property]) -> None:
        by_id: dict[str, Property] = {}
        for listing in properties:
            if listing.id in by_id:
                raise DatasetError(f"Duplicate property id in dataset: {listing.id}")
            by_id[listing.id] = listing
        self._by_id = by_id
        self._ordered: tuple[Property, ...] = tuple(by_id.values())

    @property
    def properties(self) -> tuple[Property, ...]:
        return self._ordered

    @property
    def unresolved_date_ids(self) -> list[str]:
        """Identifiers of listings whose added date could not be resolved."""

        return [listing.id for listing in self._ordered if not listing.added.is_resolved]

    def get(self, property_id: str) -> Property | None:
        return self._by_id.get(property_id)

    def require(self, property_id: str) -> Property:
        listing = self._by_id.get(property_id)
        if listing is None:
            raise LookupError(f"Property not found: {property_id}")
        return listing

    def __contains__(self, property_id: object) -> bool:
        return property_id in self._by_id

    def __iter__(self) -> Iterator[Property]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)


def _extract_records(document: Any) -> list[Any]:
    if isinstance(document, Mapping):
        records = document.get("properties")
    else:
        records = document
    if not isinstance(records, list):
        raise DatasetError(
            "Dataset must be a list of properties or an object with a 'properties' list"
        )
    return records


def build_catalog(records: Iterable[Any]) -> PropertyCatalog:
    """Validate raw dataset records and assemble a :class:`PropertyCatalog`."""

    properties: list[Property] = []
    for index, record in enumerate(records):
        try:
            listing = Property.model_validate(record)
        except ValidationError as exc:
            raise DatasetError(
                f"Property record #{index} failed validation: {exc.error_count()} error(s)\n{exc}"
            ) from exc
        if not listing.added.is_resolved:
            logger.warning(
                "Property %s has an unresolvable added date (%s); it will be "
                "excluded from 'added after' searches",
                listing.id,
                listing.added.display(),
            )
        properties.append(listing)

    catalog = PropertyCatalog(properties)
    logger.info("Loaded %d propert%s", len(catalog), "y" if len(catalog) == 1 else "ies")
    return catalog


def load_catalog(path: Path | str) -> PropertyCatalog:
    """Read the JSON dataset at ``path`` and return the validated catalog."""

    dataset_path = Path(path)
    try:
        raw = dataset_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DatasetError(f"Unable to read dataset {dataset_path}: {exc}") from exc

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DatasetError(f"Dataset {dataset_path} is not valid JSON: {exc}") from exc

    logger.debug("Reading property dataset from %s", dataset_path)
    return build_catalog(_extract_records(document))


__all__ = ["DatasetError", "PropertyCatalog", "build_catalog", "load_catalog"]
