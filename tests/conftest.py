"""Shared fixtures: a two-listing scenario catalog and the bundled sample catalog."""

from __future__ import annotations

from typing import Any

import pytest

from staymate.services.catalog import PropertyCatalog, build_catalog, load_catalog
from staymate.settings import DEFAULT_DATASET_PATH


def make_record(**overrides: Any) -> dict[str, Any]:
    """Return a dataset-shaped listing record with sensible defaults."""

    record: dict[str, Any] = {
        "id": "listing",
        "type": "House",
        "bedrooms": 2,
        "price": 250000,
        "tenure": "Freehold",
        "description": "A listing used in tests.",
        "location": "Test Street, London",
        "picture": "images/listing-small.jpg",
        "pictures": ["images/listing-1.jpg"],
        "floorPlan": "images/listing-floorplan.jpg",
        "Postalcode area": "E1",
        "added": {"year": 2023, "month": "May", "day": 1},
    }
    record.update(overrides)
    return record


@pytest.fixture
def scenario_records() -> list[dict[str, Any]]:
    """The House/Flat pair used by the end-to-end filtering scenarios."""

    return [
        make_record(
            id=1,
            type="House",
            price=300000,
            bedrooms=3,
            location="Camden, London",
            **{
                "Postalcode area": "NW1",
                "added": {"year": 2023, "month": "January", "day": 5},
            },
        ),
        make_record(
            id=2,
            type="Flat",
            price=150000,
            bedrooms=1,
            location="Southwark, London",
            **{
                "Postalcode area": "SE1",
                "added": {"year": 2023, "month": "June", "day": 10},
            },
        ),
    ]


@pytest.fixture
def scenario_catalog(scenario_records: list[dict[str, Any]]) -> PropertyCatalog:
    return build_catalog(scenario_records)


@pytest.fixture
def sample_catalog() -> PropertyCatalog:
    """The catalog bundled with the package."""

    return load_catalog(DEFAULT_DATASET_PATH)
