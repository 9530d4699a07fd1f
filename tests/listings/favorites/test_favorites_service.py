"""Unit tests for the favorites set state machine."""

from __future__ import annotations

import pytest

from staymate.schemas.property import Property
from staymate.services.catalog import PropertyCatalog
from staymate.services.favorites_service import FavoritesStore


@pytest.fixture
def house(scenario_catalog: PropertyCatalog) -> Property:
    return scenario_catalog.require("1")


@pytest.fixture
def flat(scenario_catalog: PropertyCatalog) -> Property:
    return scenario_catalog.require("2")


def test_add_is_idempotent(house: Property) -> None:
    once = FavoritesStore()
    once.add(house)

    twice = FavoritesStore()
    assert twice.add(house) is True
    assert twice.add(house) is False

    assert twice.list() == once.list() == [house]


def test_remove_absent_id_is_a_no_op(house: Property, flat: Property) -> None:
    store = FavoritesStore([house])

    assert store.remove(flat) is False
    assert store.remove("does-not-exist") is False
    assert store.list() == [house]


def test_remove_accepts_record_or_identifier(house: Property, flat: Property) -> None:
    store = FavoritesStore([house, flat])

    assert store.remove(house) is True
    assert store.remove("2") is True
    assert len(store) == 0


def test_add_add_remove_absent_scenario(house: Property, flat: Property) -> None:
    store = FavoritesStore()

    store.add(house)
    store.add(house)
    store.remove(flat)

    assert [listing.id for listing in store.list()] == ["1"]


@pytest.mark.parametrize("prior", [[], ["1"], ["1", "2"]])
def test_clear_always_empties(scenario_catalog: PropertyCatalog, prior: list[str]) -> None:
    store = FavoritesStore(scenario_catalog.require(property_id) for property_id in prior)

    assert store.clear() == len(prior)
    assert store.list() == []
    assert store.clear() == 0


def test_list_keeps_insertion_order(house: Property, flat: Property) -> None:
    store = FavoritesStore()
    store.add(flat)
    store.add(house)
    store.add(flat)

    assert store.ids() == ("2", "1")


def test_readding_after_remove_moves_listing_to_the_end(house: Property, flat: Property) -> None:
    store = FavoritesStore([house, flat])
    store.remove(house)
    store.add(house)

    assert store.ids() == ("2", "1")


def test_membership_is_keyed_by_id(house: Property) -> None:
    store = FavoritesStore([house])
    lookalike = house.model_copy(update={"price": 1})

    assert store.contains("1")
    assert house in store
    assert lookalike in store
    assert store.add(lookalike) is False
    assert 1 not in store


def test_list_returns_a_copy(house: Property) -> None:
    store = FavoritesStore([house])
    snapshot = store.list()
    snapshot.clear()

    assert store.list() == [house]
