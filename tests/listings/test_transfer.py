"""Tests for drag-and-drop transfer envelopes."""

from __future__ import annotations

import json

import pytest

from staymate.schemas.favorites import TRANSFER_KIND, TransferEnvelope
from staymate.services.catalog import PropertyCatalog
from staymate.services.transfer import decode_transfer, encode_transfer


def test_encoded_payload_carries_only_the_identifier(scenario_catalog: PropertyCatalog) -> None:
    payload = json.loads(encode_transfer(scenario_catalog.require("1")))

    assert payload == {"kind": TRANSFER_KIND, "property_id": "1"}


def test_encoded_payload_decodes_back(scenario_catalog: PropertyCatalog) -> None:
    payload = encode_transfer(scenario_catalog.require("2"))

    expected = TransferEnvelope(kind=TRANSFER_KIND, property_id="2")

    assert decode_transfer(payload) == expected
    assert decode_transfer(payload.encode("utf-8")) == expected


@pytest.mark.parametrize(
    "payload",
    [
        None,
        "",
        "   ",
        b"",
        b"\xff\xfe\x00",
        "not json at all",
        "[1, 2, 3]",
        '{"kind": "other-app/card", "property_id": "1"}',
        '{"kind": "staymate/property"}',
        '{"property_id": "1"}',
        '{"kind": "staymate/property", "property_id": ""}',
        '{"kind": "staymate/property", "property_id": "1", "extra": true}',
        '{"id": "1", "type": "House", "price": 300000}',
    ],
)
def test_unusable_payloads_decode_to_none(payload) -> None:
    assert decode_transfer(payload) is None
