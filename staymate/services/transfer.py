"""Encoding and decoding of drag-and-drop transfer envelopes."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from staymate.schemas.favorites import TRANSFER_KIND, TransferEnvelope
from staymate.schemas.property import Property

logger = logging.getLogger(__name__)


def encode_transfer(listing: Property) -> str:
    """Serialize the drag payload set on drag-start for ``listing``."""

    return TransferEnvelope(kind=TRANSFER_KIND, property_id=listing.id).model_dump_json()


def decode_transfer(payload: str | bytes | None) -> TransferEnvelope | None:
    """Return the envelope carried by ``payload`` or ``None`` when unusable.

    Drops can originate from any draggable element on the page, so a missing,
    non-JSON, or foreign payload is an expected input rather than an error.
    """

    if payload is None:
        return None
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Ignoring drop payload that is not UTF-8 text")
            return None
    if not payload.strip():
        return None

    try:
        return TransferEnvelope.model_validate_json(payload)
    except ValidationError as exc:
        logger.debug("Ignoring unrecognised drop payload (%d error(s))", exc.error_count())
        return None


__all__ = ["decode_transfer", "encode_transfer"]
