"""Per-request correlation identifiers.

The HTTP middleware tags every call with an id (reusing a sane inbound
``X-Request-ID`` header) and stores it in a ``ContextVar`` so log lines and
error payloads produced anywhere during that call can quote it.
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

REQUEST_ID_HEADER = "X-Request-ID"

REQUEST_ID_CONTEXT: ContextVar[str] = ContextVar("staymate_request_id", default="")

_ACCEPTED_INBOUND_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")


def resolve_request_id(inbound: str | None) -> str:
    """Return ``inbound`` when it is a usable id, otherwise a fresh UUID4."""

    if inbound and _ACCEPTED_INBOUND_ID.fullmatch(inbound):
        return inbound
    return str(uuid.uuid4())


def set_request_id(request_id: str) -> Token[str]:
    return REQUEST_ID_CONTEXT.set(request_id)


def get_request_id() -> str:
    return REQUEST_ID_CONTEXT.get()


def clear_request_id(token: Token[str] | None = None) -> None:
    """Restore the id active before ``token`` was issued, or blank it."""

    if token is None:
        REQUEST_ID_CONTEXT.set("")
        return
    REQUEST_ID_CONTEXT.reset(token)


__all__ = [
    "REQUEST_ID_CONTEXT",
    "REQUEST_ID_HEADER",
    "clear_request_id",
    "get_request_id",
    "resolve_request_id",
    "set_request_id",
]
