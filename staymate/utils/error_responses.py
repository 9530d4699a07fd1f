"""Builders for the JSON error envelope returned by every exception handler."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from staymate.schemas.error import (
    ErrorResponse,
    ErrorType,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
from staymate.utils.request_context import get_request_id


def _current_timestamp() -> datetime:
    # Patched in tests to pin the clock.
    return datetime.now(UTC)


def _envelope(
    *,
    message: str,
    detail: str,
    status_code: int,
    path: str,
    request_id: str | None,
) -> dict[str, Any]:
    return {
        "message": message,
        "detail": detail,
        "status_code": status_code,
        "path": path,
        "timestamp": _current_timestamp(),
        "request_id": request_id or get_request_id(),
    }


def build_error_response(
    *,
    error_type: ErrorType,
    message: str,
    detail: str,
    status_code: int,
    path: str,
    request_id: str | None = None,
) -> ErrorResponse:
    """Error envelope tagged with the active (or given) request id."""

    fields = _envelope(
        message=message,
        detail=detail,
        status_code=status_code,
        path=path,
        request_id=request_id,
    )
    return ErrorResponse(error_type=error_type, **fields)


def build_validation_error_response(
    *,
    errors: Sequence[ValidationErrorDetail],
    message: str,
    detail: str,
    status_code: int,
    path: str,
    error_type: ErrorType = ErrorType.VALIDATION_ERROR,
    request_id: str | None = None,
) -> ValidationErrorResponse:
    """Like :func:`build_error_response`, carrying per-field validation errors."""

    fields = _envelope(
        message=message,
        detail=detail,
        status_code=status_code,
        path=path,
        request_id=request_id,
    )
    return ValidationErrorResponse(error_type=error_type, errors=list(errors), **fields)


__all__ = ["build_error_response", "build_validation_error_response"]
