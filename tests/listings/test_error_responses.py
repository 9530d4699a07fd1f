"""Tests covering the helper utilities that construct error responses."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from staymate.schemas.error import ErrorType, ValidationErrorDetail
from staymate.utils import error_responses
from staymate.utils.error_responses import (
    build_error_response,
    build_validation_error_response,
)
from staymate.utils.request_context import (
    clear_request_id,
    resolve_request_id,
    set_request_id,
)


def _freeze_timestamp(monkeypatch: pytest.MonkeyPatch, fixed: datetime) -> None:
    monkeypatch.setattr(error_responses, "_current_timestamp", lambda: fixed)


def test_validation_error_response_carries_request_metadata(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """The helper should embed the request ID and a timezone-aware timestamp."""

    fixed_timestamp = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
    _freeze_timestamp(monkeypatch, fixed_timestamp)

    token = set_request_id("req-123")
    try:
        errors = [
            ValidationErrorDetail(
                field="query.added_after",
                message="Input should be a valid date",
                value="last tuesday",
            )
        ]

        response = build_validation_error_response(
            message="Request validation failed",
            detail="1 validation error(s)",
            status_code=422,
            path="/search/",
            errors=errors,
        )
    finally:
        clear_request_id(token)

    assert response.error_type is ErrorType.VALIDATION_ERROR
    assert response.request_id == "req-123"
    assert response.timestamp == fixed_timestamp
    assert response.errors == errors


def test_error_response_prefers_explicit_request_id(monkeypatch: pytest.MonkeyPatch) -> None:
    fixed_timestamp = datetime(2024, 1, 2, 6, 30, 0, tzinfo=UTC)
    _freeze_timestamp(monkeypatch, fixed_timestamp)
    clear_request_id()

    response = build_error_response(
        error_type=ErrorType.DATASET_ERROR,
        message="Property catalog unavailable",
        detail="The property dataset could not be loaded.",
        status_code=503,
        path="/properties/",
        request_id="override-id",
    )

    assert response.request_id == "override-id"
    assert response.timestamp == fixed_timestamp
    assert response.model_dump(mode="json")["error_type"] == "dataset_error"


@pytest.mark.parametrize("inbound", [None, "", "has spaces", "x" * 65, "semi;colon"])
def test_unusable_inbound_request_ids_are_replaced(inbound) -> None:
    resolved = resolve_request_id(inbound)

    assert resolved != inbound
    assert len(resolved) == 36


def test_wellformed_inbound_request_id_is_kept() -> None:
    assert resolve_request_id("req_abc-123.4") == "req_abc-123.4"
