"""Tests covering the helper utilities that construct error responses."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from favorites_api.schemas.error import ErrorType, ValidationErrorDetail
from favorites_api.utils import error_responses
from favorites_api.utils.error_responses import (
    build_error_response,
    build_validation_error_response,
    error_type_for_status,
)
from favorites_api.utils.request_context import clear_request_id, set_request_id


def _freeze_timestamp(monkeypatch: pytest.MonkeyPatch, fixed: datetime) -> None:
    monkeypatch.setattr(error_responses, "_current_timestamp", lambda: fixed)


def test_validation_error_response_uses_context_request_id(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    fixed_timestamp = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
    _freeze_timestamp(monkeypatch, fixed_timestamp)

    token = set_request_id("req-123")
    try:
        errors = [
            ValidationErrorDetail(field="body.assetId", message="Field required")
        ]

        response = build_validation_error_response(
            message="Request validation failed",
            detail="1 validation error(s)",
            status_code=422,
            path="/users/u1/favorites",
            errors=errors,
        )

        assert response.request_id == "req-123"
        assert response.timestamp == fixed_timestamp
        assert response.errors == errors
        assert response.error_type is ErrorType.VALIDATION_ERROR
    finally:
        clear_request_id(token)


def test_error_response_prefers_explicit_request_id(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    fixed_timestamp = datetime(2024, 1, 2, 6, 30, 0, tzinfo=UTC)
    _freeze_timestamp(monkeypatch, fixed_timestamp)
    token = set_request_id("from-context")

    try:
        response = build_error_response(
            error_type=ErrorType.CONFLICT,
            message="asset already favorited",
            detail=None,
            status_code=409,
            path="/users/u1/favorites",
            request_id="override-id",
        )
    finally:
        clear_request_id(token)

    assert response.request_id == "override-id"
    assert response.timestamp == fixed_timestamp
    assert response.model_dump(mode="json")["error_type"] == "conflict"


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [
        (400, ErrorType.BAD_REQUEST),
        (404, ErrorType.NOT_FOUND),
        (409, ErrorType.CONFLICT),
        (422, ErrorType.VALIDATION_ERROR),
        (418, ErrorType.BAD_REQUEST),
        (503, ErrorType.INTERNAL_ERROR),
    ],
)
def test_error_type_for_status(status_code: int, expected: ErrorType) -> None:
    assert error_type_for_status(status_code) is expected
