"""Builders for the structured error payloads returned by the API.

Every handler in :mod:`favorites_api.main` goes through these helpers so the
request id and a timezone-aware timestamp are always filled in.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from favorites_api.schemas.error import (
    ErrorResponse,
    ErrorType,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
from favorites_api.utils.request_context import get_request_id

__all__ = [
    "build_error_response",
    "build_validation_error_response",
    "error_type_for_status",
]

_STATUS_ERROR_TYPES: dict[int, ErrorType] = {
    400: ErrorType.BAD_REQUEST,
    404: ErrorType.NOT_FOUND,
    405: ErrorType.BAD_REQUEST,
    409: ErrorType.CONFLICT,
    422: ErrorType.VALIDATION_ERROR,
}


def _current_timestamp() -> datetime:
    """Return the payload timestamp; tests monkeypatch this for determinism."""

    return datetime.now(UTC)


def error_type_for_status(status_code: int) -> ErrorType:
    """Map an HTTP status onto the closest :class:`ErrorType`."""

    if status_code in _STATUS_ERROR_TYPES:
        return _STATUS_ERROR_TYPES[status_code]
    if 400 <= status_code < 500:
        return ErrorType.BAD_REQUEST
    return ErrorType.INTERNAL_ERROR


def build_validation_error_response(
    *,
    errors: Sequence[ValidationErrorDetail],
    message: str,
    detail: str,
    status_code: int,
    path: str,
    request_id: str | None = None,
) -> ValidationErrorResponse:
    """Construct a ``ValidationErrorResponse`` enriched with metadata."""

    return ValidationErrorResponse(
        error_type=ErrorType.VALIDATION_ERROR,
        message=message,
        detail=detail,
        status_code=status_code,
        timestamp=_current_timestamp(),
        request_id=request_id or get_request_id(),
        path=path,
        errors=list(errors),
    )


def build_error_response(
    *,
    error_type: ErrorType,
    message: str,
    detail: str | None,
    status_code: int,
    path: str,
    request_id: str | None = None,
) -> ErrorResponse:
    """Construct a generic ``ErrorResponse`` enriched with metadata.

    An explicit ``request_id`` wins over the one stored in the request context.
    """

    return ErrorResponse(
        error_type=error_type,
        message=message,
        detail=detail,
        status_code=status_code,
        timestamp=_current_timestamp(),
        request_id=request_id or get_request_id(),
        path=path,
    )
