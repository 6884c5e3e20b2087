"""
core/errors.py
────────────────────────────────────────────────────────────────────────
Failure types raised by the analytics functions.

All of them are local computation errors: nothing here does I/O, so no
retry semantics exist. The HTTP layer maps ``http_status`` onto the
response; callers in-process just catch ``AnalyticsError``.
"""

from __future__ import annotations

from typing import Any, Mapping


class AnalyticsError(Exception):
    """Base class for every analytics failure.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (counts, limits)
        http_status: suggested HTTP status code for handlers
    """

    http_status = 400
    code = "analytics_error"

    def __init__(self, message: str, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"message": self.message, "code": self.code}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class InsufficientDataError(AnalyticsError):
    """Fewer samples than the component needs (2 for trend/prediction)."""

    http_status = 422
    code = "insufficient_data"

    def __init__(self, message: str = "Insufficient data", *, required: int, received: int) -> None:
        super().__init__(message, {"required": required, "received": received})
        self.required = required
        self.received = received


class InvalidParameterError(AnalyticsError):
    """A scalar argument is out of range (k, days_ahead, target date …)."""

    http_status = 400
    code = "invalid_parameter"


class DegenerateFitWarning(UserWarning):
    """Regression fit quality is too poor to trust long-range predictions."""
