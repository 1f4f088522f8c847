"""
Error types for the Payments API.

Each error carries the HTTP-style status and the JSON body the collaborator
layer returns, so callers (the CLI or an HTTP adapter) can render a response
without inspecting the exception type.
"""

from __future__ import annotations

from typing import Any, Dict

INVALID_FILTERS = "Invalid filters"


class PaymentsApiError(Exception):
    """Base class for errors surfaced to callers."""

    status: int = 500

    def __init__(self, message: str, body: Dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.body: Dict[str, Any] = body if body is not None else {"error": message}


class InvalidFiltersError(PaymentsApiError):
    """Illegal filter combination or malformed filter value."""

    status = 400

    def __init__(self, message: str) -> None:
        super().__init__(message, {"error": INVALID_FILTERS, "message": message})


class PaymentNotFoundError(PaymentsApiError):
    """Single-record lookup found nothing."""

    status = 404

    def __init__(self, payment_id: str) -> None:
        super().__init__("Payment not found")
        self.payment_id = payment_id


class DataSourceError(PaymentsApiError):
    """The remote backend failed to answer a read."""

    status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message, {"error": "Internal server error"})


__all__ = [
    "INVALID_FILTERS",
    "PaymentsApiError",
    "InvalidFiltersError",
    "PaymentNotFoundError",
    "DataSourceError",
]
