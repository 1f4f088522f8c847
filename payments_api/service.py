"""
Response assembly for the Payments API.

Turns raw request parameters into the envelopes an HTTP adapter (or the CLI)
returns: validation, the query pipeline, the 24-hour annotation and the
aggregate. Failures surface as PaymentsApiError subclasses carrying the status
and body to render.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from payments_api.config import get_settings
from payments_api.datasources.abstract import PaymentDataSource
from payments_api.datasources.factory import data_source_label
from payments_api.domain.models import Payment, to_json_number
from payments_api.errors import PaymentNotFoundError
from payments_api.pipeline import get_payment_by_id, get_payments_with_filters, summarize
from payments_api.temporal import is_within_24_hours
from payments_api.utils.logging import get_logger
from payments_api.validation import validate_filters

log = get_logger(__name__)


def _payment_payload(payment: Payment, now: Optional[datetime]) -> Dict[str, Any]:
    payload = to_json_number(payment.model_dump())
    payload["isWithin24Hours"] = is_within_24_hours(payment.scheduled_date, now=now)
    return payload


def list_payments(
    params: Mapping[str, Any],
    source: Optional[PaymentDataSource] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Collection envelope for the given query parameters.

    Raises
    ------
    InvalidFiltersError
        If the filter combination or the `date` value is invalid.
    DataSourceError
        If the remote backend fails.
    """
    validation = validate_filters(params)
    if not validation.is_valid:
        log.info("Rejected filters", extra={"reason": validation.message})
    criteria = validation.raise_for_error()

    payments = get_payments_with_filters(criteria, source=source)
    summary = summarize(payments)

    return {
        "payments": [_payment_payload(p, now) for p in payments],
        "count": summary.count,
        "totalAmount": to_json_number(summary.total_amount),
        "currency": summary.currency,
        "dataSource": data_source_label(),
    }


def get_payment(
    payment_id: str,
    source: Optional[PaymentDataSource] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Single-record envelope.

    Raises
    ------
    PaymentNotFoundError
        If no payment has this id.
    DataSourceError
        If the remote backend fails.
    """
    payment = get_payment_by_id(payment_id, source=source)
    if payment is None:
        raise PaymentNotFoundError(payment_id)

    payload = _payment_payload(payment, now)
    payload["dataSource"] = data_source_label()
    return payload


def health(now: Optional[datetime] = None) -> Dict[str, Any]:
    settings = get_settings()
    current = now or datetime.now(timezone.utc)
    return {
        "status": "healthy",
        "timestamp": current.isoformat(),
        "environment": "lambda" if settings.is_hosted else "local",
        "dataSource": data_source_label(settings),
    }


__all__ = ["get_payment", "health", "list_payments"]
