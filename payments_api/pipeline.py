"""
Query pipeline for the payments collection.

Usage:
    from payments_api.pipeline import get_payments_with_filters, summarize

    payments = get_payments_with_filters(FilterCriteria(recipient="john"))
    summary = summarize(payments)

Stages run in a fixed order, each narrowing the previous stage's output
without reordering or deduplicating:

1. scan the data source
2. keep pending payments (always)
3. recipient: case-insensitive substring
4. after: scheduled_date strictly later than the bound
5. else before: scheduled_date strictly earlier than the bound
6. date: scheduled_date string-equal to the filter

An `after`/`before` bound that does not parse skips its stage. Only `date` is
rejected upstream when malformed.
"""

from __future__ import annotations

import operator
from decimal import Decimal
from typing import Callable, List, Optional, Sequence

from payments_api.datasources.abstract import PaymentDataSource
from payments_api.datasources.factory import get_data_source
from payments_api.domain.models import (
    DEFAULT_CURRENCY,
    FilterCriteria,
    Payment,
    PaymentSummary,
)
from payments_api.temporal import parse_datetime
from payments_api.utils.logging import get_logger

log = get_logger(__name__)


def _source(source: Optional[PaymentDataSource]) -> PaymentDataSource:
    return source if source is not None else get_data_source()


def filter_pending(payments: Sequence[Payment]) -> List[Payment]:
    return [p for p in payments if p.is_pending]


def filter_by_recipient(payments: Sequence[Payment], recipient: str) -> List[Payment]:
    needle = recipient.lower()
    return [p for p in payments if needle in p.recipient.lower()]


def _filter_by_bound(
    payments: Sequence[Payment],
    bound: str,
    compare: Callable[[object, object], bool],
    stage: str,
) -> List[Payment]:
    bound_dt = parse_datetime(bound)
    if bound_dt is None:
        log.debug(f"Unparseable '{stage}' bound, stage skipped", extra={"bound": bound})
        return list(payments)

    kept: List[Payment] = []
    for payment in payments:
        scheduled = parse_datetime(payment.scheduled_date)
        if scheduled is not None and compare(scheduled, bound_dt):
            kept.append(payment)
    return kept


def filter_after(payments: Sequence[Payment], after: str) -> List[Payment]:
    """Keep payments scheduled strictly after `after`."""
    return _filter_by_bound(payments, after, operator.gt, "after")


def filter_before(payments: Sequence[Payment], before: str) -> List[Payment]:
    """Keep payments scheduled strictly before `before`."""
    return _filter_by_bound(payments, before, operator.lt, "before")


def filter_by_date(payments: Sequence[Payment], date: str) -> List[Payment]:
    return [p for p in payments if p.scheduled_date == date]


def apply_filters(payments: Sequence[Payment], criteria: FilterCriteria) -> List[Payment]:
    """
    Run the pending filter and the optional filters over an in-memory sequence.
    """
    result = filter_pending(payments)

    if criteria.recipient is not None:
        result = filter_by_recipient(result, criteria.recipient)

    if criteria.after is not None:
        result = filter_after(result, criteria.after)
    elif criteria.before is not None:
        result = filter_before(result, criteria.before)

    if criteria.date is not None:
        result = filter_by_date(result, criteria.date)

    return result


def get_all_payments(source: Optional[PaymentDataSource] = None) -> List[Payment]:
    return _source(source).scan_all()


def get_pending_payments(source: Optional[PaymentDataSource] = None) -> List[Payment]:
    return filter_pending(get_all_payments(source))


def get_payments_with_filters(
    criteria: Optional[FilterCriteria] = None,
    source: Optional[PaymentDataSource] = None,
) -> List[Payment]:
    """
    Fetch payments and apply the filter pipeline.

    Parameters
    ----------
    criteria : FilterCriteria, optional
        Already validated filters. None means no optional filters.
    source : PaymentDataSource, optional
        Backend to read from. Defaults to the process-wide data source.

    Returns
    -------
    List[Payment]
        Pending payments matching every provided filter, in store order.
    """
    criteria = criteria or FilterCriteria()
    payments = get_all_payments(source)
    result = apply_filters(payments, criteria)
    log.debug(
        "Filter pipeline complete",
        extra={"scanned": len(payments), "returned": len(result)},
    )
    return result


def get_payment_by_id(
    payment_id: str, source: Optional[PaymentDataSource] = None
) -> Optional[Payment]:
    """
    Raw lookup by id. No status or filter semantics; None when absent.
    """
    return _source(source).get_by_id(payment_id)


def summarize(payments: Sequence[Payment]) -> PaymentSummary:
    """
    Total, count and currency of exactly the given sequence.
    """
    total = sum((p.amount for p in payments), Decimal(0))
    currency = payments[0].currency if payments else DEFAULT_CURRENCY
    return PaymentSummary(total_amount=total, count=len(payments), currency=currency)


__all__ = [
    "apply_filters",
    "filter_after",
    "filter_before",
    "filter_by_date",
    "filter_by_recipient",
    "filter_pending",
    "get_all_payments",
    "get_payment_by_id",
    "get_payments_with_filters",
    "get_pending_payments",
    "summarize",
]
