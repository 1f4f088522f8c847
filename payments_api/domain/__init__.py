"""
Domain package for the Payments API.

Exports the payment record, the filter criteria and the summary aggregate.
Keep this package focused on data definitions and validation concerns.
"""

from payments_api.domain.models import (
    DEFAULT_CURRENCY,
    FilterCriteria,
    Payment,
    PaymentStatus,
    PaymentSummary,
    is_provided,
    to_json_number,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "FilterCriteria",
    "Payment",
    "PaymentStatus",
    "PaymentSummary",
    "is_provided",
    "to_json_number",
]
