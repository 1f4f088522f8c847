"""
Payments API - filtering, validation and data access for pending payments.

This package serves a collection of payment records and provides:

- Filter validation for mutually exclusive combinations
- A fixed query pipeline (pending only, recipient, after/before, exact date)
- A data source switched between a local JSON document and a DynamoDB table
- Due-within-24-hours classification
- Response envelopes and a CLI on top of the above
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from payments_api.config import Settings, get_settings
from payments_api.datasources import (
    AbstractPaymentDataSource,
    DynamoDBDataSource,
    LocalJsonDataSource,
    PaymentDataSource,
    get_data_source,
    reset_data_source,
)
from payments_api.domain.models import FilterCriteria, Payment, PaymentStatus, PaymentSummary
from payments_api.errors import (
    DataSourceError,
    InvalidFiltersError,
    PaymentNotFoundError,
    PaymentsApiError,
)
from payments_api.pipeline import get_payment_by_id, get_payments_with_filters, summarize
from payments_api.service import get_payment, health, list_payments
from payments_api.temporal import is_within_24_hours
from payments_api.utils.logging import configure_logging, get_logger
from payments_api.validation import ValidationResult, validate_filters

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "FilterCriteria",
    "Payment",
    "PaymentStatus",
    "PaymentSummary",
    # Data sources
    "AbstractPaymentDataSource",
    "DynamoDBDataSource",
    "LocalJsonDataSource",
    "PaymentDataSource",
    "get_data_source",
    "reset_data_source",
    # Core operations
    "ValidationResult",
    "validate_filters",
    "get_payments_with_filters",
    "get_payment_by_id",
    "summarize",
    "is_within_24_hours",
    # Envelopes
    "get_payment",
    "health",
    "list_payments",
    # Errors
    "PaymentsApiError",
    "InvalidFiltersError",
    "PaymentNotFoundError",
    "DataSourceError",
    # Logging
    "configure_logging",
    "get_logger",
]
