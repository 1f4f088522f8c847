"""
Data source package for the Payments API.

Re-exports the backend interfaces, the two concrete backends and the
environment-driven selection helpers so downstream code can import from
`payments_api.datasources` directly.
"""

from payments_api.datasources.abstract import (
    AbstractPaymentDataSource,
    PaymentDataSource,
)
from payments_api.datasources.dynamodb import DynamoDBDataSource
from payments_api.datasources.factory import (
    available_data_sources,
    data_source_label,
    get_data_source,
    reset_data_source,
    resolve_data_source,
    select_data_source_name,
)
from payments_api.datasources.local import LocalJsonDataSource, load_local_data

__all__ = [
    # Abstracts
    "AbstractPaymentDataSource",
    "PaymentDataSource",
    # Backends
    "DynamoDBDataSource",
    "LocalJsonDataSource",
    "load_local_data",
    # Selection
    "available_data_sources",
    "data_source_label",
    "get_data_source",
    "reset_data_source",
    "resolve_data_source",
    "select_data_source_name",
]
