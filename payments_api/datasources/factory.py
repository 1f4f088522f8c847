"""
Backend selection for the Payments API.

The backend is a pure function of the hosted-environment marker: inside Lambda
the DynamoDB table answers, everywhere else the local JSON document does. The
resolved instance is memoised for the process; business logic receives it by
injection and never re-checks the environment.
"""

from __future__ import annotations

import threading
from typing import Callable, Dict, List, Optional

from payments_api.config import Settings, get_settings
from payments_api.datasources.abstract import PaymentDataSource
from payments_api.datasources.dynamodb import DynamoDBDataSource
from payments_api.datasources.local import LocalJsonDataSource
from payments_api.utils.logging import get_logger

log = get_logger(__name__)

LOCAL = "local"
DYNAMODB = "dynamodb"

_data_source: Optional[PaymentDataSource] = None
_lock = threading.Lock()


def _data_source_factories(settings: Settings) -> Dict[str, Callable[[], PaymentDataSource]]:
    """Registry of available backends."""
    return {
        LOCAL: lambda: LocalJsonDataSource(path=settings.local_data_path),
        DYNAMODB: lambda: DynamoDBDataSource(
            table_name=settings.payments_table_name,
            region=settings.aws_region,
            endpoint_url=settings.dynamodb_endpoint_url,
        ),
    }


def available_data_sources() -> List[str]:
    """List available backend names."""
    return sorted(_data_source_factories(get_settings()).keys())


def select_data_source_name(settings: Optional[Settings] = None) -> str:
    """Backend name implied by the environment marker."""
    settings = settings or get_settings()
    return DYNAMODB if settings.is_hosted else LOCAL


def data_source_label(settings: Optional[Settings] = None) -> str:
    """Human label for the `dataSource` field of responses."""
    settings = settings or get_settings()
    return DynamoDBDataSource.label if settings.is_hosted else LocalJsonDataSource.label


def resolve_data_source(name: str, settings: Optional[Settings] = None) -> PaymentDataSource:
    factories = _data_source_factories(settings or get_settings())
    if name not in factories:
        raise ValueError(f"Unknown data source '{name}'. Available: {', '.join(factories)}")
    return factories[name]()


def get_data_source() -> PaymentDataSource:
    """Get or create the process-wide data source based on configuration."""
    global _data_source
    if _data_source is not None:
        return _data_source
    with _lock:
        if _data_source is None:
            settings = get_settings()
            name = select_data_source_name(settings)
            _data_source = resolve_data_source(name, settings)
            log.info(f"Using '{name}' data source", extra={"data_source": name})
        return _data_source


def reset_data_source() -> None:
    """Reset the data source instance (for testing)."""
    global _data_source
    with _lock:
        _data_source = None


__all__ = [
    "DYNAMODB",
    "LOCAL",
    "available_data_sources",
    "data_source_label",
    "get_data_source",
    "reset_data_source",
    "resolve_data_source",
    "select_data_source_name",
]
