"""
DynamoDB table backend.

Used when the service runs in the hosted (Lambda) environment. The boto3
resource and table handle are created lazily on first use and then reused for
the life of the process, so importing this module or building the data source
never touches the network.

Backend failures are wrapped in DataSourceError and propagate; there is no
retry or partial-result policy at this layer.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from payments_api.config import get_settings
from payments_api.datasources.abstract import AbstractPaymentDataSource
from payments_api.datasources.local import parse_payments
from payments_api.domain.models import Payment
from payments_api.errors import DataSourceError
from payments_api.utils.logging import get_logger

log = get_logger(__name__)


class DynamoDBDataSource(AbstractPaymentDataSource):
    """
    Payments served from a DynamoDB table keyed on `id`.

    Parameters
    ----------
    table_name : str, optional
        Table to read. Defaults to settings.payments_table_name.
    region : str, optional
        AWS region. Defaults to settings.aws_region.
    endpoint_url : str, optional
        Custom endpoint (LocalStack, DynamoDB Local).
    resource_factory : callable, optional
        Builds the DynamoDB service resource; defaults to `boto3.resource`.
    """

    name: str = "dynamodb"
    label: str = "DynamoDB"

    def __init__(
        self,
        table_name: Optional[str] = None,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        resource_factory: Optional[Callable[..., Any]] = None,
    ) -> None:
        settings = get_settings()
        self.table_name = table_name or settings.payments_table_name
        self.region = region or settings.aws_region
        self.endpoint_url = endpoint_url or settings.dynamodb_endpoint_url
        self._resource_factory = resource_factory or boto3.resource
        self._table: Any = None
        self._lock = threading.Lock()

    def _get_table(self) -> Any:
        """
        Get or create the table handle (thread-safe, constructed once).
        """
        if self._table is not None:
            return self._table
        with self._lock:
            if self._table is None:
                kwargs: Dict[str, Any] = {"region_name": self.region}
                if self.endpoint_url:
                    kwargs["endpoint_url"] = self.endpoint_url
                try:
                    resource = self._resource_factory("dynamodb", **kwargs)
                    self._table = resource.Table(self.table_name)
                except (BotoCoreError, ValueError) as exc:
                    # malformed endpoint URLs surface as ValueError from botocore
                    log.exception(
                        "DynamoDB client construction failed",
                        extra={"table": self.table_name, "endpoint": self.endpoint_url},
                    )
                    raise DataSourceError(
                        f"Could not create DynamoDB client for table '{self.table_name}': {exc}"
                    ) from exc
                log.info(
                    "DynamoDB table handle created",
                    extra={
                        "table": self.table_name,
                        "region": self.region,
                        "endpoint": self.endpoint_url,
                    },
                )
            return self._table

    def scan_all(self) -> List[Payment]:
        """
        Full table scan, following LastEvaluatedKey until the table is exhausted.
        """
        table = self._get_table()
        items: List[Dict[str, Any]] = []
        scan_kwargs: Dict[str, Any] = {}
        try:
            while True:
                response = table.scan(**scan_kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        except (BotoCoreError, ClientError) as exc:
            log.exception("DynamoDB scan failed", extra={"table": self.table_name})
            raise DataSourceError(f"Scan of table '{self.table_name}' failed: {exc}") from exc

        log.debug("DynamoDB scan complete", extra={"table": self.table_name, "count": len(items)})
        return parse_payments(items, origin=f"dynamodb:{self.table_name}")

    def get_by_id(self, payment_id: str) -> Optional[Payment]:
        table = self._get_table()
        try:
            response = table.get_item(Key={"id": payment_id})
        except (BotoCoreError, ClientError) as exc:
            log.exception(
                "DynamoDB get_item failed", extra={"table": self.table_name, "id": payment_id}
            )
            raise DataSourceError(
                f"Lookup of '{payment_id}' in table '{self.table_name}' failed: {exc}"
            ) from exc

        item = response.get("Item")
        if not item:
            return None
        payments = parse_payments([item], origin=f"dynamodb:{self.table_name}")
        return payments[0] if payments else None


__all__ = ["DynamoDBDataSource"]
