"""
Abstract data source interfaces for the Payments API.

Concrete backends (local JSON document, DynamoDB table) implement the
PaymentDataSource protocol so the query pipeline stays backend-agnostic. Both
expose the same read-only contract: a full scan and a lookup by id, where an
unknown id yields None rather than an error.
"""

from __future__ import annotations

import abc
from typing import List, Optional, Protocol, runtime_checkable

from payments_api.domain.models import Payment


@runtime_checkable
class PaymentDataSource(Protocol):
    """
    Common interface all payment backends must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    label : str
        Human label reported as `dataSource` in responses.
    """

    name: str
    label: str

    def scan_all(self) -> List[Payment]:
        """
        Return every payment in the store, in store order.
        """
        ...

    def get_by_id(self, payment_id: str) -> Optional[Payment]:
        """
        Return the payment with exactly this id, or None if there is none.
        """
        ...


class AbstractPaymentDataSource(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `name` and `label` and implement `scan_all`.
    `get_by_id` defaults to a linear scan.
    """

    name: str
    label: str

    @abc.abstractmethod
    def scan_all(self) -> List[Payment]:  # pragma: no cover - interface only
        """Return every payment in the store."""
        raise NotImplementedError

    def get_by_id(self, payment_id: str) -> Optional[Payment]:
        return next((p for p in self.scan_all() if p.id == payment_id), None)


__all__ = [
    "PaymentDataSource",
    "AbstractPaymentDataSource",
]
