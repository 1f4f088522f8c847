"""
Domain models for the Payments API.

`Payment` mirrors a record of the payments store (local JSON document or the
DynamoDB table). Records are read-only to this package: they are validated on
read and never written back. `FilterCriteria` is the request-scoped set of
optional filters, already normalised so that "not provided" is always `None`.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CURRENCY = "USD"


class PaymentStatus:
    """Known lifecycle states. The store may hold others."""

    PENDING = "pending"
    COMPLETED = "completed"


class Payment(BaseModel):
    """
    A single payment record.

    Attributes the store carries beyond the documented ones are kept
    (`extra="allow"`) and echoed back in responses.
    """

    id: str = Field(..., description="Opaque primary key.")
    amount: Decimal = Field(..., ge=0, description="Amount denominated in `currency`.")
    currency: str = Field(DEFAULT_CURRENCY, description="ISO-like currency code.")
    scheduled_date: str = Field(..., description="Due date, e.g. 2025-07-26.")
    recipient: str = Field(..., description="Display name of the payee.")
    status: str = Field(..., description="Lifecycle state, e.g. pending or completed.")

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def is_pending(self) -> bool:
        return self.status == PaymentStatus.PENDING


def is_provided(value: Any) -> bool:
    """Missing keys, None and the empty string all mean "not provided"."""
    return value is not None and value != ""


class FilterCriteria(BaseModel):
    """
    Optional filters for the collection query.

    `after` and `before` are exclusive bounds, `date` is an exact match and
    `recipient` a case-insensitive substring.
    """

    recipient: Optional[str] = None
    after: Optional[str] = None
    before: Optional[str] = None
    date: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "FilterCriteria":
        """
        Build criteria from raw query parameters, mapping empty strings to None.
        """
        values = {}
        for key in ("recipient", "after", "before", "date"):
            raw = params.get(key)
            values[key] = str(raw) if is_provided(raw) else None
        return cls(**values)


class PaymentSummary(BaseModel):
    """Aggregate over the final filtered sequence."""

    total_amount: Decimal = Decimal(0)
    count: int = 0
    currency: str = DEFAULT_CURRENCY

    model_config = ConfigDict(frozen=True)


def to_json_number(value: Any) -> Any:
    """
    Convert Decimals (DynamoDB's numeric type) to int or float, recursively.
    """
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: to_json_number(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [to_json_number(v) for v in value]
    return value


__all__ = [
    "DEFAULT_CURRENCY",
    "FilterCriteria",
    "Payment",
    "PaymentStatus",
    "PaymentSummary",
    "is_provided",
    "to_json_number",
]
