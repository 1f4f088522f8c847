"""
Filter validation for the collection query.

Runs before any data access. Rules are checked in a fixed order and the first
failing rule decides the message:

1. `after` and `before` together
2. `date` together with `after` or `before`
3. `date` that is not a valid calendar date
4. `recipient` that is not a string or is blank

Only `date` is format-checked here; an unparseable `after`/`before` is let
through and the query pipeline skips that stage.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from payments_api.domain.models import FilterCriteria, is_provided
from payments_api.errors import INVALID_FILTERS, InvalidFiltersError
from payments_api.temporal import is_valid_date

BEFORE_AND_AFTER = "before and after cannot be used together"
DATE_AND_RANGE = "date and before/after cannot be used together"
DATE_INVALID = "date is invalid"
RECIPIENT_INVALID = "recipient must be a string and not empty."


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of `validate_filters`.

    On success `criteria` holds the normalised filters; on failure `status`
    and `body` describe the 400 response.
    """

    is_valid: bool
    criteria: Optional[FilterCriteria] = None
    status: Optional[int] = None
    message: Optional[str] = None

    @property
    def body(self) -> Optional[Dict[str, str]]:
        if self.is_valid:
            return None
        return {"error": INVALID_FILTERS, "message": self.message or ""}

    def raise_for_error(self) -> FilterCriteria:
        """Return the criteria, or raise InvalidFiltersError."""
        if not self.is_valid or self.criteria is None:
            raise InvalidFiltersError(self.message or INVALID_FILTERS)
        return self.criteria


def _invalid(message: str) -> ValidationResult:
    return ValidationResult(is_valid=False, status=InvalidFiltersError.status, message=message)


def validate_filters(params: Mapping[str, Any] | FilterCriteria) -> ValidationResult:
    """
    Check a raw set of filter parameters for legal combinations.

    Parameters
    ----------
    params : Mapping[str, Any] | FilterCriteria
        Query parameters as received (`recipient`, `after`, `before`, `date`).
        Missing keys, None and "" are treated as not provided.

    Returns
    -------
    ValidationResult
        Valid with normalised criteria, or invalid with a status and message.
    """
    if isinstance(params, FilterCriteria):
        params = params.model_dump()

    has_after = is_provided(params.get("after"))
    has_before = is_provided(params.get("before"))
    has_date = is_provided(params.get("date"))

    if has_after and has_before:
        return _invalid(BEFORE_AND_AFTER)

    if has_date and (has_after or has_before):
        return _invalid(DATE_AND_RANGE)

    if has_date and not is_valid_date(params["date"]):
        return _invalid(DATE_INVALID)

    if is_provided(params.get("recipient")):
        recipient = params["recipient"]
        if not isinstance(recipient, str) or recipient.strip() == "":
            return _invalid(RECIPIENT_INVALID)

    return ValidationResult(is_valid=True, criteria=FilterCriteria.from_params(params))


__all__ = [
    "BEFORE_AND_AFTER",
    "DATE_AND_RANGE",
    "DATE_INVALID",
    "RECIPIENT_INVALID",
    "ValidationResult",
    "validate_filters",
]
