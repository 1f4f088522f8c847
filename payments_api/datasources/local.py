"""
Local JSON document backend.

Reads a JSON array of payment records from disk on first access and keeps the
parsed list for the lifetime of the instance. A missing or corrupt document is
not fatal: a warning is logged and the store behaves as if it were empty.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from payments_api.config import get_settings
from payments_api.datasources.abstract import AbstractPaymentDataSource
from payments_api.domain.models import Payment
from payments_api.utils.logging import get_logger

log = get_logger(__name__)


def parse_payments(raw: Any, origin: str = "<memory>") -> List[Payment]:
    """
    Validate a decoded JSON document into payments.

    Records that fail validation are skipped; a document that is not an array
    yields an empty list.
    """
    if not isinstance(raw, list):
        log.warning(
            "Local payments document is not a JSON array",
            extra={"path": origin, "type": type(raw).__name__},
        )
        return []

    payments: List[Payment] = []
    for index, item in enumerate(raw):
        if isinstance(item, Payment):
            payments.append(item)
            continue
        try:
            payments.append(Payment.model_validate(item))
        except ValidationError as exc:
            log.warning(
                "Skipping malformed payment record",
                extra={"path": origin, "index": index, "errors": exc.error_count()},
            )
    return payments


def load_local_data(path: Path | str) -> List[Payment]:
    """
    Read and parse the payments document at `path`.

    Never raises for I/O or decoding problems; those are logged and an empty
    list is returned.
    """
    data_path = Path(path)
    try:
        with data_path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError, RecursionError) as exc:
        log.warning(
            f"Could not load local payments data: {exc}",
            extra={"path": str(data_path)},
        )
        return []
    payments = parse_payments(raw, origin=str(data_path))
    log.debug("Local payments loaded", extra={"path": str(data_path), "count": len(payments)})
    return payments


class LocalJsonDataSource(AbstractPaymentDataSource):
    """
    Payments served from a static JSON document.

    Pass `payments` to start pre-loaded (tests); otherwise the document at
    `path` (default: settings.local_data_path) is read once, on first access.
    """

    name: str = "local"
    label: str = "Local JSON"

    def __init__(
        self,
        path: Optional[Path | str] = None,
        payments: Optional[Iterable[Payment | Mapping[str, Any]]] = None,
    ) -> None:
        self.path = Path(path) if path is not None else get_settings().local_data_path
        self._lock = threading.Lock()
        self._payments: Optional[List[Payment]] = (
            parse_payments(list(payments)) if payments is not None else None
        )

    def _load(self) -> List[Payment]:
        if self._payments is not None:
            return self._payments
        with self._lock:
            if self._payments is None:
                self._payments = load_local_data(self.path)
            return self._payments

    def scan_all(self) -> List[Payment]:
        return list(self._load())

    def get_by_id(self, payment_id: str) -> Optional[Payment]:
        return next((p for p in self._load() if p.id == payment_id), None)


__all__ = ["LocalJsonDataSource", "load_local_data", "parse_payments"]
