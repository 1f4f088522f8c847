from __future__ import annotations

from datetime import datetime, timezone

import pytest

from payments_api.datasources.abstract import AbstractPaymentDataSource
from payments_api.datasources.local import LocalJsonDataSource
from payments_api.errors import DataSourceError, InvalidFiltersError, PaymentNotFoundError
from payments_api.service import get_payment, health, list_payments
from payments_api.validation import BEFORE_AND_AFTER, DATE_INVALID

NOW = datetime(2025, 7, 25, 18, 0, tzinfo=timezone.utc)


class _ExplodingSource(AbstractPaymentDataSource):
    name = "exploding"
    label = "Exploding"

    def __init__(self) -> None:
        self.calls = 0

    def scan_all(self):
        self.calls += 1
        raise DataSourceError("table unavailable")


def test_list_payments_envelope(local_source):
    envelope = list_payments({"recipient": "John"}, source=local_source, now=NOW)

    assert envelope["count"] == 1
    assert envelope["totalAmount"] == 5000
    assert envelope["currency"] == "USD"
    assert envelope["dataSource"] == "Local JSON"
    payment = envelope["payments"][0]
    assert payment["id"] == "txn_001"
    assert payment["amount"] == 5000
    assert isinstance(payment["amount"], int)
    assert payment["isWithin24Hours"] is True


def test_list_payments_total_matches_returned_payments(local_source):
    envelope = list_payments({}, source=local_source, now=NOW)
    assert envelope["count"] == len(envelope["payments"]) == 2
    assert envelope["totalAmount"] == sum(p["amount"] for p in envelope["payments"])
    assert [p["isWithin24Hours"] for p in envelope["payments"]] == [True, False]


def test_list_payments_empty_result_defaults(local_source):
    envelope = list_payments({"recipient": "Bob"}, source=local_source, now=NOW)
    assert envelope == {
        "payments": [],
        "count": 0,
        "totalAmount": 0,
        "currency": "USD",
        "dataSource": "Local JSON",
    }


@pytest.mark.parametrize(
    ("params", "message"),
    [
        ({"after": "2025-01-01", "before": "2025-02-01"}, BEFORE_AND_AFTER),
        ({"date": "31/12/2025"}, DATE_INVALID),
    ],
)
def test_invalid_filters_rejected_before_data_access(params, message):
    source = _ExplodingSource()
    with pytest.raises(InvalidFiltersError) as exc_info:
        list_payments(params, source=source)
    assert exc_info.value.status == 400
    assert exc_info.value.body == {"error": "Invalid filters", "message": message}
    assert source.calls == 0


def test_backend_failure_propagates():
    with pytest.raises(DataSourceError):
        list_payments({}, source=_ExplodingSource())


def test_fractional_amounts_stay_fractional():
    source = LocalJsonDataSource(
        payments=[
            {"id": "a", "amount": 10.25, "scheduled_date": "2025-08-01", "recipient": "A", "status": "pending"},
            {"id": "b", "amount": 0.5, "scheduled_date": "2025-08-02", "recipient": "B", "status": "pending"},
        ]
    )
    envelope = list_payments({}, source=source, now=NOW)
    assert envelope["totalAmount"] == 10.75
    assert envelope["payments"][0]["amount"] == 10.25


def test_get_payment_envelope(local_source):
    payload = get_payment("txn_003", source=local_source, now=NOW)
    assert payload["id"] == "txn_003"
    assert payload["status"] == "completed"
    assert payload["isWithin24Hours"] is False
    assert payload["dataSource"] == "Local JSON"


def test_get_payment_not_found(local_source):
    with pytest.raises(PaymentNotFoundError) as exc_info:
        get_payment("txn_999", source=local_source)
    assert exc_info.value.status == 404
    assert exc_info.value.body == {"error": "Payment not found"}
    assert exc_info.value.payment_id == "txn_999"


def test_health_local():
    assert health(now=NOW) == {
        "status": "healthy",
        "timestamp": NOW.isoformat(),
        "environment": "local",
        "dataSource": "Local JSON",
    }


def test_health_hosted(hosted_settings):
    payload = health(now=NOW)
    assert payload["environment"] == "lambda"
    assert payload["dataSource"] == "DynamoDB"
