import json
from datetime import date
from pathlib import Path

import pytest

from payments_api import config
from payments_api.config import DEFAULT_DATA_PATH
from payments_api.datasources.local import load_local_data
from payments_api.domain.models import PaymentStatus
from scripts import generate_payments

GENERATED_COUNT = 12


def test_get_settings_defaults():
    settings = config.get_settings()
    assert settings.aws_lambda_function_name is None
    assert settings.is_hosted is False
    assert settings.payments_table_name == "PaymentsTable"
    assert settings.aws_region == "us-east-1"
    assert settings.dynamodb_endpoint_url is None
    assert settings.local_data_path == DEFAULT_DATA_PATH
    assert settings.log_level == "INFO"


def test_get_settings_reads_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("AWS_LAMBDA_FUNCTION_NAME", "fn")
    monkeypatch.setenv("PAYMENTS_TABLE_NAME", "Custom")
    monkeypatch.setenv("AWS_REGION", "eu-west-2")
    config.get_settings.cache_clear()

    settings = config.get_settings()
    assert settings.is_hosted is True
    assert settings.payments_table_name == "Custom"
    assert settings.aws_region == "eu-west-2"


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_generate_payments_is_deterministic():
    first = generate_payments._generate_payments(GENERATED_COUNT, seed=7, start=date(2025, 7, 1))
    second = generate_payments._generate_payments(GENERATED_COUNT, seed=7, start=date(2025, 7, 1))
    assert first == second
    assert len(first) == GENERATED_COUNT
    assert first[0]["id"] == "txn_001"
    assert {p["status"] for p in first} <= {PaymentStatus.PENDING, PaymentStatus.COMPLETED, "failed"}


def test_generate_payments_writes_loadable_document(tmp_path: Path):
    output = tmp_path / "nested" / "payments.json"
    payments = generate_payments._generate_payments(5, seed=123, start=date(2025, 7, 1))
    generate_payments._write_json(payments, output)

    assert json.loads(output.read_text(encoding="utf-8")) == payments
    assert [p.id for p in load_local_data(output)] == [p["id"] for p in payments]
