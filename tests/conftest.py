"""
Pytest configuration for the Payments API.

Provides fixtures for:
- A clean environment (no hosted marker, fresh settings and data source)
- The reference three-payment store
- Local data sources built from that store or from files on disk
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Generator, List

import pytest

from payments_api.config import Settings, get_settings
from payments_api.datasources.factory import reset_data_source
from payments_api.datasources.local import LocalJsonDataSource

_ENV_VARS = (
    "AWS_LAMBDA_FUNCTION_NAME",
    "PAYMENTS_TABLE_NAME",
    "AWS_REGION",
    "DYNAMODB_ENDPOINT_URL",
    "PAYMENTS_DATA_PATH",
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Isolate each test from the caller's environment and cached singletons.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    reset_data_source()
    yield
    get_settings.cache_clear()
    reset_data_source()


@pytest.fixture
def payments_data() -> List[Dict[str, Any]]:
    return [
        {
            "id": "txn_001",
            "amount": 5000,
            "currency": "USD",
            "scheduled_date": "2025-07-26",
            "recipient": "John Doe",
            "status": "pending",
        },
        {
            "id": "txn_002",
            "amount": 2500,
            "currency": "USD",
            "scheduled_date": "2025-10-01",
            "recipient": "Jane Smith",
            "status": "pending",
        },
        {
            "id": "txn_003",
            "amount": 1000,
            "currency": "USD",
            "scheduled_date": "2025-09-30",
            "recipient": "Bob Johnson",
            "status": "completed",
        },
    ]


@pytest.fixture
def local_source(payments_data: List[Dict[str, Any]]) -> LocalJsonDataSource:
    """
    Pre-loaded local data source holding the reference store.
    """
    return LocalJsonDataSource(payments=payments_data)


@pytest.fixture
def payments_file(tmp_path: Path, payments_data: List[Dict[str, Any]]) -> Path:
    """
    The reference store written to a JSON document on disk.
    """
    path = tmp_path / "payments.json"
    path.write_text(json.dumps(payments_data), encoding="utf-8")
    return path


@pytest.fixture
def use_payments_file(
    monkeypatch: pytest.MonkeyPatch, payments_file: Path
) -> Path:
    """
    Point the process-wide settings at the on-disk reference store.
    """
    monkeypatch.setenv("PAYMENTS_DATA_PATH", str(payments_file))
    get_settings.cache_clear()
    reset_data_source()
    return payments_file


@pytest.fixture
def hosted_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """
    Settings as seen inside the managed (Lambda) environment.
    """
    monkeypatch.setenv("AWS_LAMBDA_FUNCTION_NAME", "payments-api-fn")
    get_settings.cache_clear()
    reset_data_source()
    return get_settings()
