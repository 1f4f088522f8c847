"""
Payment fixture generation and loading script for the Payments API.

Implements deterministic pseudo-random payment generation, emits a JSON array
document usable as the local store, and optionally loads the same records into
a DynamoDB table for hosted or LocalStack testing.
"""

from __future__ import annotations

import json
import random
import sys
import time
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional

import boto3
import typer

from payments_api.config import get_settings
from payments_api.domain.models import PaymentStatus

app = typer.Typer(help="Generate synthetic payments and optionally load them into DynamoDB.")

RECIPIENTS = [
    "John Doe",
    "Jane Smith",
    "Bob Johnson",
    "Acme Corporation",
    "Globex Industries",
    "Initech LLC",
    "Maria Garcia",
    "Wayne Enterprises",
]
STATUSES = [
    PaymentStatus.PENDING,
    PaymentStatus.PENDING,
    PaymentStatus.PENDING,
    PaymentStatus.COMPLETED,
    "failed",
]


def _generate_payments(
    count: int, seed: int, start: date, span_days: int = 120, currency: str = "USD"
) -> List[Dict[str, Any]]:
    rng = random.Random(seed)
    payments: List[Dict[str, Any]] = []
    for i in range(1, count + 1):
        scheduled = start + timedelta(days=rng.randint(0, span_days))
        payments.append(
            {
                "id": f"txn_{i:03d}",
                "amount": round(rng.uniform(10, 15_000), 2),
                "currency": currency,
                "scheduled_date": scheduled.isoformat(),
                "recipient": rng.choice(RECIPIENTS),
                "status": rng.choice(STATUSES),
            }
        )
    return payments


def _write_json(payments: List[Dict[str, Any]], output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as f:
        json.dump(payments, f, indent=2)
        f.write("\n")


def _load_into_table(
    payments: List[Dict[str, Any]],
    table_name: str,
    region: str,
    endpoint_url: Optional[str] = None,
) -> int:
    kwargs: Dict[str, Any] = {"region_name": region}
    if endpoint_url:
        kwargs["endpoint_url"] = endpoint_url
    table = boto3.resource("dynamodb", **kwargs).Table(table_name)
    with table.batch_writer(overwrite_by_pkeys=["id"]) as batch:
        for payment in payments:
            # DynamoDB rejects floats
            item = dict(payment, amount=Decimal(str(payment["amount"])))
            batch.put_item(Item=item)
    return len(payments)


@app.command()
def main(
    count: int = typer.Option(25, "--count", "-n", help="Number of payments to generate."),
    seed: int = typer.Option(42, "--seed", help="Deterministic RNG seed."),
    start: Optional[str] = typer.Option(
        None, "--start", help="First possible scheduled date (YYYY-MM-DD). Defaults to today."
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="JSON output path (defaults to the configured local data path).",
    ),
    load: bool = typer.Option(
        False, "--load", help="Also load the payments into the configured DynamoDB table."
    ),
) -> None:
    """
    Generate synthetic payments as a JSON document and optionally load them into DynamoDB.
    """
    settings = get_settings()
    first_date = date.fromisoformat(start) if start else date.today()
    target = output or settings.local_data_path

    begin = time.perf_counter()
    payments = _generate_payments(count, seed=seed, start=first_date)
    _write_json(payments, target)
    typer.echo(f"Wrote {len(payments)} payments -> {target} (seed={seed})")

    if not load:
        return

    typer.echo(f"Loading into DynamoDB table '{settings.payments_table_name}'...")
    loaded = _load_into_table(
        payments,
        table_name=settings.payments_table_name,
        region=settings.aws_region,
        endpoint_url=settings.dynamodb_endpoint_url,
    )
    typer.echo(f"Loaded {loaded} items in {time.perf_counter() - begin:.2f}s.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
