from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional

import typer

from payments_api.config import get_settings
from payments_api.datasources.factory import data_source_label, select_data_source_name
from payments_api.errors import DataSourceError, InvalidFiltersError, PaymentNotFoundError
from payments_api.reporter import print_payments
from payments_api.service import get_payment, health, list_payments
from payments_api.utils.logging import configure_logging

app = typer.Typer(help="Payments API CLI.")

EXIT_NOT_FOUND = 1
EXIT_BACKEND_FAILURE = 1
EXIT_INVALID_FILTERS = 2


def _echo_json(payload: Dict[str, Any], err: bool = False) -> None:
    typer.echo(json.dumps(payload, indent=2, default=str), err=err)


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | backend={select_data_source_name(settings)} "
        f"({data_source_label(settings)}) | table={settings.payments_table_name} "
        f"region={settings.aws_region} | data={settings.local_data_path}"
    )


@app.command("list")
def list_command(
    recipient: Optional[str] = typer.Option(
        None, "--recipient", "-r", help="Case-insensitive recipient substring."
    ),
    after: Optional[str] = typer.Option(
        None, "--after", help="Only payments scheduled strictly after this date."
    ),
    before: Optional[str] = typer.Option(
        None, "--before", help="Only payments scheduled strictly before this date."
    ),
    date: Optional[str] = typer.Option(
        None, "--date", "-d", help="Only payments scheduled on exactly this date."
    ),
    table: bool = typer.Option(False, "--table", "-t", help="Render a table instead of JSON."),
) -> None:
    """
    List pending payments matching the filters.
    """
    params = {"recipient": recipient, "after": after, "before": before, "date": date}
    try:
        envelope = list_payments(params)
    except InvalidFiltersError as exc:
        _echo_json(exc.body, err=True)
        raise typer.Exit(code=EXIT_INVALID_FILTERS)
    except DataSourceError as exc:
        _echo_json(exc.body, err=True)
        raise typer.Exit(code=EXIT_BACKEND_FAILURE)

    if table:
        print_payments(envelope)
    else:
        _echo_json(envelope)


@app.command()
def get(payment_id: str = typer.Argument(..., help="Payment id, e.g. txn_001.")) -> None:
    """
    Show a single payment by id.
    """
    try:
        payload = get_payment(payment_id)
    except (PaymentNotFoundError, DataSourceError) as exc:
        _echo_json(exc.body, err=True)
        raise typer.Exit(code=EXIT_NOT_FOUND)
    _echo_json(payload)


@app.command("health")
def health_command() -> None:
    """
    Report service health and the active backend.
    """
    _echo_json(health())


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
