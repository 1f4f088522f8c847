from __future__ import annotations

from typing import Any, Dict, Optional

from rich import box
from rich.console import Console
from rich.table import Table


def print_payments(envelope: Dict[str, Any], console: Optional[Console] = None) -> None:
    """
    Render a collection envelope as a rich table.

    Payments due within the next 24 hours are highlighted.
    """
    console = console or Console()
    payments = envelope.get("payments", [])

    if not payments:
        console.print("[yellow]No pending payments match the filters.[/yellow]")
        return

    table = Table(
        title=f"Pending Payments\n[dim]Source: {envelope.get('dataSource', 'unknown')}[/dim]",
        box=box.ROUNDED,
        caption=(
            f"{envelope.get('count', len(payments))} payment(s) │ "
            f"Total: {envelope.get('totalAmount', 0)} {envelope.get('currency', '')}"
        ),
    )

    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Recipient", style="magenta")
    table.add_column("Scheduled", justify="right", style="green")
    table.add_column("Amount", justify="right", style="bold green")
    table.add_column("Currency", style="blue")
    table.add_column("Due < 24h", justify="center", style="red")

    for payment in payments:
        due_soon = bool(payment.get("isWithin24Hours"))
        table.add_row(
            str(payment.get("id", "")),
            str(payment.get("recipient", "")),
            str(payment.get("scheduled_date", "")),
            str(payment.get("amount", "")),
            str(payment.get("currency", "")),
            "●" if due_soon else "",
            style="bold yellow" if due_soon else None,
        )

    console.print(table)
