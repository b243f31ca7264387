#!/usr/bin/env python3
"""
Spend CLI - Marketing Spend Records

Command-line interface for adding and listing marketing spend entries.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

import click

from ..core.currency import format_amount
from ..core.dates import format_date
from ..spend import CreateSpendRecordDto
from .context import build_spend_service, report_errors
from .formatting import format_table
from .params import AMOUNT, DATE

SPEND_HEADERS = ["ID", "Date", "Amount", "Description", "Category"]


@click.group()
def spend() -> None:
    """Manage marketing spend records."""
    pass


@spend.command("add")
@click.option("--amount", required=True, type=AMOUNT, help="The amount spent.")
@click.option("--description", help="Description of the spend.")
@click.option("--category", help="Category of the spend.")
@click.option(
    "--date",
    "spend_date",
    type=DATE,
    help="Date of the spend (YYYY-MM-DD, default: now, UTC).",
)
@click.pass_context
def add_spend(
    ctx: click.Context,
    amount: Decimal,
    description: str | None,
    category: str | None,
    spend_date: datetime | None,
) -> None:
    """
    Add a new spend record.

    Examples:
      campaigen spend add --amount 12.34
      campaigen spend add --amount 250 --category Ads --date 2024-03-30
    """
    dto = CreateSpendRecordDto(
        amount=amount,
        description=description,
        category=category,
        date=spend_date,
    )

    shown_date = format_date(spend_date) if spend_date else "now"
    click.echo(
        f"Adding spend: Amount={format_amount(amount)}, Description={description or ''}, "
        f"Category={category or ''}, Date={shown_date}"
    )

    with report_errors("adding spend record"):
        service = build_spend_service(ctx)
        result = service.create_spend_record(dto)

    click.echo("Spend record added successfully.")
    click.echo(f"Spend record created with ID: {result.id}")


@spend.command("list")
@click.pass_context
def list_spend(ctx: click.Context) -> None:
    """List all spend records."""
    click.echo("Listing all spend records...")

    with report_errors("listing spend records"):
        service = build_spend_service(ctx)
        records = service.list_spend_records()

    rows = [
        [record.id, record.date_str, record.amount_str, record.description, record.category]
        for record in records
    ]
    for line in format_table(SPEND_HEADERS, rows):
        click.echo(line)

    if not records:
        click.echo("No spend records found.")
        return

    total = sum((record.amount for record in records), Decimal(0))
    noun = "record" if len(records) == 1 else "records"
    click.echo(f"\nTotal: {len(records)} {noun}, {format_amount(total)}")


@spend.command("show")
@click.argument("record_id", type=click.UUID)
@click.pass_context
def show_spend(ctx: click.Context, record_id: UUID) -> None:
    """Show a single spend record by ID."""
    with report_errors("loading spend record"):
        service = build_spend_service(ctx)
        record = service.get_spend_record(record_id)

    if record is None:
        click.echo(f"Spend record not found: {record_id}", err=True)
        ctx.exit(1)

    click.echo(f"ID:          {record.id}")
    click.echo(f"Date:        {record.date_str}")
    click.echo(f"Amount:      {record.amount_str}")
    click.echo(f"Description: {record.description or ''}")
    click.echo(f"Category:    {record.category or ''}")


@spend.command("delete")
@click.argument("record_id", type=click.UUID)
@click.pass_context
def delete_spend(ctx: click.Context, record_id: UUID) -> None:
    """Delete a spend record by ID. Deleting a missing record is not an error."""
    with report_errors("deleting spend record"):
        service = build_spend_service(ctx)
        removed = service.delete_spend_record(record_id)

    if removed:
        click.echo(f"Deleted spend record {record_id}.")
    else:
        click.echo(f"No spend record with ID {record_id}; nothing deleted.")
