"""Command for adding a single ledger record."""

import click
from ledgerview.cli.error_handling import handle_domain_error
from ledgerview.domain.errors import DomainError
from ledgerview.domain.ledger import LedgerService


@click.command("add")
@click.option("--account", type=int, required=True, help="Account ID")
@click.option(
    "--type",
    "record_type",
    type=click.Choice(["primary", "pass"], case_sensitive=False),
    default="primary",
    show_default=True,
    help="Record type",
)
@click.option("--time", "time_str", required=True, help="Record time (e.g., '2024-05-01 12:00:00')")
@click.option("--amount", required=True, help="Signed whole-number amount")
@click.option("--category", default="", help="Category (action name) label")
@click.option("--action", default="", help="Machine action code")
@click.option("--month", help="Reporting month (YYYYMM), defaults to the record's month")
@click.pass_context
def add_record(
    ctx,
    account: int,
    record_type: str,
    time_str: str,
    amount: str,
    category: str,
    action: str,
    month: str | None,
):
    """Add a single ledger record."""
    db = ctx.obj["db"]
    service = LedgerService(db)

    try:
        record_id = service.add_record(
            account_id=account,
            record_type=record_type,
            timestamp=time_str,
            amount=amount,
            category_name=category,
            action=action,
            month_key=month,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    record = service.get_record(record_id)
    click.echo(
        f"Added {record.record_type.label} record {record.id}: "
        f"{record.timestamp:%Y-%m-%d %H:%M:%S} {record.amount:+d}"
    )


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_record)
