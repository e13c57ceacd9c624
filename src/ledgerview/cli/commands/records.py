"""Commands for inspecting and pruning stored records."""

import click
from ledgerview.cli.error_handling import handle_domain_error
from ledgerview.domain.errors import DomainError
from ledgerview.domain.ledger import LedgerService


@click.command("accounts")
@click.pass_context
def list_accounts(ctx):
    """List accounts with stored records."""
    db = ctx.obj["db"]
    service = LedgerService(db)

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo(f"{'Account':<14} {'Months':<8} {'Records':<8}")
    click.echo("-" * 32)
    for account_id in accounts:
        months = service.list_months(account_id)
        count = len(service.list_records(account_id))
        click.echo(f"{account_id:<14} {len(months):<8} {count:<8}")


@click.command("months")
@click.option("--account", type=int, required=True, help="Account ID")
@click.pass_context
def list_months(ctx, account: int):
    """List stored reporting months for an account."""
    db = ctx.obj["db"]
    service = LedgerService(db)

    try:
        months = service.list_months(account)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not months:
        click.echo(f"No months stored for account {account}.")
        return

    for month_key in months:
        click.echo(f"{month_key[:4]}-{month_key[4:]}")


@click.command("delete")
@click.option("--account", type=int, required=True, help="Account ID")
@click.option("--month", required=True, help="Reporting month (YYYYMM)")
@click.option("--yes", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_month(ctx, account: int, month: str, yes: bool):
    """Delete every record of one account month."""
    db = ctx.obj["db"]
    service = LedgerService(db)

    if not yes:
        click.confirm(
            f"Delete all records of account {account} for month {month}?", abort=True
        )

    try:
        removed = service.delete_month(account, month)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted {removed} record{'s' if removed != 1 else ''}.")


def register_commands(cli):
    """Register record commands with main CLI."""
    cli.add_command(list_accounts)
    cli.add_command(list_months)
    cli.add_command(delete_month)
