"""JSON import command."""

import click
from ledgerview.cli.error_handling import handle_domain_error
from ledgerview.domain.errors import DomainError
from ledgerview.domain.record_import import RecordImportService


@click.command("import")
@click.argument("json_file", type=click.Path(exists=True))
@click.option("--account", type=int, help="Account ID to use when the file has no uid")
@click.option(
    "--type",
    "record_type",
    type=click.Choice(["primary", "pass"], case_sensitive=False),
    help="Record type to use when the file has none (default: primary)",
)
@click.pass_context
def import_json(ctx, json_file: str, account: int | None, record_type: str | None):
    """Import ledger records from a JSON detail export."""
    db = ctx.obj["db"]
    service = RecordImportService(db)

    try:
        result = service.import_json(
            json_file_path=json_file, account_id=account, record_type=record_type
        )
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("\nImport complete:")
    click.echo(f"  Imported: {result['imported']} records")
    if result["months"]:
        click.echo(f"  Months: {', '.join(result['months'])}")
    if result["errors"]:
        click.echo(f"  Errors: {len(result['errors'])}")
        for error in result["errors"]:
            click.echo(f"    {error}", err=True)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_json)
