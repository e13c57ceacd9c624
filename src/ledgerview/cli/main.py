"""Main CLI entry point."""

import click
from ledgerview.database.factories import create_sqlite_database
from ledgerview.logging_setup import configure_logging, parse_level

# Import and register all commands at module level
from ledgerview.cli.commands import (
    add,
    import_cmd,
    records,
    view,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LEDGERVIEW_DB_PATH environment variable)",
    envvar="LEDGERVIEW_DB_PATH",
)
@click.option(
    "--log-level",
    help="Log level name or number (overrides LEDGERVIEW_LOG_LEVEL environment variable)",
    envvar="LEDGERVIEW_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Ledgerview - browse ledger records by type, year, month and category.

    Import exported detail records, then narrow them down with cascading
    filters and see what they add up to.
    """
    ctx.ensure_object(dict)

    try:
        configure_logging(parse_level(log_level) if log_level else None)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level")

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
add.register_commands(cli)
import_cmd.register_commands(cli)
records.register_commands(cli)
view.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
