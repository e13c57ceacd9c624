"""CLI error handling helpers."""

import click

from ledgerview.domain.errors import DomainError, NotFoundError
from ledgerview.logging_setup import get_logger

logger = get_logger(__name__)


def handle_domain_error(ctx: click.Context, error: ValueError) -> None:
    """Echo a domain or parse error to stderr and exit with status 1."""
    kind = "missing" if isinstance(error, NotFoundError) else "rejected"
    if not isinstance(error, DomainError):
        kind = "unparseable"
    logger.info("%s: %s input: %s", ctx.info_name, kind, error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
