"""Filtered record viewing command."""

import click
from ledgerview.cli.error_handling import handle_domain_error
from ledgerview.domain.engine import OPTION_FIELDS
from ledgerview.domain.entities import ALL, DerivedView
from ledgerview.domain.errors import DomainError
from ledgerview.domain.facets import summarize_by_category
from ledgerview.domain.ledger import LedgerService

FACET_LABELS = {
    "year": "Years",
    "month": "Months",
    "category": "Categories",
}


def normalize_month(month: str) -> str:
    """Accept "5" as well as "05" for a month filter."""
    month = month.strip()
    if month.isdigit() and len(month) == 1:
        return f"0{month}"
    return month


def format_options(options: tuple[str, ...], selected: str) -> str:
    """Render an option set with the selected entry bracketed."""
    return " ".join(f"[{option}]" if option == selected else option for option in options)


def render_view(view: DerivedView, verbose: bool = False) -> None:
    """Echo option sets, records and totals of a derived view."""
    click.echo(f"Type: {view.selected_type.label}")
    click.echo(f"{FACET_LABELS['year']:<11} {format_options(view.available_years, view.selected_year)}")
    click.echo(f"{FACET_LABELS['month']:<11} {format_options(view.available_months, view.selected_month)}")
    click.echo(
        f"{FACET_LABELS['category']:<11} "
        f"{format_options(view.available_categories, view.selected_category)}"
    )

    if view.is_empty:
        click.echo("\nNo records found.")
        return

    click.echo("-" * 72)
    if verbose:
        click.echo(f"{'ID':<6} {'Time':<20} {'Amount':>8}  {'Month':<7} {'Action':<16} {'Category'}")
    else:
        click.echo(f"{'Time':<20} {'Amount':>8}  {'Category'}")
    click.echo("-" * 72)

    for record in view.filtered_records:
        time_str = record.timestamp.strftime("%Y-%m-%d %H:%M:%S")
        if verbose:
            click.echo(
                f"{record.id:<6} {time_str:<20} {record.amount:>+8d}  "
                f"{record.month_key:<7} {record.action[:16]:<16} {record.category_name}"
            )
        else:
            click.echo(f"{time_str:<20} {record.amount:>+8d}  {record.category_name}")

    click.echo("-" * 72)
    click.echo(f"Records: {view.record_count}")
    click.echo(f"Total: {view.total_amount:+d}")


def render_category_breakdown(view: DerivedView) -> None:
    """Echo per-category totals of the filtered records."""
    totals = summarize_by_category(view.filtered_records)
    if not totals:
        return
    click.echo("\nBy category:")
    click.echo(f"{'Category':<30} {'Count':>6} {'Total':>10}")
    for item in totals:
        click.echo(f"{item.category_name[:30]:<30} {item.count:>6} {item.total_amount:>+10d}")


@click.command("view")
@click.option("--account", type=int, required=True, help="Account ID")
@click.option(
    "--type",
    "record_type",
    type=click.Choice(["primary", "pass"], case_sensitive=False),
    default="primary",
    show_default=True,
    help="Record type",
)
@click.option("--year", help="Year (e.g., 2024)")
@click.option("--month", help="Month number (e.g., 05)")
@click.option("--category", help="Category (action name)")
@click.option("--by-category", is_flag=True, help="Show totals per category")
@click.option("--verbose", "-v", is_flag=True, help="Show record IDs, months and action codes")
@click.pass_context
def view_records(
    ctx,
    account: int,
    record_type: str,
    year: str | None,
    month: str | None,
    category: str | None,
    by_category: bool,
    verbose: bool,
):
    """View an account's records narrowed by type, year, month and category.

    Filters are applied in that order. A value that is not available under
    the filters before it is ignored and a warning is printed.
    """
    db = ctx.obj["db"]
    service = LedgerService(db)

    try:
        engine = service.open_engine(account)
    except DomainError as e:
        handle_domain_error(ctx, e)

    engine.set_type(record_type)

    requested = [
        ("year", year, engine.set_year),
        ("month", normalize_month(month) if month else None, engine.set_month),
        ("category", category, engine.set_category),
    ]
    for facet, value, setter in requested:
        if value is None:
            continue
        before = engine.get_current_view()
        options = getattr(before, OPTION_FIELDS[facet])
        if value not in options:
            click.echo(
                f"Warning: {facet} '{value}' is not available; showing {ALL} {FACET_LABELS[facet].lower()}.",
                err=True,
            )
            continue
        setter(value)

    view = engine.get_current_view()
    click.echo(f"\nAccount {account}")
    render_view(view, verbose=verbose)
    if by_category:
        render_category_breakdown(view)


def register_commands(cli):
    """Register view command with main CLI."""
    cli.add_command(view_records)
