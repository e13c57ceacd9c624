"""Facet option derivation, filtering and aggregation.

Everything here is a pure function of a record sequence and a selection. The
``FilterEngine`` in ``ledgerview.domain.engine`` owns the mutable state and
calls into these helpers.
"""

from collections import defaultdict
from typing import Iterable, Optional, Sequence

from ledgerview.domain.entities import (
    ALL,
    CategoryTotal,
    DerivedView,
    FacetSelection,
    Record,
    RecordType,
)

UNCATEGORIZED = "Uncategorized"


def sort_records(records: Iterable[Record]) -> list[Record]:
    """Newest first, ties broken by descending id."""
    return sorted(records, key=lambda r: (r.timestamp, r.id), reverse=True)


def is_concrete(value: Optional[str]) -> bool:
    """True when a facet value narrows the selection."""
    return bool(value) and value != ALL


def matching_records(
    records: Iterable[Record],
    record_type: RecordType,
    year: Optional[str] = ALL,
    month: Optional[str] = ALL,
    category: Optional[str] = ALL,
) -> list[Record]:
    """Records of ``record_type`` matching every concrete facet value.

    Order of ``records`` is preserved.
    """
    items = [r for r in records if r.record_type == record_type]
    if is_concrete(year):
        items = [r for r in items if r.year == year]
    if is_concrete(month):
        items = [r for r in items if r.month == month]
    if is_concrete(category):
        items = [r for r in items if r.category_name == category]
    return items


def available_years(records: Iterable[Record]) -> tuple[str, ...]:
    """Distinct years, newest first, with the sentinel prepended."""
    years = sorted({r.year for r in records}, reverse=True)
    return (ALL, *years)


def available_months(
    records: Iterable[Record], record_type: RecordType, year: Optional[str]
) -> tuple[str, ...]:
    """Distinct two-digit months for a type and year, latest first."""
    items = matching_records(records, record_type, year=year)
    months = sorted({r.month for r in items}, reverse=True)
    return (ALL, *months)


def available_categories(
    records: Iterable[Record],
    record_type: RecordType,
    year: Optional[str],
    month: Optional[str],
) -> tuple[str, ...]:
    """Distinct non-empty category names, alphabetical."""
    items = matching_records(records, record_type, year=year, month=month)
    names = sorted({r.category_name for r in items if is_concrete(r.category_name)})
    return (ALL, *names)


def reselect(previous: Optional[str], options: Sequence[str]) -> str:
    """Keep ``previous`` if it survived, otherwise fall back to the sentinel."""
    if previous is not None and previous in options:
        return previous
    return options[0]


def total_amount(records: Iterable[Record]) -> int:
    return sum(r.amount for r in records)


def build_view(records: Sequence[Record], selection: FacetSelection) -> DerivedView:
    """Derive option sets, filtered records and aggregate for a selection.

    The selection must already be settled: every string facet is a member of
    the option set derived from its upstream facets.
    """
    years = available_years(records)
    months = available_months(records, selection.selected_type, selection.selected_year)
    categories = available_categories(
        records,
        selection.selected_type,
        selection.selected_year,
        selection.selected_month,
    )
    filtered = tuple(
        matching_records(
            records,
            selection.selected_type,
            year=selection.selected_year,
            month=selection.selected_month,
            category=selection.selected_category,
        )
    )
    return DerivedView(
        selected_type=selection.selected_type,
        selected_year=selection.selected_year,
        selected_month=selection.selected_month,
        selected_category=selection.selected_category,
        available_years=years,
        available_months=months,
        available_categories=categories,
        filtered_records=filtered,
        total_amount=total_amount(filtered),
        record_count=len(filtered),
    )


def summarize_by_category(records: Iterable[Record]) -> list[CategoryTotal]:
    """Per-category totals, sorted by name with uncategorized records last."""
    groups: dict[str, dict[str, int]] = defaultdict(lambda: {"total": 0, "count": 0})
    for record in records:
        name = record.category_name or UNCATEGORIZED
        groups[name]["total"] += record.amount
        groups[name]["count"] += 1

    names = sorted(name for name in groups if name != UNCATEGORIZED)
    if UNCATEGORIZED in groups:
        names.append(UNCATEGORIZED)
    return [
        CategoryTotal(
            category_name=name,
            total_amount=groups[name]["total"],
            count=groups[name]["count"],
        )
        for name in names
    ]
