"""Stateful filter engine over one account's ledger records."""

from typing import Callable, Iterable, Optional

from ledgerview.domain.entities import DerivedView, FacetSelection, Record, RecordType
from ledgerview.domain.facets import (
    available_categories,
    available_months,
    available_years,
    build_view,
    reselect,
    sort_records,
)
from ledgerview.logging_setup import get_logger

logger = get_logger(__name__)

ViewListener = Callable[[DerivedView], None]

# Dependency order of the string facets; type sits upstream of all of them.
FACET_ORDER = ("year", "month", "category")

OPTION_FIELDS = {
    "year": "available_years",
    "month": "available_months",
    "category": "available_categories",
}


class FilterEngine:
    """Holds facet selections and keeps them consistent with loaded records.

    Every public operation runs to completion before returning and leaves each
    selected value inside its option set. Listeners registered with
    ``subscribe`` are called once per operation that changed the state.
    """

    def __init__(self, records: Optional[Iterable[Record]] = None):
        """Initialize filter engine.

        Args:
            records: Optional initial records, loaded immediately
        """
        self._records: tuple[Record, ...] = ()
        self._selection = FacetSelection()
        self._view = build_view(self._records, self._selection)
        self._listeners: list[ViewListener] = []
        self._updating = False
        if records is not None:
            self.load(records)

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    @property
    def selection(self) -> FacetSelection:
        return self._selection.copy()

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def get_current_view(self) -> DerivedView:
        return self._view

    def load(self, records: Iterable[Record]) -> DerivedView:
        """Replace the record set and reset every facet to its default."""
        if self._updating:
            logger.debug("Ignoring load while a facet update is in progress")
            return self._view

        self._records = tuple(sort_records(records))
        logger.debug("Loaded %d records", len(self._records))
        return self._apply(FacetSelection(), cascade_from="year")

    def set_type(self, record_type) -> DerivedView:
        """Select a record type. Selecting the current type is a no-op."""
        if self._updating:
            logger.debug("Ignoring type change to %r during update", record_type)
            return self._view

        try:
            new_type = RecordType.parse(record_type)
        except ValueError:
            logger.debug("Ignoring unknown record type %r", record_type)
            return self._view

        if new_type == self._selection.selected_type:
            return self._view

        draft = self._selection.copy()
        draft.selected_type = new_type
        return self._apply(draft, cascade_from="year")

    def set_year(self, year: str) -> DerivedView:
        return self._set_facet("year", year)

    def set_month(self, month: str) -> DerivedView:
        return self._set_facet("month", month)

    def set_category(self, category: str) -> DerivedView:
        return self._set_facet("category", category)

    def _set_facet(self, facet: str, value: Optional[str]) -> DerivedView:
        """Apply a string facet value offered by the current view.

        Values missing from the facet's current option set come from a stale
        view and are dropped without touching state.
        """
        if self._updating:
            logger.debug("Ignoring %s change to %r during update", facet, value)
            return self._view

        options = self._current_options(facet)
        if value is None or value not in options:
            logger.debug("Ignoring %s %r: not in %s", facet, value, options)
            return self._view

        draft = self._selection.copy()
        setattr(draft, f"selected_{facet}", value)
        index = FACET_ORDER.index(facet)
        cascade_from = FACET_ORDER[index + 1] if index + 1 < len(FACET_ORDER) else None
        return self._apply(draft, cascade_from=cascade_from)

    def _current_options(self, facet: str) -> tuple[str, ...]:
        return getattr(self._view, OPTION_FIELDS[facet])

    def _options_for(self, facet: str, draft: FacetSelection) -> tuple[str, ...]:
        if facet == "year":
            return available_years(self._records)
        if facet == "month":
            return available_months(self._records, draft.selected_type, draft.selected_year)
        return available_categories(
            self._records,
            draft.selected_type,
            draft.selected_year,
            draft.selected_month,
        )

    def _cascade(self, draft: FacetSelection, start: str) -> None:
        """Re-validate ``start`` and every facet downstream of it.

        Each facet is cleared before its options are rebuilt, so it never
        points at an option list it is not a member of.
        """
        for facet in FACET_ORDER[FACET_ORDER.index(start):]:
            attr = f"selected_{facet}"
            previous = getattr(draft, attr)
            setattr(draft, attr, None)
            options = self._options_for(facet, draft)
            value = reselect(previous, options)
            if value != previous:
                logger.debug("Reset %s from %r to %r", facet, previous, value)
            setattr(draft, attr, value)

    def _apply(self, draft: FacetSelection, cascade_from: Optional[str]) -> DerivedView:
        self._updating = True
        try:
            if cascade_from is not None:
                self._cascade(draft, cascade_from)
            view = build_view(self._records, draft)
            self._selection = draft
            self._view = view
        finally:
            self._updating = False

        for listener in list(self._listeners):
            try:
                listener(view)
            except Exception:
                logger.exception("View listener %r failed", listener)
        return view
