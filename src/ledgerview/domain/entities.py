"""Domain model entities for ledgerview.

These are pure data classes representing ledger concepts, independent of the
database schema. The filter engine only ever sees these types, so the store
can change without touching the facet logic.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Optional

# Sentinel selecting every value of a facet. Always first in an option set.
ALL = "all"


class RecordType(IntEnum):
    """Kind of resource a ledger record counts."""

    PRIMARY = 1
    PASS = 2

    @classmethod
    def parse(cls, value) -> "RecordType":
        """Coerce an enum member, its integer value or its name.

        Raises:
            ValueError: If the value does not name a record type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls(int(text))
            try:
                return cls[text.upper()]
            except KeyError:
                raise ValueError(f"Unknown record type '{value}'")
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(f"Unknown record type {value!r}")

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Record:
    """Ledger record domain entity."""

    id: int
    account_id: int
    record_type: RecordType
    timestamp: datetime
    category_name: str
    amount: int
    action: str = ""
    month_key: str = ""

    @property
    def year(self) -> str:
        return f"{self.timestamp.year:04d}"

    @property
    def month(self) -> str:
        return f"{self.timestamp.month:02d}"


@dataclass
class FacetSelection:
    """Current value of each facet.

    String facets hold ``None`` only while a cascade is being applied.
    """

    selected_type: RecordType = RecordType.PRIMARY
    selected_year: Optional[str] = ALL
    selected_month: Optional[str] = ALL
    selected_category: Optional[str] = ALL

    def copy(self) -> "FacetSelection":
        return FacetSelection(
            selected_type=self.selected_type,
            selected_year=self.selected_year,
            selected_month=self.selected_month,
            selected_category=self.selected_category,
        )


@dataclass(frozen=True)
class DerivedView:
    """Everything a presentation surface needs to render one filter state."""

    selected_type: RecordType
    selected_year: str
    selected_month: str
    selected_category: str
    available_years: tuple[str, ...] = (ALL,)
    available_months: tuple[str, ...] = (ALL,)
    available_categories: tuple[str, ...] = (ALL,)
    filtered_records: tuple[Record, ...] = field(default_factory=tuple)
    total_amount: int = 0
    record_count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.record_count == 0


@dataclass(frozen=True)
class CategoryTotal:
    """Aggregate of records sharing one category name."""

    category_name: str
    total_amount: int
    count: int
