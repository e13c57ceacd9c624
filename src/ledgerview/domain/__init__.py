"""Domain layer for ledgerview application."""

from ledgerview.domain.entities import (
    ALL,
    CategoryTotal,
    DerivedView,
    FacetSelection,
    Record,
    RecordType,
)

__all__ = [
    "ALL",
    "CategoryTotal",
    "DerivedView",
    "FacetSelection",
    "Record",
    "RecordType",
]
