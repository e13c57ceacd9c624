"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the table layout can change
without the filter engine noticing.
"""

from ledgerview.domain import entities as domain
from ledgerview.database.models import LedgerRecord as ORMLedgerRecord


def record_to_domain(orm_record: ORMLedgerRecord) -> domain.Record:
    """Convert SQLAlchemy LedgerRecord model to domain Record entity."""
    return domain.Record(
        id=orm_record.id,
        account_id=orm_record.account_id,
        record_type=domain.RecordType(orm_record.record_type),
        timestamp=orm_record.time,
        category_name=orm_record.action_name or "",
        amount=orm_record.amount,
        action=orm_record.action or "",
        month_key=orm_record.month_key,
    )
