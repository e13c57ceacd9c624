"""Tests for database mappers."""

from datetime import datetime

from ledgerview.database.models import LedgerRecord as ORMLedgerRecord
from ledgerview.database.mappers import record_to_domain
from ledgerview.domain.entities import Record, RecordType


class TestRecordMapper:
    """Tests for Record mapper."""

    def test_record_to_domain(self):
        """Test converting ORM LedgerRecord to domain Record."""
        orm_record = ORMLedgerRecord(
            id=1,
            account_id=100000001,
            record_type=2,
            month_key="202405",
            action="shop",
            action_name="Shop",
            time=datetime(2024, 5, 3, 8, 0),
            amount=5,
        )
        record = record_to_domain(orm_record)

        assert isinstance(record, Record)
        assert record.id == 1
        assert record.account_id == 100000001
        assert record.record_type == RecordType.PASS
        assert record.timestamp == orm_record.time
        assert record.category_name == "Shop"
        assert record.action == "shop"
        assert record.month_key == "202405"
        assert record.year == "2024"
        assert record.month == "05"

    def test_record_to_domain_missing_labels(self):
        """Null labels map to empty strings."""
        orm_record = ORMLedgerRecord(
            id=2,
            account_id=1,
            record_type=1,
            month_key="202401",
            action=None,
            action_name=None,
            time=datetime(2024, 1, 1),
            amount=0,
        )
        record = record_to_domain(orm_record)

        assert record.category_name == ""
        assert record.action == ""
