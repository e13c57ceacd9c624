"""Ledger store domain service."""

from datetime import datetime
from typing import Iterable, Optional, Union

from ledgerview.database.base import Database
from ledgerview.domain.engine import FilterEngine
from ledgerview.domain.entities import Record, RecordType
from ledgerview.domain.errors import (
    NotFoundError,
    ValidationError,
    invalid_account_id,
    invalid_month_key,
    no_records_for_month,
    record_not_found,
)
from ledgerview.logging_setup import get_logger
from ledgerview.utils.amount_parser import parse_amount
from ledgerview.utils.date_parser import month_key_for, parse_month_key, parse_timestamp

logger = get_logger(__name__)


def validate_account_id(account_id) -> int:
    """Return ``account_id`` as a positive int or raise ValidationError."""
    if isinstance(account_id, bool):
        raise ValidationError(invalid_account_id(account_id))
    try:
        value = int(account_id)
    except (TypeError, ValueError):
        raise ValidationError(invalid_account_id(account_id))
    if value <= 0:
        raise ValidationError(invalid_account_id(account_id))
    return value


class LedgerService:
    """Service for storing and reading ledger records."""

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_record(
        self,
        account_id: int,
        record_type: Union[RecordType, int, str],
        timestamp: Union[datetime, str],
        amount: Union[int, str],
        category_name: str = "",
        action: str = "",
        month_key: Optional[str] = None,
    ) -> int:
        """Store a single record.

        Args:
            account_id: Owning account identity
            record_type: Record type, as enum, value or name
            timestamp: Time of the transaction
            amount: Signed whole-number quantity
            category_name: Display label of the producing action
            action: Machine action code
            month_key: Reporting month; defaults to the timestamp's month

        Returns:
            Record ID

        Raises:
            ValidationError: If any field is invalid
        """
        values = self._validate(
            account_id, record_type, timestamp, amount, category_name, action, month_key
        )
        record_id = self.db.create_record(**values)
        logger.info("Added record %d for account %d", record_id, values["account_id"])
        return record_id

    def get_record(self, record_id: int) -> Record:
        """Get record by ID.

        Raises:
            NotFoundError: If no such record exists
        """
        record = self.db.get_record(record_id)
        if record is None:
            raise NotFoundError(record_not_found(record_id))
        return record

    def list_records(
        self,
        account_id: int,
        record_type: Optional[RecordType] = None,
        month_key: Optional[str] = None,
    ) -> list[Record]:
        """List an account's records, newest first."""
        account_id = validate_account_id(account_id)
        if month_key is not None:
            month_key = self._month_key(month_key)
        return self.db.list_records(account_id, record_type=record_type, month_key=month_key)

    def list_accounts(self) -> list[int]:
        """List account identities with stored records."""
        return self.db.list_account_ids()

    def list_months(self, account_id: int) -> list[str]:
        """List an account's stored reporting months, latest first."""
        return self.db.list_month_keys(validate_account_id(account_id))

    def replace_month(
        self,
        account_id: int,
        month_key: str,
        record_type: Union[RecordType, int, str],
        records: Iterable[dict],
    ) -> int:
        """Swap the stored records of one account month and type.

        ``records`` are dicts with ``timestamp`` and ``amount`` keys and
        optional ``category_name`` and ``action``. Every record is validated
        before anything is deleted, and the swap is committed as one unit.

        Returns:
            Number of records stored

        Raises:
            ValidationError: If any record is invalid
        """
        account_id = validate_account_id(account_id)
        month_key = self._month_key(month_key)
        record_type = self._record_type(record_type)

        prepared = [
            self._validate(
                account_id,
                record_type,
                item.get("timestamp"),
                item.get("amount"),
                item.get("category_name") or "",
                item.get("action") or "",
                month_key,
            )
            for item in records
        ]

        try:
            removed = self.db.delete_records(
                account_id, month_key=month_key, record_type=record_type, commit=False
            )
            for values in prepared:
                self.db.create_record(**values, commit=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(
            "Replaced %d %s records for account %d month %s with %d",
            removed,
            record_type.label,
            account_id,
            month_key,
            len(prepared),
        )
        return len(prepared)

    def delete_month(self, account_id: int, month_key: str) -> int:
        """Delete every record of one account month.

        Raises:
            NotFoundError: If nothing is stored for that month
        """
        account_id = validate_account_id(account_id)
        month_key = self._month_key(month_key)
        removed = self.db.delete_records(account_id, month_key=month_key)
        if removed == 0:
            raise NotFoundError(no_records_for_month(account_id, month_key))
        logger.info("Deleted %d records for account %d month %s", removed, account_id, month_key)
        return removed

    def open_engine(self, account_id: int) -> FilterEngine:
        """Create a filter engine loaded with an account's full record set."""
        records = self.list_records(account_id)
        return FilterEngine(records)

    def _month_key(self, month_key) -> str:
        try:
            return parse_month_key(month_key)
        except ValueError:
            raise ValidationError(invalid_month_key(str(month_key)))

    def _record_type(self, record_type) -> RecordType:
        try:
            return RecordType.parse(record_type)
        except ValueError as e:
            raise ValidationError(str(e))

    def _validate(
        self,
        account_id,
        record_type,
        timestamp,
        amount,
        category_name: str,
        action: str,
        month_key: Optional[str],
    ) -> dict:
        """Normalize record fields into ``Database.create_record`` arguments."""
        account_id = validate_account_id(account_id)
        record_type = self._record_type(record_type)

        if timestamp is None:
            raise ValidationError("Record time is required")
        try:
            time = parse_timestamp(timestamp)
        except ValueError as e:
            raise ValidationError(str(e))

        if amount is None:
            raise ValidationError("Record amount is required")
        try:
            value = parse_amount(amount)
        except ValueError as e:
            raise ValidationError(str(e))

        for label, text in (("Category name", category_name), ("Action", action)):
            if text is not None and not isinstance(text, str):
                raise ValidationError(f"{label} must be a string, got {text!r}")

        return {
            "account_id": account_id,
            "record_type": record_type,
            "month_key": self._month_key(month_key) if month_key else month_key_for(time),
            "time": time,
            "amount": value,
            "action_name": (category_name or "").strip(),
            "action": (action or "").strip(),
        }
