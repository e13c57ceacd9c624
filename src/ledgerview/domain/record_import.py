"""JSON record import domain service."""

import json
from collections import defaultdict
from pathlib import Path
from typing import Any, Optional, Union

from ledgerview.database.base import Database
from ledgerview.domain.entities import RecordType
from ledgerview.domain.errors import ValidationError
from ledgerview.domain.ledger import LedgerService, validate_account_id
from ledgerview.logging_setup import get_logger
from ledgerview.utils.amount_parser import parse_amount
from ledgerview.utils.date_parser import month_key_for, parse_month_key, parse_timestamp

logger = get_logger(__name__)


class RecordImportService:
    """Service for importing exported ledger detail JSON files."""

    def __init__(self, db: Database):
        """Initialize record import service.

        Args:
            db: Database instance
        """
        self.db = db
        self.ledger_service = LedgerService(db)

    def import_json(
        self,
        json_file_path: str,
        account_id: Optional[int] = None,
        record_type: Optional[Union[RecordType, int, str]] = None,
    ) -> dict[str, Any]:
        """Import ledger records from a JSON export.

        The file holds either a list of detail items or an object with a
        ``list`` array and optional ``uid``, ``month`` and ``type`` defaults.
        Each item has ``time`` and ``num`` and may carry ``action``,
        ``action_name``, ``uid``, ``type`` and ``month``. Values in the file
        win over the ``account_id`` and ``record_type`` arguments, which only
        fill in what the file leaves out.

        Every (account, month, type) group found in the file replaces what is
        stored for it, so importing the same export twice is harmless.

        Args:
            json_file_path: Path to JSON file
            account_id: Fallback account identity
            record_type: Fallback record type (defaults to primary)

        Returns:
            Dict with import statistics:
            - imported: number of records stored
            - months: reporting months touched, latest first
            - errors: list of error messages for skipped items

        Raises:
            FileNotFoundError: If the JSON file doesn't exist
            ValidationError: If the file is not a detail export
        """
        json_path = Path(json_file_path)
        if not json_path.exists():
            raise FileNotFoundError(f"JSON file not found: {json_file_path}")

        try:
            with open(json_path, "r", encoding="utf-8-sig") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in {json_file_path}: {e}")

        defaults: dict[str, Any] = {}
        if isinstance(data, dict):
            items = data.get("list")
            defaults = {key: data.get(key) for key in ("uid", "month", "type")}
        else:
            items = data
        if not isinstance(items, list):
            raise ValidationError(
                f"{json_file_path} is not a detail export: expected a list of items"
            )

        fallback_type = RecordType.PRIMARY
        if record_type is not None:
            try:
                fallback_type = RecordType.parse(record_type)
            except ValueError as e:
                raise ValidationError(str(e))

        groups: dict[tuple[int, str, RecordType], list[dict]] = defaultdict(list)
        errors = []

        for item_num, item in enumerate(items, start=1):
            if not isinstance(item, dict):
                errors.append(f"Item {item_num}: expected an object")
                continue
            try:
                key, record = self._parse_item(item, defaults, account_id, fallback_type)
            except ValueError as e:
                errors.append(f"Item {item_num}: {e}")
                continue
            groups[key].append(record)

        imported = 0
        for (uid, month_key, rtype), records in groups.items():
            imported += self.ledger_service.replace_month(uid, month_key, rtype, records)

        months = sorted({month_key for _, month_key, _ in groups}, reverse=True)
        logger.info(
            "Imported %d records across %d months from %s (%d errors)",
            imported,
            len(months),
            json_file_path,
            len(errors),
        )
        return {
            "imported": imported,
            "months": months,
            "errors": errors,
        }

    def _parse_item(
        self,
        item: dict,
        defaults: dict[str, Any],
        account_id: Optional[int],
        fallback_type: RecordType,
    ) -> tuple[tuple[int, str, RecordType], dict]:
        """Turn one detail item into a group key and a record dict."""
        uid = item.get("uid") or defaults.get("uid") or account_id
        if uid is None:
            raise ValidationError("Missing uid and no account given")
        uid = validate_account_id(uid)

        time_value = item.get("time")
        if not time_value:
            raise ValidationError("Missing time")
        timestamp = parse_timestamp(time_value)

        if item.get("num") is None:
            raise ValidationError("Missing num")
        amount = parse_amount(item["num"])

        type_value = item.get("type") or defaults.get("type")
        rtype = RecordType.parse(type_value) if type_value is not None else fallback_type

        month_value = item.get("month") or defaults.get("month")
        month_key = parse_month_key(month_value) if month_value else month_key_for(timestamp)

        record = {
            "timestamp": timestamp,
            "amount": amount,
            "category_name": _text_field(item, "action_name"),
            "action": _text_field(item, "action"),
        }
        return (uid, month_key, rtype), record


def _text_field(item: dict, key: str) -> str:
    value = item.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string, got {value!r}")
    return value
