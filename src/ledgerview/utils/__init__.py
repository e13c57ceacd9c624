"""Utility modules for ledgerview."""

from ledgerview.utils.date_parser import parse_timestamp, parse_month_key, month_key_for
from ledgerview.utils.amount_parser import parse_amount

__all__ = ["parse_timestamp", "parse_month_key", "month_key_for", "parse_amount"]
