"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


def record_not_found(record_id: int) -> str:
    """Return message for missing record."""
    return f"Record {record_id} not found"


def invalid_account_id(account_id) -> str:
    """Return message for an unusable account identity."""
    return f"Invalid account id {account_id!r}: must be a positive integer"


def invalid_month_key(month_key: str) -> str:
    """Return message for a malformed reporting month."""
    return f"Invalid month '{month_key}': expected YYYYMM"


def no_records_for_month(account_id: int, month_key: str) -> str:
    """Return message when nothing is stored for an account month."""
    return f"No records stored for account {account_id} in month {month_key}"
