"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import datetime

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerview.domain.entities import Record, RecordType


class Database(ABC):
    """Abstract database interface for ledgerview."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Record operations
    @abstractmethod
    def create_record(
        self,
        account_id: int,
        record_type: RecordType,
        month_key: str,
        time: datetime,
        amount: int,
        action_name: str = "",
        action: str = "",
        commit: bool = True,
    ) -> int:
        """Create a record. Returns record ID."""
        pass

    @abstractmethod
    def get_record(self, record_id: int) -> Optional[Record]:
        """Get record by ID."""
        pass

    @abstractmethod
    def list_records(
        self,
        account_id: int,
        record_type: Optional[RecordType] = None,
        month_key: Optional[str] = None,
    ) -> list[Record]:
        """List an account's records, newest first."""
        pass

    @abstractmethod
    def list_account_ids(self) -> list[int]:
        """List every account that has stored records."""
        pass

    @abstractmethod
    def list_month_keys(self, account_id: int) -> list[str]:
        """List stored reporting months for an account, latest first."""
        pass

    @abstractmethod
    def delete_records(
        self,
        account_id: int,
        month_key: Optional[str] = None,
        record_type: Optional[RecordType] = None,
        commit: bool = True,
    ) -> int:
        """Delete matching records. Returns number of rows removed."""
        pass

    @abstractmethod
    def commit(self) -> None:
        """Commit pending changes."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Discard pending changes."""
        pass
