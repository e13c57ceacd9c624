"""Database layer for ledgerview application."""

from ledgerview.database.base import Database
from ledgerview.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
