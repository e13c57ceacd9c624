"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from ledgerview.database.sqlalchemy_db import SQLAlchemyDatabase
from ledgerview.logging_setup import get_logger

logger = get_logger(__name__)

DB_PATH_ENV = "LEDGERVIEW_DB_PATH"
DEFAULT_DB_PATH = Path.home() / ".ledgerview" / "ledgerview.db"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the SQLite file: explicit path, then ``LEDGERVIEW_DB_PATH``, then the default."""
    chosen = database_path or os.environ.get(DB_PATH_ENV)
    if chosen:
        return Path(chosen).expanduser()

    DEFAULT_DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    return DEFAULT_DB_PATH


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite-backed ledger store.

    Args:
        database_path: Path to the SQLite file. See ``resolve_database_path``.

    Returns:
        SQLAlchemyDatabase instance, not yet connected
    """
    path = resolve_database_path(database_path)
    logger.debug("Using ledger database at %s", path)
    return SQLAlchemyDatabase(f"sqlite:///{path}")
