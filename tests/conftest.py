"""Shared pytest fixtures for ledgerview tests."""

import itertools
import tempfile
import os
from datetime import datetime
from pathlib import Path
import pytest

from ledgerview.database.factories import create_sqlite_database
from ledgerview.domain.entities import Record, RecordType
from ledgerview.domain.ledger import LedgerService
from ledgerview.domain.record_import import RecordImportService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def ledger_service(temp_db):
    """Create a LedgerService with a temporary database."""
    return LedgerService(temp_db)


@pytest.fixture
def import_service(temp_db):
    """Create a RecordImportService with a temporary database."""
    return RecordImportService(temp_db)


@pytest.fixture
def make_record():
    """Factory for in-memory records with sequential IDs."""
    ids = itertools.count(1)

    def _make(
        time: str,
        amount: int,
        category: str = "",
        record_type: RecordType = RecordType.PRIMARY,
        account_id: int = 100000001,
        record_id: int | None = None,
    ) -> Record:
        timestamp = datetime.fromisoformat(time)
        return Record(
            id=record_id if record_id is not None else next(ids),
            account_id=account_id,
            record_type=record_type,
            timestamp=timestamp,
            category_name=category,
            amount=amount,
            month_key=f"{timestamp.year:04d}{timestamp.month:02d}",
        )

    return _make


@pytest.fixture
def sample_records(make_record):
    """Two years of records with disjoint category sets and both types."""
    return [
        make_record("2023-11-03 10:00:00", 60, "Daily Training"),
        make_record("2023-12-24 18:30:00", 160, "Events"),
        make_record("2023-12-25 09:00:00", 1, "Shop", RecordType.PASS),
        make_record("2024-05-01 08:00:00", 60, "Mail"),
        make_record("2024-05-20 12:00:00", -160, "Warp"),
        make_record("2024-06-01 08:00:00", 90, "Event"),
        make_record("2024-06-02 08:00:00", 5, ""),
        make_record("2024-06-15 20:00:00", 2, "Shop", RecordType.PASS),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
