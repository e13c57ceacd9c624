"""SQLAlchemy models for the ledgerview database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class LedgerRecord(Base):
    """One stored ledger entry."""

    __tablename__ = "ledger_records"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, nullable=False)
    record_type = Column(Integer, nullable=False)
    # Reporting month the record was fetched under, e.g. "202304"
    month_key = Column(String(6), nullable=False)
    action = Column(String, nullable=False, default="")
    action_name = Column(String, nullable=False, default="")
    time = Column(DateTime, nullable=False)
    amount = Column(Integer, nullable=False)
    imported_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        Index("ix_ledger_account_month_type", "account_id", "month_key", "record_type"),
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
