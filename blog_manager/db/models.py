"""SQLAlchemy model backing the key-value store."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, String, Text, func
from sqlalchemy.engine import Engine

from .session import Base


class StorageItem(Base):
    __tablename__ = "storage_items"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


def ensure_storage_table(engine: Engine) -> None:
    """Create ``storage_items`` if the database does not have it yet."""
    Base.metadata.create_all(bind=engine, tables=[StorageItem.__table__], checkfirst=True)
