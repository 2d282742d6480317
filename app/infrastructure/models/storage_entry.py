"""SQLAlchemy model for persisted key-value entries."""

from sqlalchemy import Column, DateTime, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class StorageEntryModel(Base):
    """Database representation of a single storage key and its value."""

    __tablename__ = "storage_entry"

    key = Column(String(120), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=now_in_app_timezone,
        onupdate=now_in_app_timezone,
    )


__all__ = ["StorageEntryModel"]
