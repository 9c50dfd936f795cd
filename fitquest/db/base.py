"""SQLAlchemy declarative base, metadata and portable column types."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import DeclarativeBase

# Native arrays on PostgreSQL; JSON lists elsewhere (SQLite in tests)
IntArray = JSON().with_variant(ARRAY(Integer), "postgresql")
DecimalArray = JSON().with_variant(ARRAY(Numeric(6, 2, asdecimal=False)), "postgresql")
StringArray = JSON().with_variant(ARRAY(String), "postgresql")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base for all ORM models."""

    pass
