"""SQLAlchemy declarative Base and the audit column set shared by every entity."""

from datetime import UTC, datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String, text
from sqlalchemy.orm import DeclarativeBase

# Partial-index predicate: uniqueness only applies to rows that are not soft-deleted.
LIVE_ROW_PREDICATE = text("dt_deleted IS NULL")

ACTOR_MAX_LEN = 100


def utc_now() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


class AuditMixin:
    """
    Surrogate key plus audit columns.

    dt_created is set once on insert; dt_updated on every mutation; dt_deleted,
    deleted_by and is_active=False mark a soft-deleted row.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default=text("true"))
    dt_created = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    dt_updated = Column(DateTime(timezone=True), nullable=True)
    dt_deleted = Column(DateTime(timezone=True), nullable=True)
    created_by = Column(String(ACTOR_MAX_LEN), nullable=False)
    updated_by = Column(String(ACTOR_MAX_LEN), nullable=True)
    deleted_by = Column(String(ACTOR_MAX_LEN), nullable=True)

    @property
    def is_deleted(self) -> bool:
        return self.dt_deleted is not None
