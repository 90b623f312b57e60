"""Base SQLAlchemy models and the record status convention shared by all tables."""

from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import DateTime, Integer, String, Text, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7

DEFAULT_REC_SEQ = 0


class RecordStatus(str, Enum):
    """Lifecycle flag of a record version."""

    ACTIVE = "A"
    PENDING = "P"
    INACTIVE = "I"
    DELETED = "X"


class DataStatus(str, Enum):
    """Visibility flag of the data held by a record."""

    ACTIVE = "A"
    PENDING = "P"
    INACTIVE = "I"
    DELETED = "X"


def new_record_id() -> str:
    """Generate a time-ordered record id."""
    return str(uuid7())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class RecordMixin:
    """Versioning and audit columns present on every master data table.

    ``recSeq`` is part of the primary key; version 0 is the live record.
    Column names are camelCase to match the shared database schema.
    """

    rec_seq: Mapped[int] = mapped_column(
        "recSeq", Integer, primary_key=True, default=DEFAULT_REC_SEQ
    )
    rec_status: Mapped[str] = mapped_column(
        "recStatus",
        Text,
        nullable=False,
        default=RecordStatus.ACTIVE.value,
        server_default=RecordStatus.ACTIVE.value,
    )
    data_status: Mapped[str] = mapped_column(
        "dataStatus",
        String(1),
        nullable=False,
        default=DataStatus.ACTIVE.value,
        server_default=DataStatus.ACTIVE.value,
    )
    created_by: Mapped[str] = mapped_column(
        "createdBy", Text, nullable=False, server_default="System"
    )
    created_on: Mapped[datetime] = mapped_column(
        "createdOn",
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    modified_on: Mapped[datetime] = mapped_column(
        "modifiedOn",
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )
    modified_by: Mapped[str | None] = mapped_column("modifiedBy", String(50), nullable=True)


def active_conditions(model) -> list:
    """Predicate selecting the live, active version of a record."""
    return [
        model.rec_seq == DEFAULT_REC_SEQ,
        model.rec_status == RecordStatus.ACTIVE.value,
        model.data_status == DataStatus.ACTIVE.value,
    ]


def active_values() -> dict:
    """Column values that make a freshly inserted record satisfy the active predicate."""
    return {
        "rec_seq": DEFAULT_REC_SEQ,
        "rec_status": RecordStatus.ACTIVE.value,
        "data_status": DataStatus.ACTIVE.value,
    }
