"""Declarative bases for all database models.

This module provides:
- BaseModel: Base class for ALL models (id, created_at)
- TimestampMixin: Adds updated_at
- BaseMutableModel: Base for models whose rows are edited in place

Usage:
    class UserModel(BaseMutableModel):
        __tablename__ = "users"
        email: Mapped[str]
        # Has: id, created_at, updated_at

    class TokenModel(BaseModel):
        __tablename__ = "tokens"
        secret: Mapped[str]
        # Has: id, created_at (no updated_at)

Columns use SQLAlchemy's generic Uuid and DateTime(timezone=True) types so
the same schema runs on PostgreSQL (asyncpg) and SQLite (aiosqlite).
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from the store.

    SQLite drops tzinfo on DateTime(timezone=True) columns; every value we
    write is UTC, so a naive value is UTC.

    Args:
        value: Datetime loaded from a model.

    Returns:
        datetime: Timezone-aware datetime.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
        - id: UUID primary key (UUIDv7 unless the caller supplies one)
        - created_at: Timestamp when record was created (UTC)

    Domain entities should not inherit from or depend on this class.
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging).

        Returns:
            dict: id and created_at; mixins extend this.
        """
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for models that track updates.

    Use via BaseMutableModel rather than directly.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_dict(self) -> dict[str, Any]:
        """Extend BaseModel.to_dict() with updated_at."""
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models (id, created_at, updated_at).

    Token rows are not mutable in this sense: their only changes are
    conditional flag and counter updates, so TokenModel uses BaseModel.
    """

    __abstract__ = True
