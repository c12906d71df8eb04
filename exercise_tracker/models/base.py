"""
Base models and mixins for SQLAlchemy ORM.

Provides the declarative base, mixins for timestamps and UUIDs,
and common utilities for all database models.
"""

from datetime import datetime, timezone
from typing import Any
import uuid

from sqlalchemy import Column, String
from sqlalchemy.orm import declarative_base


# SQLAlchemy declarative base for all ORM models
Base = declarative_base()


def utc_now_iso() -> str:
    """
    Get current UTC timestamp in ISO format.

    Returns:
        ISO format timestamp string (e.g., "2026-10-19T10:30:45.123456+00:00")
    """
    return datetime.now(timezone.utc).isoformat()


class TimestampMixin:
    """
    Mixin that adds a created_at timestamp column.

    Uses TEXT type so SQLite and PostgreSQL store the same ISO strings.

    Attributes:
        created_at: Timestamp when record was created (immutable)
    """

    created_at = Column(
        String,
        nullable=False,
        default=utc_now_iso,
        doc="UTC timestamp when record was created"
    )


class UUIDMixin:
    """
    Mixin that adds a UUID primary key column.

    UUIDs are stored as strings for SQLite compatibility.

    Attributes:
        id: UUID primary key as TEXT
    """

    id = Column(
        String,
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
        doc="UUID primary key"
    )


class ModelMixin:
    """
    Mixin providing common model utilities.

    Adds helper methods for serialization and representation.
    """

    def to_dict(self) -> dict[str, Any]:
        """
        Convert model instance to dictionary.

        Returns:
            Dictionary with all column values

        Note:
            Only includes columns, not relationships.
        """
        return {
            column.name: getattr(self, column.name)
            for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        attrs = ", ".join(
            f"{key}={repr(value)}"
            for key, value in self.to_dict().items()
            if key in ["id", "name", "email"]  # Key identifying fields
        )
        return f"{self.__class__.__name__}({attrs})"
