"""Declarative base and mixins for database models.

Models inherit from ``Base`` and pick the mixins they need:

    class Product(Base, TimestampMixin):
        __tablename__ = "products"
        name: Mapped[str] = mapped_column(String(255))
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, MetaData, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func

# Consistent naming convention for database constraints
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def utcnow() -> datetime:
    """Timezone-aware current time used for Python-side defaults."""
    return datetime.now(UTC)


def new_uuid() -> str:
    """Generate a string UUID v4 primary key value."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Declarative base shared by all models.

    Provides consistent constraint naming via NAMING_CONVENTION and the
    metadata registry used by ``create_all`` at startup.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class StringUUIDPKMixin:
    """UUID primary key stored as a 36-character string.

    The string form is portable across PostgreSQL and SQLite and is what
    clients see in URLs and cursor tokens.

    Provides:
        id: UUID v4 primary key (random), generated at insert time
    """

    __allow_unmapped__ = True

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_uuid,
        comment="UUID v4 primary key",
    )


class TimestampMixin:
    """Timestamp tracking for create and update operations.

    Uses both Python-side defaults (for test environments) and database
    server defaults (for direct SQL inserts such as bulk seeding).

    Provides:
        created_at: Timestamp of record creation (immutable)
        updated_at: Timestamp of last modification (auto-updates)
    """

    __allow_unmapped__ = True

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        comment="Timestamp of record creation",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
        nullable=False,
        comment="Timestamp of last update",
    )


__all__ = [
    "NAMING_CONVENTION",
    "Base",
    "StringUUIDPKMixin",
    "TimestampMixin",
    "new_uuid",
    "utcnow",
]
