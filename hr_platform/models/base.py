"""
Base model with common fields and utilities.
"""
from datetime import datetime, timezone
from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from hr_platform.core.database import Base


class TimestampMixin:
    """Mixin that adds created_at and updated_at timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        onupdate=lambda: datetime.now(timezone.utc),
    )


class IntegerIDMixin:
    """Mixin that adds a database-generated integer primary key."""

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )


class BaseModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Base model with integer primary key and timestamps.
    Entity tables inherit from this; association tables use Base directly.
    """

    __abstract__ = True
