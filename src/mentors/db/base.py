"""
SQLAlchemy Base and Mixins

Provides declarative base and reusable mixins for database models.
"""
from datetime import datetime

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """
    Base class for all database models.

    All models register their tables on this metadata.
    """


class IntegerIdMixin:
    """
    Mixin to add an auto-increment integer primary key.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class CreatedAtMixin:
    """
    Mixin to add a created_at timestamp column.

    Records are never updated in place except availability items, so no
    updated_at column is tracked.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False,
        comment="Timestamp when record was created"
    )


def import_all_models():
    """
    Import all models to register them with SQLAlchemy Base.

    Must run before create_all so every table is known to the metadata.
    """
    from src.mentors.db import models  # noqa: F401
