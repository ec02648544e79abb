"""
Base model configuration for SQLAlchemy ORM.

Provides the declarative base shared by every table and a few
column helpers.
"""

import enum
from datetime import datetime, timezone
from typing import Type

from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import DeclarativeBase


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def enum_column(enum_cls: Type[enum.Enum]) -> SAEnum:
    """
    Store an enum by its value in a VARCHAR column rather than a native
    database enum, so the same schema works on PostgreSQL and SQLite.
    """
    return SAEnum(
        enum_cls,
        native_enum=False,
        length=20,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )


class Base(DeclarativeBase):
    """Root SQLAlchemy base class."""

    def __repr__(self) -> str:
        pk = ", ".join(
            f"{col.key}={getattr(self, col.key)!r}" for col in self.__table__.primary_key.columns
        )
        return f"<{self.__class__.__name__}({pk})>"
