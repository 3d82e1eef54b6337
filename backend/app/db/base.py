"""SQLAlchemy Declarative Base — shared base class and identity columns for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - Every entity table carries `pk` (autoincrement, insertion order) and `id` (public UUID)
    - Singleton tables also carry `singleton_key`, always 1 and UNIQUE

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - Surrogate integer pk: listing needs insertion order to break `order` ties,
      and timestamps can collide within one clock tick
"""

import uuid

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all portfolio ORM models."""
    pass


class EntityRowMixin:
    """Identity columns shared by every entity table."""
    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(
        String(36), unique=True, nullable=False, default=lambda: str(uuid.uuid4()),
    )


class SingletonRowMixin:
    """Constant key with a UNIQUE constraint: a singleton table holds at most one row.

    Two concurrent first creates both miss the FOR UPDATE existence check on an
    empty table; the second INSERT then fails on this constraint.
    """
    singleton_key: Mapped[int] = mapped_column(
        Integer, nullable=False, unique=True, default=1,
    )
