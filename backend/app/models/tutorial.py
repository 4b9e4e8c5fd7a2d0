"""Tutorial ORM: the single persisted entity.

Invariants:
    - id is a UUID primary key assigned on insert, never taken from request data
    - title is non-nullable text
    - published is non-nullable, defaults to False
    - created_at set on insert, updated_at refreshed on every update

Design Decisions:
    - Generic Uuid type over the PostgreSQL dialect type: the same model runs on
      asyncpg in production and aiosqlite in tests
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Tutorial(Base):
    """A titled note with description and published flag."""
    __tablename__ = "tutorials"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
