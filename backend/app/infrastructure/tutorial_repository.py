"""Tutorial Repository: SQLAlchemy implementation of the TutorialRepository protocol.

Invariants:
    - One public method per storage call; each commits or rolls back on its own
    - Raw ids parsed here: unparseable -> InvalidIdentifierError (never None, never 404)
    - Every SQLAlchemyError mapped to DatabaseError after rollback

Design Decisions:
    - Session injected at construction (get_tutorial_repository dependency)
    - Title filter is a literal substring match: LIKE wildcards in input are escaped
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import TutorialId
from app.core.errors import DatabaseError, InvalidIdentifierError
from app.core.tutorial_patch import apply_merge_patch, current_fields
from app.infrastructure.database import get_db
from app.models.tutorial import Tutorial

logger = logging.getLogger(__name__)

_LIKE_ESCAPE = "\\"


def parse_tutorial_id(raw_id: str) -> TutorialId:
    """Parse a path id into the storage key type."""
    try:
        return TutorialId(UUID(str(raw_id)))
    except (ValueError, TypeError, AttributeError):
        raise InvalidIdentifierError(raw_id)


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally."""
    return (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


class SqlTutorialRepository:
    """Tutorial persistence over an AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._db = session

    @asynccontextmanager
    async def _storage_call(self, operation: str) -> AsyncGenerator[None, None]:
        try:
            yield
        except IntegrityError as e:
            await self._db.rollback()
            logger.error(f"DB integrity error: {e}", extra={"operation": operation})
            raise DatabaseError("Integrity constraint violated", operation)
        except OperationalError as e:
            await self._db.rollback()
            logger.error(f"DB operational error: {e}", extra={"operation": operation})
            raise DatabaseError("Connection or operational error", operation)
        except DBAPIError as e:
            await self._db.rollback()
            logger.error(f"DB driver error: {e}", extra={"operation": operation})
            raise DatabaseError("Database driver error", operation)
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"SQLAlchemy error: {e}", extra={"operation": operation})
            raise DatabaseError("Database operation failed", operation)

    async def create(self, fields: dict) -> Tutorial:
        now = datetime.now(timezone.utc)
        tutorial = Tutorial(**fields, created_at=now, updated_at=now)
        async with self._storage_call("insert"):
            self._db.add(tutorial)
            await self._db.commit()
            await self._db.refresh(tutorial)
        return tutorial

    async def find_all(
        self, title: str | None = None, published: bool | None = None,
    ) -> list[Tutorial]:
        query = select(Tutorial).order_by(Tutorial.created_at)
        if title:
            pattern = f"%{escape_like(title)}%"
            query = query.where(
                Tutorial.title.ilike(pattern, escape=_LIKE_ESCAPE),
            )
        if published is not None:
            query = query.where(Tutorial.published == published)
        async with self._storage_call("find"):
            result = await self._db.execute(query)
            return list(result.scalars().all())

    async def get(self, tutorial_id: str) -> Tutorial | None:
        key = parse_tutorial_id(tutorial_id)
        async with self._storage_call("find_by_id"):
            return await self._db.get(Tutorial, key)

    async def update(self, tutorial_id: str, patch: dict) -> Tutorial | None:
        """Fetch, merge the patch over the current fields, commit, return the new value."""
        key = parse_tutorial_id(tutorial_id)
        async with self._storage_call("find_by_id_and_update"):
            tutorial = await self._db.get(Tutorial, key)
            if tutorial is None:
                return None
            merged = apply_merge_patch(current_fields(tutorial), patch)
            for name, value in merged.items():
                setattr(tutorial, name, value)
            tutorial.updated_at = datetime.now(timezone.utc)
            await self._db.commit()
            await self._db.refresh(tutorial)
        return tutorial

    async def delete(self, tutorial_id: str) -> bool:
        key = parse_tutorial_id(tutorial_id)
        async with self._storage_call("find_by_id_and_remove"):
            result = await self._db.execute(
                delete(Tutorial).where(Tutorial.id == key),
            )
            await self._db.commit()
        return result.rowcount > 0

    async def delete_all(self) -> int:
        async with self._storage_call("delete_many"):
            result = await self._db.execute(delete(Tutorial))
            await self._db.commit()
        return result.rowcount


def get_tutorial_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlTutorialRepository:
    """FastAPI dependency: repository bound to the request's session."""
    return SqlTutorialRepository(db)
