"""Route test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - app.state.db_manager points at the test engine for the readiness probe

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - StaticPool: one shared connection, so every session sees the same :memory: DB
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.main import app
from app.models.tutorial import Tutorial


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = None


@pytest.fixture
def seed_tutorials(test_session_factory):
    """Insert tutorials directly into the test DB. Returns the stored rows."""
    async def _seed(*rows: dict) -> list[Tutorial]:
        async with test_session_factory() as session:
            tutorials = [Tutorial(**row) for row in rows]
            session.add_all(tutorials)
            await session.commit()
            for t in tutorials:
                await session.refresh(t)
            return tutorials
    return _seed


@pytest.fixture
def count_tutorials(test_session_factory):
    async def _count() -> int:
        from sqlalchemy import func, select
        async with test_session_factory() as session:
            result = await session.execute(select(func.count(Tutorial.id)))
            return result.scalar_one()
    return _count
