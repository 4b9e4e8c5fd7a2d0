"""Storage failures: every repository error becomes one 500 with the operation's message.

Invariants:
    - DatabaseError from any repository call -> 500, never 404 or unhandled
    - Validation still runs before storage: a bad body is 400 even if storage is down

Design Decisions:
    - Repository dependency replaced through app.dependency_overrides, the same seam
      production uses to inject the SQL implementation
"""

from uuid import uuid4

import pytest

from app.core.errors import DatabaseError
from app.infrastructure.tutorial_repository import get_tutorial_repository
from app.main import app


class _BrokenRepository:
    """Every call fails like a lost connection."""

    def __init__(self):
        self.calls = []

    async def _fail(self, name):
        self.calls.append(name)
        raise DatabaseError("Connection or operational error", name)

    async def create(self, fields):
        await self._fail("create")

    async def find_all(self, title=None, published=None):
        await self._fail("find_all")

    async def get(self, tutorial_id):
        await self._fail("get")

    async def update(self, tutorial_id, patch):
        await self._fail("update")

    async def delete(self, tutorial_id):
        await self._fail("delete")

    async def delete_all(self):
        await self._fail("delete_all")


@pytest.fixture
async def broken_repo(client):
    repo = _BrokenRepository()
    app.dependency_overrides[get_tutorial_repository] = lambda: repo
    yield repo
    app.dependency_overrides.pop(get_tutorial_repository, None)


async def test_list_storage_failure_returns_500(client, broken_repo):
    res = await client.get("/api/tutorials")
    assert res.status_code == 500
    assert res.json() == {"message": "Some error occurred while retrieving tutorials."}


async def test_published_storage_failure_returns_500(client, broken_repo):
    res = await client.get("/api/tutorials/published")
    assert res.status_code == 500
    assert res.json() == {"message": "Some error occurred while retrieving tutorials."}


async def test_create_storage_failure_returns_500(client, broken_repo):
    res = await client.post("/api/tutorials", json={"title": "A"})
    assert res.status_code == 500
    assert res.json() == {"message": "Some error occurred while creating the Tutorial."}


async def test_get_storage_failure_returns_500(client, broken_repo):
    tutorial_id = uuid4()
    res = await client.get(f"/api/tutorials/{tutorial_id}")
    assert res.status_code == 500
    assert res.json() == {"message": f"Error retrieving Tutorial with id={tutorial_id}"}


async def test_update_storage_failure_returns_500(client, broken_repo):
    tutorial_id = uuid4()
    res = await client.put(f"/api/tutorials/{tutorial_id}", json={"title": "B"})
    assert res.status_code == 500
    assert res.json() == {"message": f"Error updating Tutorial with id={tutorial_id}"}


async def test_delete_storage_failure_returns_500(client, broken_repo):
    tutorial_id = uuid4()
    res = await client.delete(f"/api/tutorials/{tutorial_id}")
    assert res.status_code == 500
    assert res.json() == {"message": f"Could not delete Tutorial with id={tutorial_id}"}


async def test_delete_all_storage_failure_returns_500(client, broken_repo):
    res = await client.delete("/api/tutorials")
    assert res.status_code == 500
    assert res.json() == {"message": "Some error occurred while removing all tutorials."}


async def test_invalid_create_never_reaches_storage(client, broken_repo):
    res = await client.post("/api/tutorials", json={"description": "no title"})
    assert res.status_code == 400
    assert broken_repo.calls == []


async def test_absent_update_body_never_reaches_storage(client, broken_repo):
    res = await client.put(f"/api/tutorials/{uuid4()}")
    assert res.status_code == 400
    assert broken_repo.calls == []
