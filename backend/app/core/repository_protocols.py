"""Boundary Protocols: contracts between the query translator and storage.

Invariants:
    - The translator (services/) only talks to storage through TutorialRepository
    - Implementations receive their database handle at construction time
    - Identifiers cross this boundary as raw strings; parsing them is a storage concern

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Raw string ids: a malformed id must fail inside the storage call, so the
      translator classifies it the same way as any other storage failure (500)
"""

from typing import Protocol

from app.models.tutorial import Tutorial


class TutorialRepository(Protocol):
    """Contract for Tutorial persistence. Each method is one storage call."""
    async def create(self, fields: dict) -> Tutorial: ...
    async def find_all(
        self, title: str | None = None, published: bool | None = None,
    ) -> list[Tutorial]: ...
    async def get(self, tutorial_id: str) -> Tutorial | None: ...
    async def update(self, tutorial_id: str, patch: dict) -> Tutorial | None: ...
    async def delete(self, tutorial_id: str) -> bool: ...
    async def delete_all(self) -> int: ...
