"""Tutorial Routes: static table mapping method + path onto one service operation.

Invariants:
    - /published registered before /{tutorial_id} so it is never read as an id
    - Path ids are raw strings: malformed ids reach the storage call and surface as 500
    - Bodies taken as raw JSON (Any): absent vs {} must stay distinguishable for update
    - Routes never contain business logic
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query

from app.core.repository_protocols import TutorialRepository
from app.infrastructure.tutorial_repository import get_tutorial_repository
from app.schemas.tutorial import MessageResponse
from app.services import tutorial_service

router = APIRouter(prefix="/api/tutorials", tags=["tutorials"])


@router.post("")
async def create_tutorial(
    payload: Any = Body(None),
    repo: TutorialRepository = Depends(get_tutorial_repository),
):
    """Create a new Tutorial."""
    return await tutorial_service.create(repo, payload)


@router.get("")
async def list_tutorials(
    title: str | None = Query(None),
    repo: TutorialRepository = Depends(get_tutorial_repository),
):
    """List Tutorials, optionally filtered by a title substring."""
    return await tutorial_service.find_all(repo, title)


@router.get("/published")
async def list_published_tutorials(
    repo: TutorialRepository = Depends(get_tutorial_repository),
):
    return await tutorial_service.find_all_published(repo)


@router.get("/{tutorial_id}")
async def get_tutorial(
    tutorial_id: str,
    repo: TutorialRepository = Depends(get_tutorial_repository),
):
    return await tutorial_service.find_one(repo, tutorial_id)


@router.put("/{tutorial_id}", response_model=MessageResponse)
async def update_tutorial(
    tutorial_id: str,
    payload: Any = Body(None),
    repo: TutorialRepository = Depends(get_tutorial_repository),
):
    return await tutorial_service.update(repo, tutorial_id, payload)


@router.delete("/{tutorial_id}", response_model=MessageResponse)
async def delete_tutorial(
    tutorial_id: str,
    repo: TutorialRepository = Depends(get_tutorial_repository),
):
    return await tutorial_service.delete(repo, tutorial_id)


@router.delete("", response_model=MessageResponse)
async def delete_all_tutorials(
    repo: TutorialRepository = Depends(get_tutorial_repository),
):
    """Delete every Tutorial and report how many were removed."""
    return await tutorial_service.delete_all(repo)
