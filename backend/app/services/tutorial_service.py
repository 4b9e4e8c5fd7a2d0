"""Tutorial Service: translates requests into one storage call and classifies the outcome.

Invariants:
    - Each public function performs exactly one repository call and never calls another
    - Repository failures (DatabaseError, malformed ids included) -> StorageError (500)
    - Well-formed ids with no matching record -> ResourceNotFoundError (404)
    - Missing/invalid request data -> InvalidContentError (400), raised before storage
    - Client-facing messages are reproduced verbatim from the templates below

Design Decisions:
    - Repository passed in explicitly: routes inject the SQL implementation,
      tests inject fakes
    - An empty update body ({}) is a valid no-op update; only an absent/null body is rejected
"""

import logging
from typing import Any

from pydantic import ValidationError

from app.core.errors import (
    DatabaseError, ErrorContext, InvalidContentError, ResourceNotFoundError,
    StorageError,
)
from app.core.repository_protocols import TutorialRepository
from app.schemas.tutorial import TutorialCreate, TutorialUpdate, serialize_tutorial

logger = logging.getLogger(__name__)

# ─── Message Templates ──────────────────────────────────────────

CONTENT_EMPTY = "Content can not be empty!"
INVALID_CONTENT = "Invalid Tutorial data."
UPDATE_BODY_EMPTY = "Data to update can not be empty!"
UPDATE_BODY_INVALID = "Invalid data to update Tutorial with id={id}"
RETRIEVE_ALL_FAILED = "Some error occurred while retrieving tutorials."
CREATE_FAILED = "Some error occurred while creating the Tutorial."
NOT_FOUND = "Not found Tutorial with id {id}."
RETRIEVE_FAILED = "Error retrieving Tutorial with id={id}"
UPDATED = "Tutorial was updated successfully."
UPDATE_NOT_FOUND = "Cannot update Tutorial with id={id}. Maybe Tutorial was not found!"
UPDATE_FAILED = "Error updating Tutorial with id={id}"
DELETED = "Tutorial was deleted successfully!"
DELETE_NOT_FOUND = "Cannot delete Tutorial with id={id}. Maybe Tutorial was not found!"
DELETE_FAILED = "Could not delete Tutorial with id={id}"
DELETED_ALL = "{count} Tutorials were deleted successfully!"
DELETE_ALL_FAILED = "Some error occurred while removing all tutorials."


def _parse_create(payload: Any) -> TutorialCreate:
    if not isinstance(payload, dict) or not payload.get("title"):
        raise InvalidContentError(CONTENT_EMPTY)
    try:
        return TutorialCreate.model_validate(payload)
    except ValidationError as e:
        if any(err["loc"][:1] == ("title",) for err in e.errors()):
            raise InvalidContentError(CONTENT_EMPTY)
        raise InvalidContentError(INVALID_CONTENT)


def _parse_update(tutorial_id: str, payload: Any) -> dict:
    if payload is None or not isinstance(payload, dict):
        raise InvalidContentError(
            UPDATE_BODY_EMPTY, ErrorContext(tutorial_id=tutorial_id),
        )
    try:
        return TutorialUpdate.model_validate(payload).to_patch()
    except ValidationError:
        raise InvalidContentError(
            UPDATE_BODY_INVALID.format(id=tutorial_id),
            ErrorContext(tutorial_id=tutorial_id),
        )


async def create(repo: TutorialRepository, payload: Any) -> dict:
    data = _parse_create(payload)
    try:
        tutorial = await repo.create(data.model_dump())
    except DatabaseError as e:
        raise StorageError(CREATE_FAILED, "create") from e
    logger.info("Tutorial created", extra={"tutorial_id": str(tutorial.id)})
    return serialize_tutorial(tutorial)


async def find_all(repo: TutorialRepository, title: str | None = None) -> list[dict]:
    """All tutorials, optionally those whose title contains `title` (case-insensitive)."""
    try:
        tutorials = await repo.find_all(title=title or None)
    except DatabaseError as e:
        raise StorageError(RETRIEVE_ALL_FAILED, "find_all") from e
    return [serialize_tutorial(t) for t in tutorials]


async def find_all_published(repo: TutorialRepository) -> list[dict]:
    try:
        tutorials = await repo.find_all(published=True)
    except DatabaseError as e:
        raise StorageError(RETRIEVE_ALL_FAILED, "find_all_published") from e
    return [serialize_tutorial(t) for t in tutorials]


async def find_one(repo: TutorialRepository, tutorial_id: str) -> dict:
    ctx = ErrorContext(tutorial_id=tutorial_id)
    try:
        tutorial = await repo.get(tutorial_id)
    except DatabaseError as e:
        raise StorageError(
            RETRIEVE_FAILED.format(id=tutorial_id), "find_one", ctx,
        ) from e
    if tutorial is None:
        raise ResourceNotFoundError(NOT_FOUND.format(id=tutorial_id), ctx)
    return serialize_tutorial(tutorial)


async def update(repo: TutorialRepository, tutorial_id: str, payload: Any) -> dict:
    """Merge the supplied fields over the stored record."""
    patch = _parse_update(tutorial_id, payload)
    ctx = ErrorContext(tutorial_id=tutorial_id)
    try:
        tutorial = await repo.update(tutorial_id, patch)
    except DatabaseError as e:
        raise StorageError(
            UPDATE_FAILED.format(id=tutorial_id), "update", ctx,
        ) from e
    if tutorial is None:
        raise ResourceNotFoundError(UPDATE_NOT_FOUND.format(id=tutorial_id), ctx)
    logger.info(
        "Tutorial updated",
        extra={"tutorial_id": tutorial_id, "count": len(patch)},
    )
    return {"message": UPDATED}


async def delete(repo: TutorialRepository, tutorial_id: str) -> dict:
    ctx = ErrorContext(tutorial_id=tutorial_id)
    try:
        deleted = await repo.delete(tutorial_id)
    except DatabaseError as e:
        raise StorageError(
            DELETE_FAILED.format(id=tutorial_id), "delete", ctx,
        ) from e
    if not deleted:
        raise ResourceNotFoundError(DELETE_NOT_FOUND.format(id=tutorial_id), ctx)
    logger.info("Tutorial deleted", extra={"tutorial_id": tutorial_id})
    return {"message": DELETED}


async def delete_all(repo: TutorialRepository) -> dict:
    try:
        count = await repo.delete_all()
    except DatabaseError as e:
        raise StorageError(DELETE_ALL_FAILED, "delete_all") from e
    logger.info("All tutorials deleted", extra={"count": count})
    return {"message": DELETED_ALL.format(count=count)}
