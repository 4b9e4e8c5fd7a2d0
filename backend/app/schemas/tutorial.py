"""Tutorial Schemas: Pydantic models validating the API boundary.

Invariants:
    - TutorialCreate.title: required, non-empty; published absent/null -> False
    - TutorialUpdate: only supplied fields become the patch (exclude_unset)
    - TutorialResponse: camelCase keys, id as string, description omitted when null

Design Decisions:
    - Validation happens here, before any storage call is issued
    - Unknown request fields are ignored rather than rejected
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class TutorialCreate(BaseModel):
    """Creation payload."""
    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1)
    description: str | None = None
    published: bool = False

    @field_validator("published", mode="before")
    @classmethod
    def default_published(cls, v):
        return False if v is None else v


class TutorialUpdate(BaseModel):
    """Partial update payload. Explicit null is only accepted for description."""
    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(None, min_length=1)
    description: str | None = None
    published: bool | None = None

    @field_validator("title", "published", mode="before")
    @classmethod
    def reject_null(cls, v, info):
        # only runs for supplied values; defaults stay unset
        if v is None:
            raise ValueError(f"{info.field_name} can not be null")
        return v

    def to_patch(self) -> dict:
        return self.model_dump(exclude_unset=True)


class TutorialResponse(BaseModel):
    """Public representation of a stored Tutorial."""
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True,
    )

    id: UUID
    title: str
    description: str | None = None
    published: bool
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # SQLite hands timestamps back without an offset; they were stored as UTC
        return v.replace(tzinfo=timezone.utc) if v.tzinfo is None else v


def serialize_tutorial(tutorial) -> dict:
    """ORM record -> JSON-ready response body."""
    return TutorialResponse.model_validate(tutorial).model_dump(
        mode="json", by_alias=True, exclude_none=True,
    )


class MessageResponse(BaseModel):
    """Body of every non-record response, errors included."""
    message: str
