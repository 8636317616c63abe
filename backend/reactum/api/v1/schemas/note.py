from __future__ import annotations

from datetime import datetime  # noqa: TCH003

from pydantic import Field, field_validator

from reactum.core.models.base import AppBaseModel
from reactum.core.models.note import normalize_tags
from reactum.core.services.generation_service import GenerationState  # noqa: TCH001


class NoteCreate(AppBaseModel):
    book_title: str = Field(max_length=255, description="Title of the source book")
    content: str = Field(max_length=10000, description="Excerpt or thought")
    author: str = Field(default="Unknown", max_length=255, description="Book author")
    tags: list[str] = Field(
        default_factory=list,
        description="Tags as a list or a comma separated string",
    )

    @field_validator("book_title", "content")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped

    @field_validator("author")
    @classmethod
    def validate_author(cls, v: str) -> str:
        return v.strip() or "Unknown"

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v):
        if isinstance(v, str):
            return v.split(",")
        return v

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        return list(normalize_tags(v))


class ActionItemRead(AppBaseModel):
    id: str
    title: str
    description: str
    duration: int
    is_completed: bool
    created_at: datetime
    source_note_id: str


class NoteRead(AppBaseModel):
    id: str
    book_title: str
    author: str
    content: str
    tags: list[str]
    created_at: datetime
    actions: list[ActionItemRead]


class NoteLimitDetail(AppBaseModel):
    code: str = "note_limit_reached"
    message: str
    limit: int | None


class GenerationStatusRead(AppBaseModel):
    note_id: str
    state: GenerationState
