from __future__ import annotations

from collections.abc import Iterable
from uuid import uuid4

from pydantic import Field, PositiveInt, field_validator, model_validator

from .base import TimestampedModel


def new_id() -> str:
    return str(uuid4())


def normalize_tags(tags: Iterable[str]) -> tuple[str, ...]:
    """Trim tags and drop blanks, keeping order and duplicates."""
    return tuple(tag.strip() for tag in tags if isinstance(tag, str) and tag.strip())


class ActionItem(TimestampedModel):
    """A small, time-boxed task derived from a note."""

    id: str = Field(default_factory=new_id, description="Unique action identifier")
    title: str = Field(description="Short imperative title")
    description: str = Field(description="Specific instruction on what to do")
    duration: PositiveInt = Field(description="Estimated minutes")
    is_completed: bool = Field(default=False, description="Whether the action was done")
    source_note_id: str = Field(description="Id of the owning note")


class Note(TimestampedModel):
    """A captured excerpt or thought attributed to a book."""

    id: str = Field(default_factory=new_id, description="Unique note identifier")
    book_title: str = Field(description="Title of the source book")
    author: str = Field(default="Unknown", description="Book author")
    content: str = Field(description="Captured excerpt or thought")
    tags: tuple[str, ...] = Field(default=(), description="Free-text labels, duplicates allowed")
    actions: tuple[ActionItem, ...] = Field(default=(), description="Generated actions, oldest first")

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return normalize_tags(v)

    @model_validator(mode="after")
    def validate_actions_owned(self) -> Note:
        """Every action must point back at this note."""
        for action in self.actions:
            if action.source_note_id != self.id:
                raise ValueError(
                    f"Action {action.id} belongs to note {action.source_note_id}, not {self.id}"
                )
        return self

    def with_actions(self, actions: tuple[ActionItem, ...]) -> Note:
        return self.model_copy(update={"actions": actions})

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "1",
                    "book_title": "Atomic Habits",
                    "author": "James Clear",
                    "content": "You do not rise to the level of your goals. You fall to the level of your systems.",
                    "tags": ["Habits", "Productivity", "Identity"],
                    "actions": [],
                }
            ]
        }
    }
