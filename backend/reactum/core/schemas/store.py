from __future__ import annotations

from enum import Enum

from pydantic import Field

from reactum.core.models.base import AppBaseModel, FrozenModel
from reactum.core.models.note import Note  # noqa: TCH001


class AddOutcome(str, Enum):
    """Result of an add-note intent."""

    ADDED = "added"
    LIMIT_REACHED = "limit_reached"


class StoreEventKind(str, Enum):
    NOTE_ADDED = "note_added"
    NOTE_DELETED = "note_deleted"
    ACTIONS_APPENDED = "actions_appended"
    ACTION_TOGGLED = "action_toggled"


class AddNoteResult(AppBaseModel):
    outcome: AddOutcome
    note: Note | None = None
    limit: int | None = None


class NoteQuota(AppBaseModel):
    """Free-tier usage, rendered by clients as `used/limit`."""

    used: int
    limit: int | None = Field(default=None, description="None when the ceiling is disabled")
    limit_reached: bool


class StoreEvent(FrozenModel):
    """Change signal emitted after a mutation has been applied."""

    kind: StoreEventKind
    note_id: str
    version: int


class NoteSnapshot(FrozenModel):
    """The collection as of one store version, newest note first."""

    version: int
    notes: tuple[Note, ...]
