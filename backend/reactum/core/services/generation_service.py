from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import Field

from reactum.core.models.base import AppBaseModel
from reactum.core.models.note import ActionItem  # noqa: TCH001
from reactum.core.schemas.store import StoreEvent, StoreEventKind
from reactum.utils.logging import get_logger

if TYPE_CHECKING:
    from reactum.core.services.action_generator import ActionGenerator
    from reactum.core.services.note_store import NoteStore

logger = get_logger(__name__)


class GenerationState(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"


class GenerationOutcome(str, Enum):
    COMPLETED = "completed"
    BUSY = "busy"
    NOT_FOUND = "not_found"
    DISCARDED = "discarded"


class GenerationResult(AppBaseModel):
    note_id: str
    outcome: GenerationOutcome
    actions: list[ActionItem] = Field(default_factory=list)


class GenerationCoordinator:
    """Runs action generation with at most one call in flight per note.

    Each note is either IDLE or GENERATING. A generate intent is accepted only
    from IDLE; the note returns to IDLE when the call finishes (whatever its
    result) or when the note is deleted.
    """

    def __init__(self, store: NoteStore, generator: ActionGenerator) -> None:
        self._store = store
        self._generator = generator
        self._generating: set[str] = set()
        self._unsubscribe = store.subscribe(self._on_store_event)

    def state_of(self, note_id: str) -> GenerationState:
        if note_id in self._generating:
            return GenerationState.GENERATING
        return GenerationState.IDLE

    async def generate_for_note(self, note_id: str) -> GenerationResult:
        note = self._store.get_note(note_id)
        if note is None:
            return GenerationResult(note_id=note_id, outcome=GenerationOutcome.NOT_FOUND)
        if note_id in self._generating:
            logger.info("Generation already in progress for note %s", note_id)
            return GenerationResult(note_id=note_id, outcome=GenerationOutcome.BUSY)

        self._generating.add(note_id)
        try:
            generated = await self._generator.generate(note.content, note.book_title)
            items = self._store.build_action_items(note_id, generated)
            appended = self._store.append_actions(note_id, items)
        finally:
            self._generating.discard(note_id)

        if self._store.get_note(note_id) is None:
            return GenerationResult(note_id=note_id, outcome=GenerationOutcome.DISCARDED)
        return GenerationResult(note_id=note_id, outcome=GenerationOutcome.COMPLETED, actions=appended)

    def close(self) -> None:
        self._unsubscribe()

    def _on_store_event(self, event: StoreEvent) -> None:
        if event.kind is StoreEventKind.NOTE_DELETED and event.note_id in self._generating:
            logger.info("Note %s deleted during generation; result will be discarded", event.note_id)
            self._generating.discard(event.note_id)
