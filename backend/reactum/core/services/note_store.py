from __future__ import annotations

import threading
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from reactum.core.models.note import ActionItem, Note, new_id
from reactum.core.schemas.store import (
    AddNoteResult,
    AddOutcome,
    NoteQuota,
    NoteSnapshot,
    StoreEvent,
    StoreEventKind,
)
from reactum.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from reactum.core.schemas.action import GeneratedAction

    StoreListener = Callable[[StoreEvent], None]

logger = get_logger(__name__)


class NoteStore:
    """In-memory, session-scoped collection of notes and their actions.

    The collection is an immutable tuple that is replaced as a whole on every
    mutation, so a reader holding a snapshot never sees a partially applied
    change. Listeners are notified after the new snapshot is in place.
    """

    def __init__(self, notes: Iterable[Note] = (), *, max_notes: int | None = None) -> None:
        self._notes: tuple[Note, ...] = tuple(notes)
        self._version = 0
        self._max_notes = max_notes
        self._lock = threading.RLock()
        self._listeners: list[StoreListener] = []

    # -- reads -------------------------------------------------------------

    @property
    def version(self) -> int:
        return self._version

    @property
    def notes(self) -> tuple[Note, ...]:
        return self._notes

    @property
    def max_notes(self) -> int | None:
        return self._max_notes

    def snapshot(self) -> NoteSnapshot:
        with self._lock:
            return NoteSnapshot(version=self._version, notes=self._notes)

    def get_note(self, note_id: str) -> Note | None:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def quota(self) -> NoteQuota:
        used = len(self._notes)
        return NoteQuota(
            used=used,
            limit=self._max_notes,
            limit_reached=self._limit_reached(used),
        )

    # -- subscriptions -----------------------------------------------------

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a change listener and return a callable that removes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    # -- mutations ---------------------------------------------------------

    def add_note(
        self,
        book_title: str,
        content: str,
        tags: Sequence[str] = (),
        *,
        author: str = "Unknown",
    ) -> AddNoteResult:
        """Prepend a new note unless the free-tier ceiling has been reached."""
        with self._lock:
            if self._limit_reached(len(self._notes)):
                logger.info(
                    "Note limit reached, rejecting new note",
                    extra={"limit": self._max_notes, "count": len(self._notes)},
                )
                return AddNoteResult(outcome=AddOutcome.LIMIT_REACHED, limit=self._max_notes)

            note = Note(
                id=new_id(),
                book_title=book_title,
                author=author,
                content=content,
                tags=tuple(tags),
                created_at=datetime.now(UTC),
            )
            event = self._commit((note, *self._notes), StoreEventKind.NOTE_ADDED, note.id)

        logger.debug("Added note %s (%s)", note.id, note.book_title)
        self._notify(event)
        return AddNoteResult(outcome=AddOutcome.ADDED, note=note, limit=self._max_notes)

    def delete_note(self, note_id: str) -> bool:
        """Remove a note and every action it owns. Missing ids are a no-op."""
        with self._lock:
            remaining = tuple(n for n in self._notes if n.id != note_id)
            if len(remaining) == len(self._notes):
                return False
            event = self._commit(remaining, StoreEventKind.NOTE_DELETED, note_id)

        logger.debug("Deleted note %s", note_id)
        self._notify(event)
        return True

    def append_actions(self, note_id: str, items: Sequence[ActionItem]) -> list[ActionItem]:
        """Append a batch of actions to a note in one swap.

        Returns the appended items, or an empty list when the note no longer
        exists (e.g. it was deleted while generation was in flight).
        """
        items = list(items)
        for item in items:
            if item.source_note_id != note_id:
                raise ValueError(
                    f"Action {item.id} references note {item.source_note_id}, expected {note_id}"
                )
        if not items:
            return []

        with self._lock:
            note = self.get_note(note_id)
            if note is None:
                logger.info("Discarding %d actions for missing note %s", len(items), note_id)
                return []
            existing_ids = {a.id for n in self._notes for a in n.actions}
            if any(item.id in existing_ids for item in items) or len({i.id for i in items}) != len(items):
                raise ValueError("Action ids must be unique across the store")

            updated = note.with_actions((*note.actions, *items))
            event = self._commit(self._replace(updated), StoreEventKind.ACTIONS_APPENDED, note_id)

        logger.debug("Appended %d actions to note %s", len(items), note_id)
        self._notify(event)
        return items

    def toggle_action_completion(self, note_id: str, action_id: str) -> ActionItem | None:
        """Flip `is_completed` on one action. Missing ids are a no-op."""
        with self._lock:
            note = self.get_note(note_id)
            if note is None:
                return None

            toggled: ActionItem | None = None
            actions: list[ActionItem] = []
            for action in note.actions:
                if action.id == action_id:
                    toggled = action.model_copy(update={"is_completed": not action.is_completed})
                    actions.append(toggled)
                else:
                    actions.append(action)
            if toggled is None:
                return None

            event = self._commit(
                self._replace(note.with_actions(tuple(actions))),
                StoreEventKind.ACTION_TOGGLED,
                note_id,
            )

        logger.debug("Toggled action %s on note %s -> %s", action_id, note_id, toggled.is_completed)
        self._notify(event)
        return toggled

    # -- helpers -----------------------------------------------------------

    @staticmethod
    def build_action_items(note_id: str, generated: Iterable[GeneratedAction]) -> list[ActionItem]:
        """Stamp generated actions with fresh ids, owner and timestamp."""
        now = datetime.now(UTC)
        return [
            ActionItem(
                id=new_id(),
                title=g.title,
                description=g.description,
                duration=g.duration,
                is_completed=False,
                created_at=now,
                source_note_id=note_id,
            )
            for g in generated
        ]

    def _limit_reached(self, count: int) -> bool:
        return self._max_notes is not None and count >= self._max_notes

    def _replace(self, updated: Note) -> tuple[Note, ...]:
        return tuple(updated if n.id == updated.id else n for n in self._notes)

    def _commit(self, notes: tuple[Note, ...], kind: StoreEventKind, note_id: str) -> StoreEvent:
        self._notes = notes
        self._version += 1
        return StoreEvent(kind=kind, note_id=note_id, version=self._version)

    def _notify(self, event: StoreEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as err:
                logger.error(
                    "Store listener failed for %s on note %s: %s",
                    event.kind.value,
                    event.note_id,
                    err,
                    extra={"error_type": type(err).__name__},
                )
