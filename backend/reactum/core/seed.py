from __future__ import annotations

from datetime import UTC, datetime, timedelta

from reactum.core.models.note import ActionItem, Note


def build_seed_notes(now: datetime | None = None) -> list[Note]:
    """Built-in example notes a fresh session starts with, newest first."""
    now = now or datetime.now(UTC)
    return [
        Note(
            id="1",
            book_title="Atomic Habits",
            author="James Clear",
            content=(
                "You do not rise to the level of your goals. You fall to the level of your "
                "systems. The goal is not to read a book, the goal is to become a reader."
            ),
            tags=["Habits", "Productivity", "Identity"],
            created_at=now,
            actions=(
                ActionItem(
                    id="a1",
                    title="2-Minute Rule Setup",
                    description="Identify one habit you want to start and scale it down to just 2 minutes.",
                    duration=2,
                    is_completed=True,
                    created_at=now,
                    source_note_id="1",
                ),
            ),
        ),
        Note(
            id="2",
            book_title="Deep Work",
            author="Cal Newport",
            content=(
                "To produce at your peak level you need to work for extended periods with full "
                "concentration on a single task free from distraction."
            ),
            tags=["Focus", "Productivity", "Work"],
            created_at=now - timedelta(days=1),
        ),
    ]
