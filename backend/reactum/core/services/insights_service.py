"""Derived views over a note collection.

All functions are pure: they read the notes they are given and build fresh
results, so callers can recompute them from any store snapshot.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from reactum.core.schemas.insights import DayActivity, GrowthReport, TagCount

if TYPE_CHECKING:
    from collections.abc import Sequence

    from reactum.core.models.note import ActionItem, Note

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
DEFAULT_TAG_LIMIT = 5
DEFAULT_FOCUS_AREA = "General"


def all_actions(notes: Sequence[Note]) -> list[ActionItem]:
    return [action for note in notes for action in note.actions]


def pending_actions(notes: Sequence[Note]) -> list[ActionItem]:
    """Incomplete actions in note order, then insertion order within a note."""
    return [action for action in all_actions(notes) if not action.is_completed]


def suggested_action(notes: Sequence[Note]) -> ActionItem | None:
    pending = pending_actions(notes)
    return pending[0] if pending else None


def tag_histogram(notes: Sequence[Note], limit: int | None = DEFAULT_TAG_LIMIT) -> list[TagCount]:
    """Number of notes per tag, in order of first appearance.

    A note counts once per distinct tag even if it repeats the tag.
    """
    counts: dict[str, int] = {}
    for note in notes:
        for tag in dict.fromkeys(note.tags):
            counts[tag] = counts.get(tag, 0) + 1
    histogram = [TagCount(name=tag, value=count) for tag, count in counts.items()]
    return histogram if limit is None else histogram[:limit]


def weekly_activity(notes: Sequence[Note]) -> list[DayActivity]:
    """Actions per creation weekday (local time), Monday first."""
    buckets = [0] * len(WEEKDAYS)
    for action in all_actions(notes):
        buckets[action.created_at.astimezone().weekday()] += 1
    return [DayActivity(day=day, actions=count) for day, count in zip(WEEKDAYS, buckets)]


def completion_rate(notes: Sequence[Note]) -> int:
    actions = all_actions(notes)
    if not actions:
        return 0
    completed = sum(1 for a in actions if a.is_completed)
    total = len(actions)
    # half rounds up, unlike round()'s banker's rounding
    return (200 * completed + total) // (2 * total)


def growth_report(notes: Sequence[Note]) -> GrowthReport:
    actions = all_actions(notes)
    histogram = tag_histogram(notes)
    return GrowthReport(
        total_notes=len(notes),
        total_actions=len(actions),
        completed_actions=sum(1 for a in actions if a.is_completed),
        completion_rate=completion_rate(notes),
        focus_area=histogram[0].name if histogram else DEFAULT_FOCUS_AREA,
        tag_histogram=histogram,
        weekly_activity=weekly_activity(notes),
    )
