"""Tests for the derived views over a note collection."""

from datetime import datetime

import pytest

from conftest import make_action, make_note
from reactum.core.services import insights_service


def local(year, month, day, hour=12):
    """An aware datetime in the process's local timezone."""
    return datetime(year, month, day, hour).astimezone()


class TestPendingActions:

    def test_note_then_action_order(self):
        notes = [
            make_note("n2", actions=(make_action("b1", "n2"), make_action("b2", "n2", completed=True))),
            make_note("n1", actions=(make_action("a1", "n1"), make_action("a2", "n1"))),
        ]
        pending = insights_service.pending_actions(notes)

        assert [a.id for a in pending] == ["b1", "a1", "a2"]
        assert not any(a.is_completed for a in pending)

    def test_suggested_is_first_pending(self):
        notes = [
            make_note("n2", actions=(make_action("b1", "n2", completed=True),)),
            make_note("n1", actions=(make_action("a1", "n1"),)),
        ]
        assert insights_service.suggested_action(notes).id == "a1"

    def test_suggested_none_when_all_done(self, seeded_store):
        assert insights_service.suggested_action(seeded_store.notes) is None


class TestTagHistogram:

    def test_counts_notes_per_tag_in_first_appearance_order(self):
        notes = [
            make_note("n1", tags=["Habits", "Productivity"]),
            make_note("n2", tags=["Focus", "Productivity"]),
        ]
        histogram = insights_service.tag_histogram(notes)

        assert [(t.name, t.value) for t in histogram] == [
            ("Habits", 1),
            ("Productivity", 2),
            ("Focus", 1),
        ]

    def test_duplicate_tags_count_once_per_note(self):
        notes = [make_note("n1", tags=["Focus", "Focus", "Focus"])]
        assert [(t.name, t.value) for t in insights_service.tag_histogram(notes)] == [("Focus", 1)]

    def test_truncated_to_five(self):
        notes = [make_note("n1", tags=[f"t{i}" for i in range(8)])]
        histogram = insights_service.tag_histogram(notes)
        assert [t.name for t in histogram] == ["t0", "t1", "t2", "t3", "t4"]

    def test_no_limit(self):
        notes = [make_note("n1", tags=[f"t{i}" for i in range(8)])]
        assert len(insights_service.tag_histogram(notes, limit=None)) == 8


class TestWeeklyActivity:

    def test_buckets_by_local_weekday(self):
        # 2024-01-01 is a Monday, 2024-01-07 a Sunday
        notes = [
            make_note("n1", actions=(
                make_action("a1", created_at=local(2024, 1, 1)),
                make_action("a2", created_at=local(2024, 1, 1), completed=True),
                make_action("a3", created_at=local(2024, 1, 3)),
                make_action("a4", created_at=local(2024, 1, 7)),
            )),
        ]
        activity = insights_service.weekly_activity(notes)

        assert [d.day for d in activity] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        assert [d.actions for d in activity] == [2, 0, 1, 0, 0, 0, 1]

    def test_empty(self):
        assert [d.actions for d in insights_service.weekly_activity([])] == [0] * 7


class TestCompletionRate:

    def test_zero_without_actions(self):
        assert insights_service.completion_rate([make_note("n1")]) == 0
        assert insights_service.completion_rate([]) == 0

    @pytest.mark.parametrize(
        ("completed", "total", "expected"),
        [
            (0, 3, 0),
            (1, 3, 33),
            (2, 3, 67),
            (1, 8, 13),
            (3, 8, 38),
            (1, 2, 50),
            (4, 4, 100),
        ],
    )
    def test_rounded_percent(self, completed, total, expected):
        actions = tuple(make_action(f"a{i}", completed=i < completed) for i in range(total))
        assert insights_service.completion_rate([make_note("n1", actions=actions)]) == expected

    def test_seeded_session_is_fully_complete(self, seeded_store):
        assert insights_service.completion_rate(seeded_store.notes) == 100


class TestGrowthReport:

    def test_seeded_report(self, seeded_store):
        report = insights_service.growth_report(seeded_store.notes)

        assert report.total_notes == 2
        assert report.total_actions == 1
        assert report.completed_actions == 1
        assert report.completion_rate == 100
        assert report.focus_area == "Habits"
        assert [t.name for t in report.tag_histogram] == [
            "Habits", "Productivity", "Identity", "Focus", "Work",
        ]
        assert sum(d.actions for d in report.weekly_activity) == 1

    def test_focus_area_defaults_to_general(self):
        report = insights_service.growth_report([make_note("n1", tags=[])])
        assert report.focus_area == "General"
