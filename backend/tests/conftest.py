"""Shared fixtures for the ReActum test suite."""

import json
from datetime import UTC, datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from reactum.core.models.note import ActionItem, Note
from reactum.core.seed import build_seed_notes
from reactum.core.services.note_store import NoteStore

THREE_ACTIONS = [
    {
        "title": "Shrink one habit",
        "description": "Write the 2-minute version of a habit you keep postponing.",
        "duration": 3,
    },
    {
        "title": "Redesign your desk",
        "description": "Remove one object from your desk that pulls you off task.",
        "duration": 5,
    },
    {
        "title": "Message an accountability partner",
        "description": "Tell a friend which system you will follow this week.",
        "duration": 4,
    },
]


def make_openai_client(output_text=None, error=None, refusal=None):
    """Build a stand-in for AsyncOpenAI exposing only `responses.parse`.

    Like the SDK, the raw text is validated against `text_format`, so a
    malformed payload raises from the call. Set `client.output_text` to change
    what later calls return.
    """
    client = SimpleNamespace(output_text=output_text)

    async def parse(**kwargs):
        if error is not None:
            raise error
        parsed = None
        if client.output_text:
            parsed = kwargs["text_format"].model_validate_json(client.output_text)
        return SimpleNamespace(output_parsed=parsed, refusal=refusal)

    client.responses = SimpleNamespace(parse=AsyncMock(side_effect=parse))
    return client


def make_note(note_id="n1", tags=None, actions=(), book_title="Deep Work"):
    return Note(
        id=note_id,
        book_title=book_title,
        content="Work with full concentration on a single task.",
        tags=tags if tags is not None else ["Focus"],
        actions=actions,
    )


def make_action(action_id, note_id="n1", completed=False, created_at=None):
    return ActionItem(
        id=action_id,
        title=f"Action {action_id}",
        description="Do the thing.",
        duration=5,
        is_completed=completed,
        created_at=created_at or datetime.now(UTC),
        source_note_id=note_id,
    )


@pytest.fixture
def three_actions_json():
    return json.dumps({"actions": THREE_ACTIONS})


@pytest.fixture
def seeded_store():
    """Store with the two built-in notes and the default ceiling of two."""
    return NoteStore(build_seed_notes(), max_notes=2)


@pytest.fixture
def empty_store():
    return NoteStore(max_notes=None)
