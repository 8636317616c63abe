"""Tests for the per-note generation state machine."""

import asyncio

import pytest

from conftest import make_openai_client
from reactum.core.schemas.action import GeneratedAction
from reactum.core.services.action_generator import ActionGenerator
from reactum.core.services.generation_service import (
    GenerationCoordinator,
    GenerationOutcome,
    GenerationState,
)


class BlockingGenerator:
    """Generator that waits until released, to hold a note in GENERATING."""

    def __init__(self, actions=None):
        self.release = asyncio.Event()
        self.started = asyncio.Event()
        self.calls = 0
        self._actions = actions or [
            GeneratedAction(title="Block an hour", description="Put a focus block on tomorrow.", duration=3)
        ]

    async def generate(self, note_content, book_title):
        self.calls += 1
        self.started.set()
        await self.release.wait()
        return list(self._actions)


async def test_generate_appends_three_actions(seeded_store, three_actions_json):
    generator = ActionGenerator(make_openai_client(output_text=three_actions_json))
    coordinator = GenerationCoordinator(seeded_store, generator)
    existing_ids = {a.id for n in seeded_store.notes for a in n.actions}

    result = await coordinator.generate_for_note("2")

    note = seeded_store.get_note("2")
    assert result.outcome is GenerationOutcome.COMPLETED
    assert len(result.actions) == 3
    assert list(note.actions) == result.actions
    assert all(not a.is_completed for a in note.actions)
    assert all(a.source_note_id == "2" for a in note.actions)
    ids = [a.id for a in note.actions]
    assert len(set(ids)) == 3
    assert existing_ids.isdisjoint(ids)
    assert coordinator.state_of("2") is GenerationState.IDLE


async def test_malformed_response_leaves_note_unchanged(seeded_store):
    generator = ActionGenerator(make_openai_client(output_text="{oops"))
    coordinator = GenerationCoordinator(seeded_store, generator)
    before = seeded_store.get_note("1").actions

    result = await coordinator.generate_for_note("1")

    assert result.outcome is GenerationOutcome.COMPLETED
    assert result.actions == []
    assert seeded_store.get_note("1").actions == before


async def test_offline_generation_appends_placeholder(seeded_store):
    coordinator = GenerationCoordinator(seeded_store, ActionGenerator(None))

    result = await coordinator.generate_for_note("2")

    assert [a.title for a in result.actions] == ["Review API Key"]
    assert seeded_store.get_note("2").actions[0].duration == 5


async def test_missing_note_is_not_found(seeded_store):
    generator = BlockingGenerator()
    coordinator = GenerationCoordinator(seeded_store, generator)

    result = await coordinator.generate_for_note("missing")

    assert result.outcome is GenerationOutcome.NOT_FOUND
    assert generator.calls == 0


async def test_second_intent_while_generating_is_rejected(seeded_store):
    generator = BlockingGenerator()
    coordinator = GenerationCoordinator(seeded_store, generator)

    first = asyncio.create_task(coordinator.generate_for_note("2"))
    await generator.started.wait()
    assert coordinator.state_of("2") is GenerationState.GENERATING

    second = await coordinator.generate_for_note("2")
    assert second.outcome is GenerationOutcome.BUSY
    assert generator.calls == 1

    generator.release.set()
    result = await first
    assert result.outcome is GenerationOutcome.COMPLETED
    assert coordinator.state_of("2") is GenerationState.IDLE


async def test_other_notes_and_mutations_stay_available(seeded_store):
    generator = BlockingGenerator()
    coordinator = GenerationCoordinator(seeded_store, generator)

    pending = asyncio.create_task(coordinator.generate_for_note("2"))
    await generator.started.wait()

    assert coordinator.state_of("1") is GenerationState.IDLE
    assert seeded_store.toggle_action_completion("1", "a1") is not None

    generator.release.set()
    await pending


async def test_delete_during_generation_discards_result(seeded_store):
    generator = BlockingGenerator()
    coordinator = GenerationCoordinator(seeded_store, generator)

    pending = asyncio.create_task(coordinator.generate_for_note("2"))
    await generator.started.wait()

    seeded_store.delete_note("2")
    assert coordinator.state_of("2") is GenerationState.IDLE

    generator.release.set()
    result = await pending

    assert result.outcome is GenerationOutcome.DISCARDED
    assert result.actions == []
    assert seeded_store.get_note("2") is None
    assert all(a.source_note_id != "2" for n in seeded_store.notes for a in n.actions)


async def test_generator_exception_returns_note_to_idle(seeded_store):
    class ExplodingGenerator:
        async def generate(self, note_content, book_title):
            raise RuntimeError("unexpected")

    coordinator = GenerationCoordinator(seeded_store, ExplodingGenerator())

    with pytest.raises(RuntimeError):
        await coordinator.generate_for_note("2")

    assert coordinator.state_of("2") is GenerationState.IDLE


async def test_close_unsubscribes(seeded_store):
    coordinator = GenerationCoordinator(seeded_store, BlockingGenerator())
    coordinator.close()

    coordinator._generating.add("2")
    seeded_store.delete_note("2")

    assert coordinator.state_of("2") is GenerationState.GENERATING
