from __future__ import annotations

from functools import lru_cache

from reactum.config import settings
from reactum.core.seed import build_seed_notes
from reactum.core.services.action_generator import ActionGenerator
from reactum.core.services.generation_service import GenerationCoordinator
from reactum.core.services.note_store import NoteStore
from reactum.utils.logging import get_logger
from reactum.utils.openai_client import get_openai_client

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_note_store() -> NoteStore:
    """Return the session-wide note store, seeded on first use."""
    notes = build_seed_notes() if settings.seed_notes else []
    logger.info(
        "Initializing note store",
        extra={"seed_count": len(notes), "max_notes": settings.max_free_notes},
    )
    return NoteStore(notes, max_notes=settings.max_free_notes)


def get_action_generator() -> ActionGenerator:
    """Construct the action generator with the shared OpenAI client."""
    return ActionGenerator(get_openai_client())


@lru_cache(maxsize=1)
def get_generation_coordinator() -> GenerationCoordinator:
    """Return the session-wide coordinator.

    Busy state has to outlive a single request, so the coordinator is shared
    and bound to the shared store.
    """
    return GenerationCoordinator(get_note_store(), get_action_generator())
