from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from reactum.api.v1.schemas.note import (
    ActionItemRead,
    GenerationStatusRead,
    NoteCreate,
    NoteLimitDetail,
    NoteRead,
)
from reactum.core.schemas.store import AddOutcome, NoteQuota
from reactum.core.services.generation_service import (
    GenerationCoordinator,  # noqa: TCH001
    GenerationOutcome,
)
from reactum.core.services.note_store import NoteStore  # noqa: TCH001
from reactum.dependencies import get_generation_coordinator, get_note_store

router = APIRouter()


@router.post(
    "/",
    response_model=NoteRead,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_402_PAYMENT_REQUIRED: {"description": "Free-tier note limit reached"}},
)
async def create_note(
    payload: NoteCreate,
    store: NoteStore = Depends(get_note_store),
):
    result = store.add_note(
        payload.book_title,
        payload.content,
        payload.tags,
        author=payload.author,
    )
    if result.outcome is AddOutcome.LIMIT_REACHED:
        detail = NoteLimitDetail(
            message=f"You've used all {result.limit} free notes. Delete a note or upgrade to add more.",
            limit=result.limit,
        )
        raise HTTPException(
            status_code=status.HTTP_402_PAYMENT_REQUIRED,
            detail=detail.model_dump(),
        )
    return NoteRead.model_validate(result.note)


@router.get("/", response_model=list[NoteRead])
async def list_notes(store: NoteStore = Depends(get_note_store)):
    return [NoteRead.model_validate(n) for n in store.snapshot().notes]


@router.get("/quota", response_model=NoteQuota)
async def get_quota(store: NoteStore = Depends(get_note_store)):
    return store.quota()


@router.get("/{note_id}", response_model=NoteRead)
async def get_note(note_id: str, store: NoteStore = Depends(get_note_store)):
    note = store.get_note(note_id)
    if not note:
        raise HTTPException(status_code=404, detail="Note not found")
    return NoteRead.model_validate(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(note_id: str, store: NoteStore = Depends(get_note_store)):
    """Delete a note and its actions. Deleting an unknown id succeeds."""
    store.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{note_id}/generation", response_model=GenerationStatusRead)
async def get_generation_status(
    note_id: str,
    coordinator: GenerationCoordinator = Depends(get_generation_coordinator),
):
    return GenerationStatusRead(note_id=note_id, state=coordinator.state_of(note_id))


@router.post("/{note_id}/actions/generate", response_model=list[ActionItemRead])
async def generate_actions(
    note_id: str,
    coordinator: GenerationCoordinator = Depends(get_generation_coordinator),
):
    """Generate micro-actions for a note and append them.

    An empty list is a valid result: the AI service failed or the note was
    deleted while the request was in flight.
    """
    result = await coordinator.generate_for_note(note_id)
    if result.outcome is GenerationOutcome.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Note not found")
    if result.outcome is GenerationOutcome.BUSY:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Actions are already being generated for this note",
        )
    return [ActionItemRead.model_validate(a) for a in result.actions]


@router.post("/{note_id}/actions/{action_id}/toggle", response_model=ActionItemRead)
async def toggle_action(
    note_id: str,
    action_id: str,
    store: NoteStore = Depends(get_note_store),
):
    action = store.toggle_action_completion(note_id, action_id)
    if not action:
        raise HTTPException(status_code=404, detail="Action not found")
    return ActionItemRead.model_validate(action)
