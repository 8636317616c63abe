from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from reactum.api.v1.schemas.note import ActionItemRead
from reactum.core.schemas.graph import GraphData
from reactum.core.schemas.insights import GrowthReport, TagCount
from reactum.core.services import insights_service
from reactum.core.services.graph_service import build_knowledge_graph
from reactum.core.services.note_store import NoteStore  # noqa: TCH001
from reactum.dependencies import get_note_store

router = APIRouter()


@router.get("/pending", response_model=list[ActionItemRead])
async def list_pending_actions(store: NoteStore = Depends(get_note_store)):
    notes = store.snapshot().notes
    return [ActionItemRead.model_validate(a) for a in insights_service.pending_actions(notes)]


@router.get("/suggested", response_model=ActionItemRead | None)
async def get_suggested_action(store: NoteStore = Depends(get_note_store)):
    """Return the action suggested for today, or null when all are done."""
    action = insights_service.suggested_action(store.snapshot().notes)
    return ActionItemRead.model_validate(action) if action else None


@router.get("/growth", response_model=GrowthReport)
async def get_growth_report(store: NoteStore = Depends(get_note_store)):
    return insights_service.growth_report(store.snapshot().notes)


@router.get("/tags", response_model=list[TagCount])
async def get_tag_histogram(
    limit: int = Query(default=insights_service.DEFAULT_TAG_LIMIT, ge=1, le=100),
    store: NoteStore = Depends(get_note_store),
):
    return insights_service.tag_histogram(store.snapshot().notes, limit=limit)


@router.get("/graph", response_model=GraphData)
async def get_knowledge_graph(store: NoteStore = Depends(get_note_store)):
    """Return book, note and tag nodes with their links for the knowledge map."""
    return build_knowledge_graph(store.snapshot().notes)
