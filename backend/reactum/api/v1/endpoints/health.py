from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from reactum.config import settings
from reactum.core.services.note_store import NoteStore  # noqa: TCH001
from reactum.dependencies import get_note_store

router = APIRouter()


@router.get("/")
async def health_check():
    """Health check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "service": "reactum-api",
            "version": "0.1.0"
        }
    )


@router.get("/ready")
async def readiness_check(store: NoteStore = Depends(get_note_store)):
    """Readiness check endpoint."""
    quota = store.quota()
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "ready",
            "notes": quota.used,
            "note_limit": quota.limit,
            "ai_service": "configured" if settings.ai_configured else "offline",
            "cors_origins": settings.cors_origins,
            "api_prefix": settings.api_prefix
        }
    )
