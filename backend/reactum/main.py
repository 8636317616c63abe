from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from .api.middleware.security import SecurityMiddleware
from .api.v1.router import api_router
from .config import settings
from .dependencies import get_generation_coordinator
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

# The browser client only reads, creates, deletes and triggers generation.
CORS_METHODS = ["GET", "POST", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Accept", "Accept-Language", "Content-Language", "Content-Type"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "ReActum API starting (AI configured: %s, note limit: %s)",
        settings.ai_configured,
        settings.max_free_notes,
    )
    yield
    if get_generation_coordinator.cache_info().currsize:
        get_generation_coordinator().close()
    logger.info("ReActum API stopped")


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title="ReActum API",
        description="Read → Re-Act → Actum: turn book notes into micro-actions.",
        debug=settings.debug,
        version="0.1.0",
        root_path=settings.root_path or "",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        max_age=600,
    )
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.trusted_hosts)
    app.add_middleware(SecurityMiddleware)

    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("reactum.main:app", host="127.0.0.1", port=8000, log_level=settings.log_level.lower())
