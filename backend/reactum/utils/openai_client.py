from __future__ import annotations

from functools import lru_cache

from openai import AsyncOpenAI

from reactum.config import settings
from reactum.utils.logging import get_logger


@lru_cache(maxsize=1)
def get_openai_client() -> AsyncOpenAI | None:
    """Return a singleton OpenAI client, or None when no key is configured.

    Only `APP_OPENAI_API_KEY` is honoured. The ambient `OPENAI_API_KEY` is not
    used as a fallback so that an unconfigured install reliably stays offline.
    """
    logger = get_logger(__name__)
    if not settings.ai_configured:
        logger.warning("APP_OPENAI_API_KEY is not set; action generation runs offline")
        return None
    logger.debug("Initializing OpenAI client with APP_OPENAI_API_KEY")
    return AsyncOpenAI(api_key=settings.openai_api_key)
