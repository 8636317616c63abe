from __future__ import annotations

from typing import TYPE_CHECKING

from reactum.config import settings
from reactum.core.schemas.action import (
    MAX_ACTION_MINUTES,
    MAX_ACTIONS_PER_REQUEST,
    ActionGenerationResult,
    GeneratedAction,
)
from reactum.utils.logging import get_logger

if TYPE_CHECKING:
    from openai import AsyncOpenAI  # type: ignore[import-not-found]

logger = get_logger(__name__)

OFFLINE_ACTION = GeneratedAction(
    title="Review API Key",
    description=(
        "Please add your OpenAI API key (APP_OPENAI_API_KEY) to the environment "
        "to generate real actions."
    ),
    duration=5,
)

INSTRUCTIONS = (
    "You turn book excerpts into small habits. Return JSON only, matching the provided schema.\n"
    f"- Generate exactly {MAX_ACTIONS_PER_REQUEST} distinct, concrete micro-actions the reader "
    "can perform to apply the excerpt.\n"
    f"- Each action must be performable in under {MAX_ACTION_MINUTES} minutes and be practically "
    "applicable to daily life.\n"
    "- Avoid vague advice like \"Think about X\". Start with active verbs like \"List\", \"Draft\", "
    "\"Message\", \"Meditate for 5 min\".\n"
    "- title: short and punchy (max 5 words); description: a specific instruction; "
    "duration: estimated whole minutes."
)


def build_action_prompt(note_content: str, book_title: str) -> str:
    """Compose the user message for one excerpt."""
    return (
        f'Analyze the following book excerpt from "{book_title.strip()}".\n'
        f'Excerpt: "{note_content.strip()}"\n\n'
        "Identify the core intent and generate the micro-actions."
    )


class ActionGenerator:
    """Adapter that turns a note excerpt into micro-actions via OpenAI.

    Every call is a fresh request: no retries, caching or deduplication.
    Failures never propagate; they are logged and produce an empty list.
    """

    def __init__(
        self,
        openai_client: AsyncOpenAI | None,
        *,
        model: str | None = None,
        reasoning_effort: str | None = None,
    ) -> None:
        self._client = openai_client
        self._model = model or settings.action_model
        self._reasoning_effort = reasoning_effort or settings.action_model_reasoning

    @property
    def offline(self) -> bool:
        return self._client is None

    async def generate(self, note_content: str, book_title: str) -> list[GeneratedAction]:
        if self._client is None:
            logger.warning("No OpenAI API key configured. Returning placeholder action.")
            return [OFFLINE_ACTION]

        logger.info(
            "Generating actions for excerpt from %s (content length: %d)",
            book_title,
            len(note_content),
        )

        try:
            response = await self._client.responses.parse(
                model=self._model,
                input=[
                    {
                        "role": "system",
                        "content": INSTRUCTIONS,
                    },
                    {
                        "role": "user",
                        "content": build_action_prompt(note_content, book_title),
                    },
                ],
                reasoning={"effort": self._reasoning_effort},
                text={"verbosity": "low"},
                text_format=ActionGenerationResult,
            )

            if getattr(response, "refusal", None):
                logger.warning("OpenAI refused to generate actions: %s", response.refusal)
                return []

            result = response.output_parsed
            if result is None:
                logger.warning("OpenAI returned no parsed output for %s", book_title)
                return []

            actions = result.actions
            logger.info("Generated %d actions for %s", len(actions), book_title)
            return actions

        except Exception as err:
            logger.error("Failed to generate actions: %s", err)
            logger.error("Error type: %s", type(err).__name__)
            return []
