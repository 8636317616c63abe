from __future__ import annotations

from pydantic import Field, PositiveInt

from reactum.core.models.base import AppBaseModel

MAX_ACTIONS_PER_REQUEST = 3
MAX_ACTION_MINUTES = 15


class GeneratedAction(AppBaseModel):
    """A micro-action as produced by the generator, before it gets an id."""

    title: str = Field(min_length=1, description="Short punchy title (max 5 words)")
    description: str = Field(min_length=1, description="Specific instruction on what to do")
    duration: PositiveInt = Field(
        le=MAX_ACTION_MINUTES,
        description=f"Estimated minutes (max {MAX_ACTION_MINUTES})",
    )


class ActionGenerationResult(AppBaseModel):
    """Validated generator output."""

    actions: list[GeneratedAction] = Field(
        description=f"Exactly {MAX_ACTIONS_PER_REQUEST} distinct micro-actions",
        max_length=MAX_ACTIONS_PER_REQUEST,
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "actions": [
                        {
                            "title": "Shrink one habit",
                            "description": "Pick a habit and write its 2-minute version on a sticky note.",
                            "duration": 3,
                        }
                    ]
                }
            ]
        }
    }
