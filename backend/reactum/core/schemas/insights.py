from __future__ import annotations

from pydantic import Field

from reactum.core.models.base import AppBaseModel


class TagCount(AppBaseModel):
    name: str
    value: int


class DayActivity(AppBaseModel):
    day: str
    actions: int


class GrowthReport(AppBaseModel):
    """Aggregate statistics shown on the growth view."""

    total_notes: int
    total_actions: int
    completed_actions: int
    completion_rate: int = Field(description="Whole percent, 0 when there are no actions")
    focus_area: str = Field(description="Most prominent tag, or 'General'")
    tag_histogram: list[TagCount]
    weekly_activity: list[DayActivity]
