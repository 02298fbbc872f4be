from datetime import datetime
from typing import Annotated, ClassVar, Literal

from pydantic import Field

from schemas.base import ApiModel, PatchModel

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

DateQuery = Annotated[str, Field(pattern=DATE_PATTERN)]
Limit = Annotated[int, Field(ge=1)]


class ProgressEntryCreate(ApiModel):
    user_id: str | None = None
    date: str = Field(..., pattern=DATE_PATTERN)  # YYYY-MM-DD
    pain_level: int = Field(..., ge=1, le=10)
    exercises_completed: int = Field(0, ge=0)
    walking_steps: int = Field(0, ge=0)
    notes: str | None = None


class ProgressEntryUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"notes"})

    user_id: str | None = None
    date: str | None = Field(None, pattern=DATE_PATTERN)
    pain_level: int | None = Field(None, ge=1, le=10)
    exercises_completed: int | None = Field(None, ge=0)
    walking_steps: int | None = Field(None, ge=0)
    notes: str | None = None


class ProgressEntry(ProgressEntryCreate):
    id: str
    user_id: str
    created_at: datetime


PainTrend = Literal["improving", "worsening", "stable"]


class DailySummaryResponse(ApiModel):
    date: str
    completed_today: int
    target_exercises: int
    progress_pct: int
    today_progress: ProgressEntry | None
    active_reminders: int
    pain_trend: PainTrend | None
    recent_pain_levels: list[int]
