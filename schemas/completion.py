from datetime import datetime

from pydantic import Field

from schemas.base import ApiModel


class ExerciseCompletionCreate(ApiModel):
    user_id: str | None = None
    exercise_id: str = Field(..., min_length=1)
    duration: int | None = Field(None, ge=0)  # actual seconds spent


class ExerciseCompletion(ExerciseCompletionCreate):
    id: str
    user_id: str
    completed_at: datetime
