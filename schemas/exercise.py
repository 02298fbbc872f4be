from typing import ClassVar, Literal

from pydantic import Field

from schemas.base import ApiModel, PatchModel

Category = Literal["stretching", "strengthening", "massage"]
Difficulty = Literal["beginner", "intermediate", "advanced"]


class ExerciseCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str
    instructions: str
    image_url: str
    video_url: str | None = None
    category: Category
    duration: int = Field(..., gt=0)  # seconds
    difficulty: Difficulty
    tags: list[str] = Field(default_factory=list)
    is_core: bool = False  # part of the daily routine


class ExerciseUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"video_url"})

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    instructions: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    category: Category | None = None
    duration: int | None = Field(None, gt=0)
    difficulty: Difficulty | None = None
    tags: list[str] | None = None
    is_core: bool | None = None


class Exercise(ExerciseCreate):
    id: str
