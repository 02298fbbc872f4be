from datetime import datetime
from typing import ClassVar, Literal

from pydantic import Field

from schemas.base import ApiModel, PatchModel

SeverityLevel = Literal["mild", "moderate", "severe"]


class UserProfileCreate(ApiModel):
    name: str | None = None
    injury_date: str | None = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    severity_level: SeverityLevel | None = None
    goals: list[str] = Field(default_factory=list)
    preferred_reminder_times: list[str] = Field(default_factory=list)  # HH:MM


class UserProfileUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"name", "injury_date", "severity_level"})

    name: str | None = None
    injury_date: str | None = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    severity_level: SeverityLevel | None = None
    goals: list[str] | None = None
    preferred_reminder_times: list[str] | None = None


class UserProfile(UserProfileCreate):
    id: str
    created_at: datetime
