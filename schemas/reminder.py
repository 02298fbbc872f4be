from datetime import datetime
from typing import Literal

from pydantic import Field

from schemas.base import ApiModel, PatchModel

ReminderType = Literal["stretch", "walk", "check-in"]
Weekday = Literal["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


class ReminderCreate(ApiModel):
    # None => filled with the default user by the route.
    user_id: str | None = None
    type: ReminderType
    title: str = Field(..., min_length=1, max_length=200)
    message: str
    time: str = Field(..., pattern=r"^\d{2}:\d{2}$")  # HH:MM
    days: list[Weekday] = Field(..., min_length=1)
    is_active: bool = True


class ReminderUpdate(PatchModel):
    user_id: str | None = None
    type: ReminderType | None = None
    title: str | None = Field(None, min_length=1, max_length=200)
    message: str | None = None
    time: str | None = Field(None, pattern=r"^\d{2}:\d{2}$")
    days: list[Weekday] | None = Field(None, min_length=1)
    is_active: bool | None = None


class Reminder(ReminderCreate):
    id: str
    user_id: str
    created_at: datetime
