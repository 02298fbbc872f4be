from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from schemas.completion import ExerciseCompletion, ExerciseCompletionCreate
from schemas.exercise import Exercise, ExerciseCreate, ExerciseUpdate
from schemas.profile import UserProfile, UserProfileCreate, UserProfileUpdate
from schemas.progress import ProgressEntry, ProgressEntryCreate, ProgressEntryUpdate
from schemas.reminder import Reminder, ReminderCreate, ReminderUpdate
from services.seed_service import seed_default_data

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class MemStorage:
    """
    Dict-backed entity store.

    Lookups that miss return ``None`` (or ``False`` for deletes); nothing here
    raises for an unknown id. Payloads are trusted: validation belongs to the
    request layer.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or _utcnow
        self.exercises: dict[str, Exercise] = {}
        self.reminders: dict[str, Reminder] = {}
        self.progress_entries: dict[str, ProgressEntry] = {}
        self.exercise_completions: dict[str, ExerciseCompletion] = {}
        self.user_profiles: dict[str, UserProfile] = {}

    # Exercises

    def get_exercises(
        self,
        category: str | None = None,
        difficulty: str | None = None,
        is_core: bool | None = None,
    ) -> list[Exercise]:
        exercises = list(self.exercises.values())
        if category:
            exercises = [e for e in exercises if e.category == category]
        if difficulty:
            exercises = [e for e in exercises if e.difficulty == difficulty]
        if is_core is not None:
            exercises = [e for e in exercises if e.is_core == is_core]
        return exercises

    def get_exercise(self, exercise_id: str) -> Exercise | None:
        return self.exercises.get(exercise_id)

    def create_exercise(self, data: ExerciseCreate) -> Exercise:
        exercise = Exercise(id=_new_id(), **data.model_dump())
        self.exercises[exercise.id] = exercise
        logger.debug("Created exercise %s (%s)", exercise.id, exercise.name)
        return exercise

    def update_exercise(self, exercise_id: str, patch: ExerciseUpdate) -> Exercise | None:
        existing = self.exercises.get(exercise_id)
        if not existing:
            return None
        updated = existing.model_copy(update=patch.changes())
        self.exercises[exercise_id] = updated
        logger.debug("Updated exercise %s", exercise_id)
        return updated

    # Reminders

    def get_reminders(self, user_id: str) -> list[Reminder]:
        return [r for r in self.reminders.values() if r.user_id == user_id]

    def create_reminder(self, data: ReminderCreate) -> Reminder:
        reminder = Reminder(id=_new_id(), created_at=self._clock(), **data.model_dump())
        self.reminders[reminder.id] = reminder
        logger.debug("Created reminder %s for user %s", reminder.id, reminder.user_id)
        return reminder

    def update_reminder(self, reminder_id: str, patch: ReminderUpdate) -> Reminder | None:
        existing = self.reminders.get(reminder_id)
        if not existing:
            return None
        updated = existing.model_copy(update=patch.changes())
        self.reminders[reminder_id] = updated
        logger.debug("Updated reminder %s", reminder_id)
        return updated

    def delete_reminder(self, reminder_id: str) -> bool:
        if self.reminders.pop(reminder_id, None) is None:
            return False
        logger.debug("Deleted reminder %s", reminder_id)
        return True

    # Progress entries

    def get_progress_entries(self, user_id: str, limit: int | None = None) -> list[ProgressEntry]:
        # YYYY-MM-DD sorts chronologically as a string; sorted() is stable for same-day entries.
        entries = sorted(
            (e for e in self.progress_entries.values() if e.user_id == user_id),
            key=lambda e: e.date,
            reverse=True,
        )
        if limit is not None:
            return entries[:limit]
        return entries

    def get_progress_entry(self, user_id: str, date: str) -> ProgressEntry | None:
        # Several entries may share a date; the earliest one logged wins.
        return next(
            (e for e in self.progress_entries.values() if e.user_id == user_id and e.date == date),
            None,
        )

    def create_progress_entry(self, data: ProgressEntryCreate) -> ProgressEntry:
        entry = ProgressEntry(id=_new_id(), created_at=self._clock(), **data.model_dump())
        self.progress_entries[entry.id] = entry
        logger.debug("Logged progress %s for user %s on %s", entry.id, entry.user_id, entry.date)
        return entry

    def update_progress_entry(self, entry_id: str, patch: ProgressEntryUpdate) -> ProgressEntry | None:
        existing = self.progress_entries.get(entry_id)
        if not existing:
            return None
        updated = existing.model_copy(update=patch.changes())
        self.progress_entries[entry_id] = updated
        logger.debug("Updated progress entry %s", entry_id)
        return updated

    # Exercise completions (append-only)

    def create_exercise_completion(self, data: ExerciseCompletionCreate) -> ExerciseCompletion:
        completion = ExerciseCompletion(id=_new_id(), completed_at=self._clock(), **data.model_dump())
        self.exercise_completions[completion.id] = completion
        logger.debug(
            "Recorded completion %s of exercise %s for user %s",
            completion.id,
            completion.exercise_id,
            completion.user_id,
        )
        return completion

    def get_exercise_completions(self, user_id: str, date: str | None = None) -> list[ExerciseCompletion]:
        completions = [c for c in self.exercise_completions.values() if c.user_id == user_id]
        if date:
            completions = [c for c in completions if _utc_date(c.completed_at) == date]
        return sorted(completions, key=lambda c: c.completed_at, reverse=True)

    # User profiles

    def get_user_profile(self, profile_id: str) -> UserProfile | None:
        return self.user_profiles.get(profile_id)

    def create_user_profile(self, data: UserProfileCreate, profile_id: str | None = None) -> UserProfile:
        profile = UserProfile(id=profile_id or _new_id(), created_at=self._clock(), **data.model_dump())
        self.user_profiles[profile.id] = profile
        logger.debug("Created profile %s", profile.id)
        return profile

    def update_user_profile(self, profile_id: str, patch: UserProfileUpdate) -> UserProfile | None:
        existing = self.user_profiles.get(profile_id)
        if not existing:
            return None
        updated = existing.model_copy(update=patch.changes())
        self.user_profiles[profile_id] = updated
        logger.debug("Updated profile %s", profile_id)
        return updated


def _utc_date(ts: datetime) -> str:
    if ts.tzinfo is not None:
        ts = ts.astimezone(timezone.utc)
    return ts.date().isoformat()


def init_storage(seed: bool = True, clock: Clock | None = None) -> MemStorage:
    storage = MemStorage(clock=clock)
    if seed:
        seed_default_data(storage)
    return storage
