"""
Tests for the in-memory entity store.
"""

from core.config import settings
from schemas.completion import ExerciseCompletionCreate
from schemas.exercise import ExerciseCreate, ExerciseUpdate
from schemas.profile import UserProfileCreate, UserProfileUpdate
from schemas.progress import ProgressEntryCreate, ProgressEntryUpdate
from schemas.reminder import ReminderCreate, ReminderUpdate

DEFAULT_USER_ID = settings.default_user_id


def _exercise(**overrides) -> ExerciseCreate:
    data = dict(
        name="Ankle Circles",
        description="Loosen the ankle joint",
        instructions="Rotate each ankle slowly ten times in each direction.",
        image_url="https://example.com/ankle.jpg",
        category="stretching",
        duration=30,
        difficulty="beginner",
        tags=["ankle", "seated"],
        is_core=False,
    )
    data.update(overrides)
    return ExerciseCreate(**data)


def _reminder(**overrides) -> ReminderCreate:
    data = dict(
        user_id="user-1",
        type="walk",
        title="Lunch walk",
        message="Ten minutes outside",
        time="12:30",
        days=["monday", "wednesday"],
    )
    data.update(overrides)
    return ReminderCreate(**data)


def _entry(date: str, pain: int = 5, user_id: str = "user-1") -> ProgressEntryCreate:
    return ProgressEntryCreate(user_id=user_id, date=date, pain_level=pain)


class TestSeedData:
    def test_seeded_exercises(self, storage):
        assert len(storage.get_exercises()) == 8

    def test_seeded_profile(self, storage):
        profile = storage.get_user_profile(DEFAULT_USER_ID)

        assert profile is not None
        assert profile.severity_level == "moderate"
        assert len(profile.goals) == 3

    def test_seeded_reminders(self, storage):
        assert len(storage.get_reminders(DEFAULT_USER_ID)) == 4

    def test_no_progress_or_completions(self, storage):
        assert storage.get_progress_entries(DEFAULT_USER_ID) == []
        assert storage.get_exercise_completions(DEFAULT_USER_ID) == []

    def test_unseeded_store_is_empty(self, empty_storage):
        assert empty_storage.get_exercises() == []
        assert empty_storage.get_user_profile(DEFAULT_USER_ID) is None


class TestExercises:
    def test_create_then_get_matches_input(self, storage):
        data = _exercise()
        created = storage.create_exercise(data)

        fetched = storage.get_exercise(created.id)
        assert fetched is not None
        assert fetched.model_dump(exclude={"id"}) == data.model_dump()

    def test_ids_are_unique(self, empty_storage):
        ids = {empty_storage.create_exercise(_exercise()).id for _ in range(50)}

        assert len(ids) == 50
        assert len(empty_storage.get_exercises()) == 50

    def test_list_keeps_creation_order(self, empty_storage):
        names = ["A", "B", "C"]
        for name in names:
            empty_storage.create_exercise(_exercise(name=name))
        assert [e.name for e in empty_storage.get_exercises()] == names

    def test_filter_conjunction(self, storage):
        result = storage.get_exercises(category="stretching", is_core=True)

        assert {e.name for e in result} == {
            "Calf Stretch",
            "Plantar Fascia Stretch",
            "Towel Stretch",
            "Achilles Stretch",
        }

    def test_filter_by_difficulty(self, storage):
        result = storage.get_exercises(difficulty="intermediate")
        assert {e.name for e in result} == {"Toe Curls", "Marble Pickup"}

    def test_is_core_false_is_a_filter(self, storage):
        result = storage.get_exercises(is_core=False)
        assert len(result) == 3
        assert all(not e.is_core for e in result)

    def test_empty_string_filter_is_ignored(self, storage):
        assert len(storage.get_exercises(category="")) == 8

    def test_partial_update(self, storage):
        created = storage.create_exercise(_exercise())

        updated = storage.update_exercise(created.id, ExerciseUpdate(duration=90, tags=["ankle"]))

        assert updated.duration == 90
        assert updated.tags == ["ankle"]
        assert updated.name == created.name
        assert updated.id == created.id
        assert storage.get_exercise(created.id) == updated

    def test_empty_update_changes_nothing(self, storage):
        created = storage.create_exercise(_exercise())
        assert storage.update_exercise(created.id, ExerciseUpdate()) == created

    def test_update_missing(self, storage):
        before = len(storage.get_exercises())
        assert storage.update_exercise("nope", ExerciseUpdate(name="X")) is None
        assert len(storage.get_exercises()) == before

    def test_get_missing(self, storage):
        assert storage.get_exercise("nope") is None


class TestReminders:
    def test_create_stamps_created_at(self, storage, clock):
        reminder = storage.create_reminder(_reminder())
        assert reminder.created_at == clock.now
        assert storage.get_reminders("user-1") == [reminder]

    def test_list_is_per_user(self, storage):
        storage.create_reminder(_reminder(user_id="someone-else"))
        assert len(storage.get_reminders(DEFAULT_USER_ID)) == 4
        assert len(storage.get_reminders("someone-else")) == 1

    def test_update_keeps_identity_and_created_at(self, storage, clock):
        reminder = storage.create_reminder(_reminder())
        clock.advance(hours=3)

        updated = storage.update_reminder(reminder.id, ReminderUpdate(is_active=False, time="13:00"))

        assert updated.is_active is False
        assert updated.time == "13:00"
        assert updated.id == reminder.id
        assert updated.created_at == reminder.created_at
        assert updated.title == reminder.title

    def test_empty_update_changes_nothing(self, storage):
        reminder = storage.create_reminder(_reminder())
        assert storage.update_reminder(reminder.id, ReminderUpdate()) == reminder

    def test_update_missing(self, storage):
        assert storage.update_reminder("nope", ReminderUpdate(title="X")) is None
        assert len(storage.reminders) == 4

    def test_delete(self, storage):
        reminder = storage.create_reminder(_reminder())

        assert storage.delete_reminder(reminder.id) is True
        assert reminder not in storage.get_reminders("user-1")
        assert storage.delete_reminder(reminder.id) is False


class TestProgressEntries:
    def test_sorted_by_date_descending(self, storage):
        for date in ("2024-01-01", "2024-01-03", "2024-01-02"):
            storage.create_progress_entry(_entry(date))

        dates = [e.date for e in storage.get_progress_entries("user-1")]
        assert dates == ["2024-01-03", "2024-01-02", "2024-01-01"]

    def test_limit(self, storage):
        for date in ("2024-01-01", "2024-01-03", "2024-01-02"):
            storage.create_progress_entry(_entry(date))

        result = storage.get_progress_entries("user-1", limit=1)
        assert [e.date for e in result] == ["2024-01-03"]

    def test_defaults(self, storage, clock):
        entry = storage.create_progress_entry(_entry("2024-01-05", pain=4))

        assert entry.exercises_completed == 0
        assert entry.walking_steps == 0
        assert entry.notes is None
        assert entry.created_at == clock.now

    def test_get_by_date(self, storage):
        storage.create_progress_entry(_entry("2024-01-01"))
        target = storage.create_progress_entry(_entry("2024-01-02"))
        storage.create_progress_entry(_entry("2024-01-02", user_id="other"))

        assert storage.get_progress_entry("user-1", "2024-01-02") == target
        assert storage.get_progress_entry("user-1", "2024-01-09") is None

    def test_same_date_entries_coexist(self, storage):
        first = storage.create_progress_entry(_entry("2024-01-02", pain=6))
        second = storage.create_progress_entry(_entry("2024-01-02", pain=3))

        assert storage.get_progress_entry("user-1", "2024-01-02") == first
        assert [e.id for e in storage.get_progress_entries("user-1")] == [first.id, second.id]

    def test_partial_update(self, storage):
        entry = storage.create_progress_entry(_entry("2024-01-02", pain=6))

        updated = storage.update_progress_entry(entry.id, ProgressEntryUpdate(pain_level=3, notes="better"))

        assert updated.pain_level == 3
        assert updated.notes == "better"
        assert updated.date == "2024-01-02"
        assert updated.created_at == entry.created_at

    def test_empty_update_changes_nothing(self, storage):
        entry = storage.create_progress_entry(_entry("2024-01-02"))
        assert storage.update_progress_entry(entry.id, ProgressEntryUpdate()) == entry

    def test_update_missing(self, storage):
        assert storage.update_progress_entry("nope", ProgressEntryUpdate(pain_level=2)) is None
        assert storage.progress_entries == {}


class TestExerciseCompletions:
    def test_completed_at_is_stamped(self, storage, clock):
        completion = storage.create_exercise_completion(
            ExerciseCompletionCreate(user_id="user-1", exercise_id="ex-1", duration=55)
        )
        assert completion.completed_at == clock.now
        assert completion.duration == 55

    def test_dangling_exercise_id_is_allowed(self, storage):
        completion = storage.create_exercise_completion(
            ExerciseCompletionCreate(user_id="user-1", exercise_id="does-not-exist")
        )
        assert storage.get_exercise_completions("user-1") == [completion]

    def test_filter_by_date(self, storage, clock):
        first = storage.create_exercise_completion(ExerciseCompletionCreate(user_id="user-1", exercise_id="a"))
        clock.advance(days=1)
        second = storage.create_exercise_completion(ExerciseCompletionCreate(user_id="user-1", exercise_id="b"))

        assert storage.get_exercise_completions("user-1", date="2024-01-10") == [first]
        assert storage.get_exercise_completions("user-1", date="2024-01-11") == [second]
        assert storage.get_exercise_completions("user-1", date="2024-01-12") == []

    def test_sorted_most_recent_first(self, storage, clock):
        ids = []
        for exercise_id in ("a", "b", "c"):
            ids.append(
                storage.create_exercise_completion(
                    ExerciseCompletionCreate(user_id="user-1", exercise_id=exercise_id)
                ).id
            )
            clock.advance(minutes=5)

        assert [c.id for c in storage.get_exercise_completions("user-1")] == list(reversed(ids))


class TestUserProfiles:
    def test_create_then_get(self, storage, clock):
        data = UserProfileCreate(name="Sam", injury_date="2023-12-01", severity_level="mild", goals=["Run 5k"])
        profile = storage.create_user_profile(data)

        fetched = storage.get_user_profile(profile.id)
        assert fetched.model_dump(exclude={"id", "created_at"}) == data.model_dump()
        assert fetched.created_at == clock.now

    def test_partial_update(self, storage):
        updated = storage.update_user_profile(DEFAULT_USER_ID, UserProfileUpdate(severity_level="mild"))

        assert updated.severity_level == "mild"
        assert updated.name == "New User"
        assert updated.id == DEFAULT_USER_ID

    def test_empty_update_changes_nothing(self, storage):
        profile = storage.get_user_profile(DEFAULT_USER_ID)
        assert storage.update_user_profile(DEFAULT_USER_ID, UserProfileUpdate()) == profile

    def test_update_missing(self, storage):
        assert storage.update_user_profile("nope", UserProfileUpdate(name="X")) is None
        assert len(storage.user_profiles) == 1
