from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from core.config import settings
from schemas.exercise import ExerciseCreate
from schemas.profile import UserProfileCreate
from schemas.reminder import ReminderCreate

if TYPE_CHECKING:
    from database.storage import MemStorage

logger = logging.getLogger(__name__)

EVERY_DAY = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
WEEKDAYS = EVERY_DAY[:5]

_IMAGE = "https://images.unsplash.com/{photo}?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=400"

# Starter library for plantar fasciitis recovery.
SEED_EXERCISES = [
    dict(
        name="Calf Stretch",
        description="Stretch your calf muscles to relieve tension on the plantar fascia",
        instructions=(
            "Stand arm's length from a wall. Place your right foot behind your left foot. "
            "Slowly bend your left leg forward, keeping your right knee straight and your right heel "
            "on the ground. Hold the stretch for 15-30 seconds and switch sides."
        ),
        image_url=_IMAGE.format(photo="photo-1571019613454-1cb2f99b2d8b"),
        video_url="https://example.com/calf-stretch-video",
        category="stretching",
        duration=60,
        difficulty="beginner",
        tags=["calf", "wall", "morning"],
        is_core=True,
    ),
    dict(
        name="Plantar Fascia Stretch",
        description="Direct stretch for the plantar fascia tissue",
        instructions=(
            "Sit with your affected foot across your opposite thigh. Pull your toes back toward your "
            "shin until you feel a stretch in your arch. Hold for 15-30 seconds and repeat 2-4 times."
        ),
        image_url=_IMAGE.format(photo="photo-1544367567-0f2fcb009e0b"),
        category="stretching",
        duration=90,
        difficulty="beginner",
        tags=["arch", "sitting", "direct"],
        is_core=True,
    ),
    dict(
        name="Towel Stretch",
        description="Gentle stretch using a towel for assistance",
        instructions=(
            "Sit on the floor with your legs straight. Place a towel around the ball of your foot and "
            "pull the towel toward you while keeping your knee straight. Hold for 15-30 seconds."
        ),
        image_url=_IMAGE.format(photo="photo-1506629905920-0c1bbaa3d7c1"),
        category="stretching",
        duration=45,
        difficulty="beginner",
        tags=["towel", "morning", "seated"],
        is_core=True,
    ),
    dict(
        name="Rolling Stretch",
        description="Use a tennis ball or frozen water bottle to massage the plantar fascia",
        instructions=(
            "While sitting, roll a tennis ball or frozen water bottle under your foot from heel to toes. "
            "Apply gentle pressure and roll for 1-2 minutes."
        ),
        image_url=_IMAGE.format(photo="photo-1594736797933-d0501ba2fe65"),
        category="massage",
        duration=120,
        difficulty="beginner",
        tags=["tennis ball", "ice", "massage"],
        is_core=True,
    ),
    dict(
        name="Toe Curls",
        description="Strengthen the muscles in your feet and toes",
        instructions=(
            "Sit in a chair and place a small towel on the floor in front of you. Use your toes to "
            "scrunch up the towel and pull it toward you. Repeat 10-15 times."
        ),
        image_url=_IMAGE.format(photo="photo-1577221084712-45b0445d2b00"),
        category="strengthening",
        duration=180,
        difficulty="intermediate",
        tags=["toes", "towel", "strength"],
        is_core=False,
    ),
    dict(
        name="Marble Pickup",
        description="Improve toe strength and dexterity",
        instructions=(
            "Sit in a chair and place 10-20 marbles on the floor in front of you. Use your toes to pick "
            "up each marble and place it in a bowl. Repeat with both feet."
        ),
        image_url=_IMAGE.format(photo="photo-1581056771107-24ca5f033842"),
        category="strengthening",
        duration=300,
        difficulty="intermediate",
        tags=["marbles", "dexterity", "fine motor"],
        is_core=False,
    ),
    dict(
        name="Heel Raises",
        description="Strengthen your calf muscles",
        instructions=(
            "Stand with your feet hip-width apart. Slowly rise up onto your toes, hold for 2-3 seconds, "
            "then lower back down. Repeat 10-15 times."
        ),
        image_url=_IMAGE.format(photo="photo-1518459384694-1251681c6ee5"),
        category="strengthening",
        duration=120,
        difficulty="beginner",
        tags=["calf", "standing", "balance"],
        is_core=False,
    ),
    dict(
        name="Achilles Stretch",
        description="Stretch the Achilles tendon to reduce plantar fascia tension",
        instructions=(
            "Stand facing a wall with hands flat against it. Step your right foot back and press your "
            "heel down. Bend your front knee and lean forward. Hold for 15-30 seconds and switch sides."
        ),
        image_url=_IMAGE.format(photo="photo-1567401893414-76b7b1e5a7a5"),
        category="stretching",
        duration=60,
        difficulty="beginner",
        tags=["achilles", "wall", "calf"],
        is_core=True,
    ),
]

# (type, title, message, time, days)
SEED_REMINDERS = [
    (
        "stretch",
        "Morning Stretch Session",
        "Start your day with gentle stretches to reduce morning stiffness",
        "08:00",
        EVERY_DAY,
    ),
    (
        "stretch",
        "Evening Recovery",
        "End your day with relaxing stretches for better recovery",
        "19:00",
        EVERY_DAY,
    ),
    ("walk", "Gentle Walk Reminder", "Take a gentle walk to promote healing and circulation", "14:00", WEEKDAYS),
    (
        "check-in",
        "Daily Progress Check",
        "How are you feeling today? Log your pain level and progress",
        "20:00",
        EVERY_DAY,
    ),
]


def seed_default_data(storage: MemStorage, user_id: str | None = None) -> None:
    user_id = user_id or settings.default_user_id

    for data in SEED_EXERCISES:
        storage.create_exercise(ExerciseCreate(**data))

    for kind, title, message, time, days in SEED_REMINDERS:
        storage.create_reminder(
            ReminderCreate(
                user_id=user_id,
                type=kind,
                title=title,
                message=message,
                time=time,
                days=list(days),
                is_active=True,
            )
        )

    # The default profile's id doubles as the user id.
    storage.create_user_profile(
        UserProfileCreate(
            name="New User",
            injury_date=None,
            severity_level="moderate",
            goals=["Reduce morning pain", "Return to normal activities", "Prevent re-injury"],
            preferred_reminder_times=["08:00", "14:00", "19:00", "20:00"],
        ),
        profile_id=user_id,
    )

    logger.info(
        "Seeded %d exercises, %d reminders and profile %s",
        len(SEED_EXERCISES),
        len(SEED_REMINDERS),
        user_id,
    )
