import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from api.deps import StorageDep, optional_query
from schemas.exercise import Category, Difficulty, Exercise, ExerciseCreate, ExerciseUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/exercises", response_model=list[Exercise])
def list_exercises(
    storage: StorageDep,
    category: str | None = None,
    difficulty: str | None = None,
    is_core: Annotated[str | None, Query(alias="isCore")] = None,
):
    return storage.get_exercises(
        category=optional_query("category", category, Category),
        difficulty=optional_query("difficulty", difficulty, Difficulty),
        is_core=optional_query("isCore", is_core, bool),
    )


@router.get("/exercises/{exercise_id}", response_model=Exercise)
def get_exercise(exercise_id: str, storage: StorageDep):
    exercise = storage.get_exercise(exercise_id)
    if not exercise:
        logger.info("Exercise %s not found", exercise_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found.")
    return exercise


@router.post("/exercises", response_model=Exercise, status_code=status.HTTP_201_CREATED)
def create_exercise(payload: ExerciseCreate, storage: StorageDep):
    return storage.create_exercise(payload)


@router.put("/exercises/{exercise_id}", response_model=Exercise)
def update_exercise(exercise_id: str, payload: ExerciseUpdate, storage: StorageDep):
    exercise = storage.update_exercise(exercise_id, payload)
    if not exercise:
        logger.info("Exercise %s not found", exercise_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found.")
    return exercise
