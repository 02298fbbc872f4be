from fastapi import APIRouter, status

from api.deps import StorageDep, UserIdDep, optional_query
from core.config import settings
from schemas.completion import ExerciseCompletion, ExerciseCompletionCreate
from schemas.progress import DateQuery

router = APIRouter()


@router.post("/exercise-completions", response_model=ExerciseCompletion, status_code=status.HTTP_201_CREATED)
def create_completion(payload: ExerciseCompletionCreate, storage: StorageDep):
    # exerciseId is stored as given; completions may outlive or predate the exercise record.
    payload.user_id = payload.user_id or settings.default_user_id
    return storage.create_exercise_completion(payload)


@router.get("/exercise-completions", response_model=list[ExerciseCompletion])
def list_completions(
    storage: StorageDep,
    user_id: UserIdDep,
    date: str | None = None,
):
    return storage.get_exercise_completions(user_id, date=optional_query("date", date, DateQuery))
