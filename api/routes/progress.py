import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, status

from api.deps import StorageDep, UserIdDep, optional_query, today_utc
from core.config import settings
from schemas.progress import (
    DATE_PATTERN,
    DailySummaryResponse,
    DateQuery,
    Limit,
    ProgressEntry,
    ProgressEntryCreate,
    ProgressEntryUpdate,
)
from services.progress_service import build_daily_summary

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/progress", response_model=list[ProgressEntry])
def list_progress(storage: StorageDep, user_id: UserIdDep, limit: str | None = None):
    return storage.get_progress_entries(user_id, limit=optional_query("limit", limit, Limit))


@router.post("/progress", response_model=ProgressEntry, status_code=status.HTTP_201_CREATED)
def create_progress(payload: ProgressEntryCreate, storage: StorageDep):
    payload.user_id = payload.user_id or settings.default_user_id
    return storage.create_progress_entry(payload)


@router.get("/progress/{date}", response_model=ProgressEntry)
def get_progress_for_date(
    date: Annotated[str, Path(pattern=DATE_PATTERN)],
    storage: StorageDep,
    user_id: UserIdDep,
):
    entry = storage.get_progress_entry(user_id, date)
    if not entry:
        logger.info("No progress entry for user %s on %s", user_id, date)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Progress entry not found.")
    return entry


@router.put("/progress/{entry_id}", response_model=ProgressEntry)
def update_progress(entry_id: str, payload: ProgressEntryUpdate, storage: StorageDep):
    entry = storage.update_progress_entry(entry_id, payload)
    if not entry:
        logger.info("Progress entry %s not found", entry_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Progress entry not found.")
    return entry


@router.get("/summary", response_model=DailySummaryResponse)
def daily_summary(
    storage: StorageDep,
    user_id: UserIdDep,
    date: str | None = None,
):
    today = optional_query("date", date, DateQuery) or today_utc()
    return build_daily_summary(storage, user_id, today=today)
