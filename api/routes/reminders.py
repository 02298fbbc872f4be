import logging

from fastapi import APIRouter, HTTPException, Response, status

from api.deps import StorageDep, UserIdDep
from core.config import settings
from schemas.reminder import Reminder, ReminderCreate, ReminderUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/reminders", response_model=list[Reminder])
def list_reminders(storage: StorageDep, user_id: UserIdDep):
    return storage.get_reminders(user_id)


@router.post("/reminders", response_model=Reminder, status_code=status.HTTP_201_CREATED)
def create_reminder(payload: ReminderCreate, storage: StorageDep):
    payload.user_id = payload.user_id or settings.default_user_id
    return storage.create_reminder(payload)


@router.put("/reminders/{reminder_id}", response_model=Reminder)
def update_reminder(reminder_id: str, payload: ReminderUpdate, storage: StorageDep):
    reminder = storage.update_reminder(reminder_id, payload)
    if not reminder:
        logger.info("Reminder %s not found", reminder_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reminder not found.")
    return reminder


@router.delete("/reminders/{reminder_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_reminder(reminder_id: str, storage: StorageDep):
    if not storage.delete_reminder(reminder_id):
        logger.info("Reminder %s not found", reminder_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reminder not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
