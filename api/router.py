from fastapi import APIRouter

from api.routes import completions, exercises, profile, progress, reminders

api_router = APIRouter()

api_router.include_router(exercises.router, tags=["exercises"])
api_router.include_router(reminders.router, tags=["reminders"])
api_router.include_router(progress.router, tags=["progress"])
api_router.include_router(completions.router, tags=["exercise-completions"])
api_router.include_router(profile.router, tags=["profile"])
