import logging

from fastapi import APIRouter, HTTPException, status

from api.deps import StorageDep
from schemas.profile import UserProfile, UserProfileCreate, UserProfileUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/profile/{profile_id}", response_model=UserProfile)
def get_profile(profile_id: str, storage: StorageDep):
    profile = storage.get_user_profile(profile_id)
    if not profile:
        logger.info("Profile %s not found", profile_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found.")
    return profile


@router.post("/profile", response_model=UserProfile, status_code=status.HTTP_201_CREATED)
def create_profile(payload: UserProfileCreate, storage: StorageDep):
    return storage.create_user_profile(payload)


@router.put("/profile/{profile_id}", response_model=UserProfile)
def update_profile(profile_id: str, payload: UserProfileUpdate, storage: StorageDep):
    profile = storage.update_user_profile(profile_id, payload)
    if not profile:
        logger.info("Profile %s not found", profile_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found.")
    return profile
