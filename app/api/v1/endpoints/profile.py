"""Display name endpoints."""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_profile_store
from app.schemas.profile import ProfileResponse, ProfileUpdate
from app.services.profile_service import ProfileService
from app.workout.stores import ProfileStore

router = APIRouter()


@router.get("", summary="Get the display name.", response_model=ProfileResponse, )
def get_profile(store: ProfileStore = Depends(get_profile_store)):
    return ProfileService(store).get()


@router.put("", summary="Set the display name.", response_model=ProfileResponse, )
def update_profile(data: ProfileUpdate, store: ProfileStore = Depends(get_profile_store)):
    return ProfileService(store).update(data)
