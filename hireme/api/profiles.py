from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import Optional

from hireme.api.deps import get_profile_service
from hireme.core.context import Caller
from hireme.core.security import get_caller
from hireme.models.db_models import Profile, ProfileView
from hireme.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles")

class CreateProfileRequest(BaseModel):
    name: str
    bio: Optional[str] = None
    location: Optional[str] = None
    contact_info: Optional[str] = None
    is_provider: bool

class UpdateProfileRequest(BaseModel):
    name: str
    bio: Optional[str] = None
    location: Optional[str] = None
    contact_info: Optional[str] = None
    profile_photo: Optional[str] = None

@router.get("/me", response_model=Optional[ProfileView])
async def get_current_profile(
    caller: Caller = Depends(get_caller),
    profiles: ProfileService = Depends(get_profile_service),
):
    return await profiles.get_current_profile(caller)

@router.post("", response_model=Profile, status_code=201)
async def create_profile(
    req: CreateProfileRequest,
    caller: Caller = Depends(get_caller),
    profiles: ProfileService = Depends(get_profile_service),
):
    return await profiles.create_profile(
        caller, req.name, req.bio, req.location, req.contact_info, req.is_provider
    )

@router.put("/me", response_model=Profile)
async def update_profile(
    req: UpdateProfileRequest,
    caller: Caller = Depends(get_caller),
    profiles: ProfileService = Depends(get_profile_service),
):
    return await profiles.update_profile(
        caller, req.name, req.bio, req.location, req.contact_info, req.profile_photo
    )

@router.get("/{user_id}", response_model=Optional[ProfileView])
async def get_profile_by_user_id(user_id: str, profiles: ProfileService = Depends(get_profile_service)):
    return await profiles.get_profile_by_user_id(user_id)
