from typing import Optional

from hireme.core.context import Caller
from hireme.core.errors import AlreadyExists, NotFound, require_fields
from hireme.core.logger import logger
from hireme.models.db_models import Profile, ProfileView
from hireme.models.schema import PROFILES
from hireme.services.db_service import db_service
from hireme.services.storage_service import storage_service


class ProfileService:
    def __init__(self, db=None, storage=None):
        self.db = db or db_service
        self.storage = storage or storage_service

    async def find_profile(self, user_id: str) -> Optional[Profile]:
        """Profile record owned by ``user_id``, without photo resolution."""
        record = await self.db.find_one(PROFILES, 'user_id', user_id)
        if not record:
            return None
        return Profile(**record)

    async def to_view(self, profile: Profile) -> ProfileView:
        photo_url = await self.storage.get_url(profile.profile_photo)
        return ProfileView(**profile.model_dump(), profile_photo_url=photo_url)

    async def get_current_profile(self, caller: Caller) -> Optional[ProfileView]:
        if not caller.is_authenticated:
            return None
        return await self.get_profile_by_user_id(caller.user_id)

    async def get_profile_by_user_id(self, user_id: str) -> Optional[ProfileView]:
        profile = await self.find_profile(user_id)
        if not profile:
            return None
        return await self.to_view(profile)

    async def create_profile(
        self,
        caller: Caller,
        name: str,
        bio: Optional[str] = None,
        location: Optional[str] = None,
        contact_info: Optional[str] = None,
        is_provider: bool = False,
    ) -> Profile:
        """
        Create the caller's profile.

        The existence check and the insert are two separate calls, so two
        concurrent creations for one user can both pass the check. The unique
        index on profiles.user_id makes the platform reject the second insert,
        which surfaces as AlreadyExists.
        """
        user_id = caller.require_user()
        require_fields(name=name)

        if await self.find_profile(user_id):
            raise AlreadyExists("Profile already exists")

        record = await self.db.insert(PROFILES, {
            'user_id': user_id,
            'name': name,
            'bio': bio,
            'location': location,
            'contact_info': contact_info,
            'is_provider': is_provider,
        })
        logger.info(f"🆕 Profile created for user {user_id} (provider={is_provider})")
        return Profile(**record)

    async def update_profile(
        self,
        caller: Caller,
        name: str,
        bio: Optional[str] = None,
        location: Optional[str] = None,
        contact_info: Optional[str] = None,
        profile_photo: Optional[str] = None,
    ) -> Profile:
        """Overwrite all editable fields; omitted optionals are cleared."""
        user_id = caller.require_user()
        require_fields(name=name)

        profile = await self.find_profile(user_id)
        if not profile:
            raise NotFound("Profile not found")

        record = await self.db.patch(PROFILES, profile.id, {
            'name': name,
            'bio': bio,
            'location': location,
            'contact_info': contact_info,
            'profile_photo': profile_photo,
        })
        logger.info(f"✏️ Profile {profile.id} updated")
        return Profile(**record)
