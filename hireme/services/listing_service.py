import asyncio
import math
from typing import Dict, List, Optional

from hireme.core.config_loader import get_marketplace_config, get_max_photos
from hireme.core.context import Caller
from hireme.core.errors import Forbidden, NotFound, ValidationFailed, require_fields
from hireme.core.logger import logger
from hireme.models.db_models import Service, ServiceView
from hireme.models.schema import SERVICES
from hireme.services.db_service import db_service
from hireme.services.profile_service import ProfileService
from hireme.services.storage_service import storage_service

UNKNOWN_PROVIDER = "Unknown Provider"


class ListingService:
    def __init__(self, db=None, storage=None, profiles: ProfileService = None):
        self.db = db or db_service
        self.storage = storage or storage_service
        self.profiles = profiles or ProfileService(self.db, self.storage)
        self.config = get_marketplace_config()

    def _validate(self, title, description, category, price, location, photos) -> None:
        require_fields(title=title, description=description, category=category, location=location)
        if price is None or not math.isfinite(price) or price <= 0:
            raise ValidationFailed("Price must be a positive number")
        max_photos = get_max_photos(self.config)
        if len(photos) > max_photos:
            raise ValidationFailed(f"A service can have at most {max_photos} photos")

    async def _get_owned(self, caller: Caller, service_id: str) -> Service:
        user_id = caller.require_user()
        record = await self.db.get(SERVICES, service_id)
        if not record:
            raise NotFound("Service not found")
        service = Service(**record)
        if service.provider_id != user_id:
            raise Forbidden("Not authorized to modify this service")
        return service

    async def _with_provider_name(self, service: Service) -> ServiceView:
        provider, photo_urls = await asyncio.gather(
            self.profiles.find_profile(service.provider_id),
            self.storage.get_urls(service.photos),
        )
        return ServiceView(
            **service.model_dump(),
            provider_name=provider.name if provider else UNKNOWN_PROVIDER,
            photo_urls=photo_urls,
        )

    async def list_services(self, category: Optional[str] = None, location: Optional[str] = None) -> List[ServiceView]:
        """
        Active services, narrowed by at most one filter.

        Category takes precedence over location; when both are given the
        location is ignored.
        """
        if category:
            records = await self.db.find(SERVICES, 'category', category, {'is_active': True})
        elif location:
            records = await self.db.find(SERVICES, 'location', location, {'is_active': True})
        else:
            records = await self.db.find(SERVICES, 'is_active', True)

        return list(await asyncio.gather(
            *(self._with_provider_name(Service(**record)) for record in records)
        ))

    async def get_service(self, service_id: str) -> Optional[ServiceView]:
        record = await self.db.get(SERVICES, service_id)
        if not record:
            return None
        service = Service(**record)

        provider, photo_urls = await asyncio.gather(
            self.profiles.find_profile(service.provider_id),
            self.storage.get_urls(service.photos),
        )
        provider_view = await self.profiles.to_view(provider) if provider else None
        return ServiceView(**service.model_dump(), provider=provider_view, photo_urls=photo_urls)

    async def get_my_services(self, caller: Caller) -> List[ServiceView]:
        if not caller.is_authenticated:
            return []

        records = await self.db.find(SERVICES, 'provider_id', caller.user_id)

        async def resolve(service: Service) -> ServiceView:
            photo_urls = await self.storage.get_urls(service.photos)
            return ServiceView(**service.model_dump(), photo_urls=photo_urls)

        return list(await asyncio.gather(*(resolve(Service(**record)) for record in records)))

    async def create_service(
        self,
        caller: Caller,
        title: str,
        description: str,
        category: str,
        price: float,
        location: str,
        availability: Optional[str] = None,
        photos: Optional[List[str]] = None,
    ) -> Service:
        user_id = caller.require_user()
        photos = list(photos or [])
        self._validate(title, description, category, price, location, photos)

        profile = await self.profiles.find_profile(user_id)
        if not profile or not profile.is_provider:
            raise Forbidden("Only providers can create services")

        record = await self.db.insert(SERVICES, {
            'provider_id': user_id,
            'title': title,
            'description': description,
            'category': category,
            'price': price,
            'location': location,
            'availability': availability,
            'photos': photos,
            'is_active': True,
        })
        logger.info(f"🆕 Service '{title}' created by provider {user_id}")
        return Service(**record)

    async def update_service(
        self,
        caller: Caller,
        service_id: str,
        title: str,
        description: str,
        category: str,
        price: float,
        location: str,
        availability: Optional[str] = None,
        photos: Optional[List[str]] = None,
    ) -> Service:
        """Full overwrite of the editable fields. The active flag is left as is."""
        photos = list(photos or [])
        service = await self._get_owned(caller, service_id)
        self._validate(title, description, category, price, location, photos)

        fields: Dict[str, object] = {
            'title': title,
            'description': description,
            'category': category,
            'price': price,
            'location': location,
            'availability': availability,
            'photos': photos,
        }
        record = await self.db.patch(SERVICES, service.id, fields)
        logger.info(f"✏️ Service {service.id} updated")
        return Service(**record)

    async def delete_service(self, caller: Caller, service_id: str) -> None:
        service = await self._get_owned(caller, service_id)
        await self.db.patch(SERVICES, service.id, {'is_active': False})
        logger.info(f"🗑️ Service {service.id} deactivated")
