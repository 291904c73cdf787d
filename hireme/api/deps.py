from fastapi import Depends

from hireme.services.db_service import DBService, db_service
from hireme.services.storage_service import StorageService, storage_service
from hireme.services.profile_service import ProfileService
from hireme.services.listing_service import ListingService
from hireme.services.booking_service import BookingService
from hireme.services.message_service import MessageService


def get_db() -> DBService:
    return db_service


def get_storage() -> StorageService:
    return storage_service


def get_profile_service(db=Depends(get_db), storage=Depends(get_storage)) -> ProfileService:
    return ProfileService(db, storage)


def get_listing_service(
    db=Depends(get_db),
    storage=Depends(get_storage),
    profiles: ProfileService = Depends(get_profile_service),
) -> ListingService:
    return ListingService(db, storage, profiles)


def get_booking_service(db=Depends(get_db), profiles: ProfileService = Depends(get_profile_service)) -> BookingService:
    return BookingService(db, profiles)


def get_message_service(db=Depends(get_db), profiles: ProfileService = Depends(get_profile_service)) -> MessageService:
    return MessageService(db, profiles)
