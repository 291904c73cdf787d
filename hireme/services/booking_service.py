import asyncio
from typing import List, Optional, get_args

from hireme.core.context import Caller
from hireme.core.errors import Forbidden, NotFound, ValidationFailed, require_fields
from hireme.core.logger import logger
from hireme.models.db_models import Booking, BookingView, Decision, Service
from hireme.models.schema import BOOKINGS, SERVICES
from hireme.services.db_service import db_service
from hireme.services.profile_service import ProfileService

DECISIONS = get_args(Decision)


class BookingService:
    def __init__(self, db=None, profiles: ProfileService = None):
        self.db = db or db_service
        self.profiles = profiles or ProfileService(self.db)

    async def _to_view(self, booking: Booking, user_id: str) -> BookingView:
        service_record, customer, provider = await asyncio.gather(
            self.db.get(SERVICES, booking.service_id),
            self.profiles.find_profile(booking.customer_id),
            self.profiles.find_profile(booking.provider_id),
        )
        return BookingView(
            **booking.model_dump(),
            service=Service(**service_record) if service_record else None,
            customer=customer,
            provider=provider,
            is_customer=booking.customer_id == user_id,
            is_provider=booking.provider_id == user_id,
        )

    async def create_booking(
        self,
        caller: Caller,
        service_id: str,
        requested_date: str,
        requested_time: str,
        message: Optional[str] = None,
    ) -> Booking:
        """
        Request a booking for a service.

        The provider is copied from the service now; later changes to the
        service do not touch existing bookings.
        """
        user_id = caller.require_user()
        require_fields(requested_date=requested_date, requested_time=requested_time)

        service_record = await self.db.get(SERVICES, service_id)
        if not service_record:
            raise NotFound("Service not found")
        service = Service(**service_record)

        if service.provider_id == user_id:
            raise Forbidden("Cannot book your own service")

        record = await self.db.insert(BOOKINGS, {
            'service_id': service.id,
            'customer_id': user_id,
            'provider_id': service.provider_id,
            'requested_date': requested_date,
            'requested_time': requested_time,
            'message': message,
            'status': 'pending',
        })
        logger.info(f"📥 Booking requested: service {service.id}, customer {user_id}, {requested_date} {requested_time}")
        return Booking(**record)

    async def get_my_bookings(self, caller: Caller) -> List[BookingView]:
        """Bookings where the caller is the customer, then those where they are the provider."""
        if not caller.is_authenticated:
            return []
        user_id = caller.user_id

        as_customer, as_provider = await asyncio.gather(
            self.db.find(BOOKINGS, 'customer_id', user_id),
            self.db.find(BOOKINGS, 'provider_id', user_id),
        )
        bookings = [Booking(**record) for record in as_customer + as_provider]
        return list(await asyncio.gather(*(self._to_view(b, user_id) for b in bookings)))

    async def get_booking(self, caller: Caller, booking_id: str) -> BookingView:
        user_id = caller.require_user()
        record = await self.db.get(BOOKINGS, booking_id)
        if not record:
            raise NotFound("Booking not found")
        booking = Booking(**record)
        if user_id not in (booking.customer_id, booking.provider_id):
            raise Forbidden("Not authorized to view this booking")
        return await self._to_view(booking, user_id)

    async def update_booking_status(self, caller: Caller, booking_id: str, status: str) -> Booking:
        """
        Accept or decline a booking. Only its provider may do this.

        Decided bookings can be decided again; there is no terminal state.
        """
        user_id = caller.require_user()
        if status not in DECISIONS:
            raise ValidationFailed(f"Status must be one of: {', '.join(DECISIONS)}")

        record = await self.db.get(BOOKINGS, booking_id)
        if not record:
            raise NotFound("Booking not found")
        booking = Booking(**record)
        if booking.provider_id != user_id:
            raise Forbidden("Not authorized to update this booking")

        updated = await self.db.patch(BOOKINGS, booking.id, {'status': status})
        logger.info(f"📌 Booking {booking.id}: {booking.status} -> {status}")
        return Booking(**updated)
