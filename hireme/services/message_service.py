import asyncio
from typing import List

from hireme.core.context import Caller
from hireme.core.errors import Forbidden, require_fields
from hireme.core.logger import logger
from hireme.models.db_models import Booking, Message, MessageView
from hireme.models.schema import BOOKINGS, MESSAGES
from hireme.services.db_service import db_service
from hireme.services.profile_service import ProfileService

UNKNOWN_SENDER = "Unknown"


class MessageService:
    """Chat attached to a booking, open to its customer and provider only."""

    def __init__(self, db=None, profiles: ProfileService = None):
        self.db = db or db_service
        self.profiles = profiles or ProfileService(self.db)

    async def _check_party(self, booking_id: str, user_id: str, action: str) -> Booking:
        # a missing booking is reported the same way as a foreign one
        record = await self.db.get(BOOKINGS, booking_id)
        booking = Booking(**record) if record else None
        if not booking or user_id not in (booking.customer_id, booking.provider_id):
            raise Forbidden(f"Not authorized to {action} messages")
        return booking

    async def get_messages(self, caller: Caller, booking_id: str) -> List[MessageView]:
        if not caller.is_authenticated:
            return []
        user_id = caller.user_id
        await self._check_party(booking_id, user_id, "view")

        messages = [Message(**record) for record in await self.db.find(MESSAGES, 'booking_id', booking_id)]
        senders = await asyncio.gather(*(self.profiles.find_profile(m.sender_id) for m in messages))

        return [
            MessageView(
                **message.model_dump(),
                sender_name=sender.name if sender else UNKNOWN_SENDER,
                is_own_message=message.sender_id == user_id,
            )
            for message, sender in zip(messages, senders)
        ]

    async def send_message(self, caller: Caller, booking_id: str, content: str) -> Message:
        user_id = caller.require_user()
        require_fields(content=content)
        booking = await self._check_party(booking_id, user_id, "send")

        record = await self.db.insert(MESSAGES, {
            'booking_id': booking.id,
            'sender_id': user_id,
            'content': content,
        })
        logger.info(f"💬 Message sent in booking {booking.id} by {user_id}")
        return Message(**record)
