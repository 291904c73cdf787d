from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import List, Optional

from hireme.api.deps import get_booking_service, get_message_service
from hireme.core.context import Caller
from hireme.core.security import get_caller
from hireme.models.db_models import Booking, BookingView, Message, MessageView
from hireme.services.booking_service import BookingService
from hireme.services.message_service import MessageService

router = APIRouter(prefix="/bookings")

class CreateBookingRequest(BaseModel):
    service_id: str
    requested_date: str
    requested_time: str
    message: Optional[str] = None

class UpdateStatusRequest(BaseModel):
    # checked against accepted/declined by the service
    status: str

class SendMessageRequest(BaseModel):
    content: str

@router.post("", response_model=Booking, status_code=201)
async def create_booking(
    req: CreateBookingRequest,
    caller: Caller = Depends(get_caller),
    bookings: BookingService = Depends(get_booking_service),
):
    return await bookings.create_booking(
        caller, req.service_id, req.requested_date, req.requested_time, req.message
    )

@router.get("", response_model=List[BookingView])
async def get_my_bookings(
    caller: Caller = Depends(get_caller),
    bookings: BookingService = Depends(get_booking_service),
):
    return await bookings.get_my_bookings(caller)

@router.get("/{booking_id}", response_model=BookingView)
async def get_booking(
    booking_id: str,
    caller: Caller = Depends(get_caller),
    bookings: BookingService = Depends(get_booking_service),
):
    return await bookings.get_booking(caller, booking_id)

@router.patch("/{booking_id}/status", response_model=Booking)
async def update_booking_status(
    booking_id: str,
    req: UpdateStatusRequest,
    caller: Caller = Depends(get_caller),
    bookings: BookingService = Depends(get_booking_service),
):
    return await bookings.update_booking_status(caller, booking_id, req.status)

@router.get("/{booking_id}/messages", response_model=List[MessageView])
async def get_messages(
    booking_id: str,
    caller: Caller = Depends(get_caller),
    messages: MessageService = Depends(get_message_service),
):
    return await messages.get_messages(caller, booking_id)

@router.post("/{booking_id}/messages", response_model=Message, status_code=201)
async def send_message(
    booking_id: str,
    req: SendMessageRequest,
    caller: Caller = Depends(get_caller),
    messages: MessageService = Depends(get_message_service),
):
    return await messages.send_message(caller, booking_id, req.content)
