from typing import Optional, List, Literal
from datetime import datetime
from pydantic import BaseModel, Field

BookingStatus = Literal["pending", "accepted", "declined"]
Decision = Literal["accepted", "declined"]


class Profile(BaseModel):
    id: str
    user_id: str
    name: str
    bio: Optional[str] = None
    location: Optional[str] = None
    contact_info: Optional[str] = None
    profile_photo: Optional[str] = None # storage reference
    is_provider: bool = False
    created_at: Optional[datetime] = None


class ProfileView(Profile):
    profile_photo_url: Optional[str] = None


class Service(BaseModel):
    id: str
    provider_id: str
    title: str
    description: str
    category: str
    price: float
    location: str
    availability: Optional[str] = None
    photos: List[str] = Field(default_factory=list)
    is_active: bool = True
    created_at: Optional[datetime] = None


class ServiceView(Service):
    # listings carry provider_name, the detail view carries the full provider
    provider_name: Optional[str] = None
    provider: Optional[ProfileView] = None
    photo_urls: List[str] = Field(default_factory=list)


class Booking(BaseModel):
    id: str
    service_id: str
    customer_id: str
    provider_id: str
    requested_date: str
    requested_time: str
    message: Optional[str] = None
    status: BookingStatus = "pending"
    created_at: Optional[datetime] = None


class BookingView(Booking):
    service: Optional[Service] = None
    customer: Optional[Profile] = None
    provider: Optional[Profile] = None
    is_customer: bool = False
    is_provider: bool = False


class Message(BaseModel):
    id: str
    booking_id: str
    sender_id: str
    content: str
    created_at: Optional[datetime] = None


class MessageView(Message):
    sender_name: str
    is_own_message: bool


class UploadTarget(BaseModel):
    upload_url: str
    storage_id: str


class Catalog(BaseModel):
    categories: List[str]
    max_service_photos: int
