from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from typing import List, Optional

from hireme.api.deps import get_listing_service
from hireme.core.context import Caller
from hireme.core.security import get_caller
from hireme.models.db_models import Service, ServiceView
from hireme.services.listing_service import ListingService

router = APIRouter(prefix="/services")

class ServiceRequest(BaseModel):
    title: str
    description: str
    category: str
    price: float
    location: str
    availability: Optional[str] = None
    photos: List[str] = Field(default_factory=list)

@router.get("", response_model=List[ServiceView])
async def list_services(
    category: Optional[str] = None,
    location: Optional[str] = None,
    listings: ListingService = Depends(get_listing_service),
):
    return await listings.list_services(category, location)

# Must be registered before "/{service_id}"
@router.get("/mine", response_model=List[ServiceView])
async def get_my_services(
    caller: Caller = Depends(get_caller),
    listings: ListingService = Depends(get_listing_service),
):
    return await listings.get_my_services(caller)

@router.get("/{service_id}", response_model=Optional[ServiceView])
async def get_service(service_id: str, listings: ListingService = Depends(get_listing_service)):
    return await listings.get_service(service_id)

@router.post("", response_model=Service, status_code=201)
async def create_service(
    req: ServiceRequest,
    caller: Caller = Depends(get_caller),
    listings: ListingService = Depends(get_listing_service),
):
    return await listings.create_service(caller, **req.model_dump())

@router.put("/{service_id}", response_model=Service)
async def update_service(
    service_id: str,
    req: ServiceRequest,
    caller: Caller = Depends(get_caller),
    listings: ListingService = Depends(get_listing_service),
):
    return await listings.update_service(caller, service_id, **req.model_dump())

@router.delete("/{service_id}", status_code=204)
async def delete_service(
    service_id: str,
    caller: Caller = Depends(get_caller),
    listings: ListingService = Depends(get_listing_service),
):
    await listings.delete_service(caller, service_id)
