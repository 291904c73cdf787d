from fastapi import APIRouter, Depends

from hireme.api.deps import get_storage
from hireme.core.config_loader import get_marketplace_config, get_categories, get_max_photos
from hireme.core.context import Caller
from hireme.core.security import get_caller
from hireme.models.db_models import Catalog, UploadTarget
from hireme.services.storage_service import StorageService

router = APIRouter()

@router.get("/categories", response_model=Catalog)
async def list_categories():
    """Suggested categories for new services. Category stays free text."""
    config = get_marketplace_config()
    return Catalog(categories=get_categories(config), max_service_photos=get_max_photos(config))

@router.post("/storage/upload-url", response_model=UploadTarget)
async def generate_upload_url(
    caller: Caller = Depends(get_caller),
    storage: StorageService = Depends(get_storage),
):
    return await storage.generate_upload_url(caller)
