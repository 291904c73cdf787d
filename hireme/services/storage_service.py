import asyncio
from typing import Iterable, List, Optional
from uuid import uuid4

from hireme.core.config import settings
from hireme.core.context import Caller
from hireme.core.logger import logger
from hireme.models.db_models import UploadTarget
from hireme.services.db_service import DBService, db_service


class StorageService:
    """
    Photo storage on a Supabase Storage bucket.

    A photo reference is the object path inside the bucket. Clients upload to a
    signed upload URL and then hand the reference back in profile or service
    writes; reads resolve references to short-lived signed URLs.
    """

    def __init__(self, db: DBService = None, bucket: str = None):
        self.db = db or db_service
        self.bucket = bucket or settings.STORAGE_BUCKET

    async def generate_upload_url(self, caller: Caller) -> UploadTarget:
        user_id = caller.require_user()
        path = f"{user_id}/{uuid4().hex}"

        client = await self.db.get_client()
        result = await client.storage.from_(self.bucket).create_signed_upload_url(path)
        upload_url = result.get("signed_url") or result.get("signedUrl")
        logger.info(f"📤 Upload target issued for user {user_id}: {path}")
        return UploadTarget(upload_url=upload_url, storage_id=path)

    async def get_url(self, reference: Optional[str]) -> Optional[str]:
        """Signed URL for a stored reference, or None if it cannot be resolved."""
        if not reference:
            return None

        client = await self.db.get_client()
        try:
            result = await client.storage.from_(self.bucket).create_signed_url(reference, settings.SIGNED_URL_TTL)
        except Exception as e:
            logger.warning(f"⚠️ Could not resolve photo '{reference}': {e}")
            return None
        return result.get("signedURL") or result.get("signedUrl")

    async def get_urls(self, references: Iterable[str]) -> List[str]:
        """Resolve references in order, dropping the ones that do not resolve."""
        urls = await asyncio.gather(*(self.get_url(ref) for ref in references))
        return [url for url in urls if url]


storage_service = StorageService()
