from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError
from supabase import create_async_client, AsyncClient

from hireme.core.config import settings
from hireme.core.errors import AlreadyExists, BackendUnavailable
from hireme.core.logger import logger
from hireme.models.schema import check_index

# Postgres error codes surfaced by PostgREST
UNIQUE_VIOLATION = "23505"
INVALID_TEXT_REPRESENTATION = "22P02"


class DBService:
    """Record store backed by Supabase (PostgREST).

    Offers insert, patch, point-get by id and index-scoped equality queries.
    Nothing here spans more than one record; callers own authorization.
    """
    _instance = None
    _client: AsyncClient = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(DBService, cls).__new__(cls)
            # Async client is created lazily on first use
        return cls._instance

    async def get_client(self) -> AsyncClient:
        if not self._client:
            if not (settings.SUPABASE_URL and settings.SUPABASE_KEY):
                logger.error("❌ Supabase credentials missing")
                raise BackendUnavailable("Supabase credentials are not configured")
            self._client = await create_async_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
            logger.info("✅ Supabase Async client initialized")
        return self._client

    async def insert(self, table: str, record: Dict[str, Any]) -> Dict[str, Any]:
        client = await self.get_client()
        try:
            response = await client.table(table).insert(record).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise AlreadyExists(f"Duplicate {table} record") from e
            logger.error(f"❌ DB Error (insert {table}): {e}")
            raise
        return response.data[0]

    async def patch(self, table: str, record_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Overwrite the given fields of one record, leaving the rest untouched."""
        client = await self.get_client()
        try:
            response = await client.table(table).update(fields).eq('id', record_id).execute()
        except APIError as e:
            logger.error(f"❌ DB Error (patch {table} {record_id}): {e}")
            raise
        if response.data:
            return response.data[0]
        return None

    async def get(self, table: str, record_id: str) -> Optional[Dict[str, Any]]:
        client = await self.get_client()
        try:
            response = await client.table(table).select("*").eq('id', record_id).limit(1).execute()
        except APIError as e:
            # a malformed id cannot name any record
            if e.code == INVALID_TEXT_REPRESENTATION:
                return None
            logger.error(f"❌ DB Error (get {table} {record_id}): {e}")
            raise
        if response.data:
            return response.data[0]
        return None

    async def find(
        self,
        table: str,
        index: str,
        value: Any,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Equality lookup on an indexed column, narrowed by optional extra
        equality filters. Results come back in creation order.
        """
        check_index(table, index)
        client = await self.get_client()
        query = client.table(table).select("*").eq(index, value)
        for column, expected in (filters or {}).items():
            query = query.eq(column, expected)
        try:
            response = await query.order('created_at', desc=False).execute()
        except APIError as e:
            if e.code == INVALID_TEXT_REPRESENTATION:
                return []
            logger.error(f"❌ DB Error (find {table}.{index}): {e}")
            raise
        return response.data or []

    async def find_one(self, table: str, index: str, value: Any) -> Optional[Dict[str, Any]]:
        rows = await self.find(table, index, value)
        if len(rows) > 1:
            logger.warning(f"⚠️ Expected one {table} row for {index}={value}, got {len(rows)}")
        return rows[0] if rows else None


db_service = DBService()
