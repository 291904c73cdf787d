"""In-memory stand-ins for the Supabase record store and photo bucket."""
import asyncio
import copy
import itertools
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from hireme.core.context import Caller
from hireme.core.errors import AlreadyExists
from hireme.models.db_models import UploadTarget
from hireme.models.schema import INDEXES, PROFILES, check_index

EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class InMemoryDB:
    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {name: [] for name in INDEXES}
        self._ticks = itertools.count()
        self.calls: List[str] = []

    async def get_client(self):
        raise AssertionError("InMemoryDB has no platform client")

    async def insert(self, table: str, record: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(f"insert:{table}")
        # yield so that concurrent callers interleave like real requests
        await asyncio.sleep(0)
        row = copy.deepcopy(record)
        row.setdefault('id', str(uuid4()))
        row['created_at'] = EPOCH + timedelta(seconds=next(self._ticks))
        if table == PROFILES and any(r['user_id'] == row['user_id'] for r in self.tables[table]):
            raise AlreadyExists("Duplicate profiles record")
        self.tables[table].append(row)
        return copy.deepcopy(row)

    async def patch(self, table: str, record_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self.calls.append(f"patch:{table}")
        for row in self.tables[table]:
            if row['id'] == record_id:
                row.update(copy.deepcopy(fields))
                return copy.deepcopy(row)
        return None

    async def get(self, table: str, record_id: str) -> Optional[Dict[str, Any]]:
        for row in self.tables[table]:
            if row['id'] == record_id:
                return copy.deepcopy(row)
        return None

    async def find(self, table, index, value, filters=None) -> List[Dict[str, Any]]:
        check_index(table, index)
        self.calls.append(f"find:{table}.{index}")
        wanted = {index: value, **(filters or {})}
        return [
            copy.deepcopy(row) for row in self.tables[table]
            if all(row.get(k) == v for k, v in wanted.items())
        ]

    async def find_one(self, table, index, value) -> Optional[Dict[str, Any]]:
        rows = await self.find(table, index, value)
        return rows[0] if rows else None


class FakeStorage:
    """Bucket where only explicitly uploaded references resolve."""

    def __init__(self):
        self.objects: Dict[str, str] = {}

    def upload(self, reference: str) -> str:
        self.objects[reference] = f"https://cdn.test/{reference}?token=signed"
        return reference

    async def generate_upload_url(self, caller: Caller) -> UploadTarget:
        user_id = caller.require_user()
        reference = f"{user_id}/{uuid4().hex}"
        return UploadTarget(upload_url=f"https://upload.test/{reference}", storage_id=reference)

    async def get_url(self, reference: Optional[str]) -> Optional[str]:
        if not reference:
            return None
        return self.objects.get(reference)

    async def get_urls(self, references) -> List[str]:
        urls = [await self.get_url(ref) for ref in references]
        return [url for url in urls if url]
