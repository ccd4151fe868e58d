from datetime import datetime
from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from guestportal.core.core import Service
from guestportal.core.modules.audit.models import AuditRecord
from guestportal.errors import PersistenceError
from guestportal.utils import now

logger = structlog.get_logger(__name__)


class AuditService(Service):
    """Append-only log of completed guest logins."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("user_sessions")

    async def on_start(self) -> None:
        """Create indexes on startup."""
        await self._collection.create_index([("cache_id", 1)], unique=True)
        await self._collection.create_index([("device_id", 1)])

    async def record(
        self,
        cache_id: str,
        device_id: str,
        ap_id: str,
        name: str,
        email: str,
        duration: int,
        created_at: datetime | None = None,
    ) -> AuditRecord:
        """Persist a completed guest login. Raises PersistenceError if the write fails."""
        record = AuditRecord(
            cache_id=cache_id,
            device_id=device_id,
            ap_id=ap_id,
            name=name,
            email=email,
            duration=duration,
            created_at=created_at or now(),
        )
        try:
            await self._collection.insert_one(record.to_mongo())
        except PyMongoError as e:
            raise PersistenceError(f"Failed to write audit record for '{cache_id}': {e}") from e
        logger.debug("audit_record_written", cache_id=cache_id, device_id=device_id)
        return record
