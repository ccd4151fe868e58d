"""Tests for the audit sink."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from guestportal.core.modules.audit.service import AuditService
from guestportal.errors import PersistenceError


@pytest.fixture
def collection():
    return MagicMock(insert_one=AsyncMock(), create_index=AsyncMock())


@pytest.fixture
def service(collection):
    database = MagicMock()
    database.get_collection.return_value = collection
    return AuditService(database)


class TestRecord:
    """Tests for writing audit records."""

    @pytest.mark.asyncio
    async def test_writes_document(self, service, collection):
        """Test that the record is inserted with all guest details."""
        created_at = datetime(2025, 3, 1, 9, 30, tzinfo=UTC)

        record = await service.record(
            "cache-1", "AA:BB:CC:DD:EE:FF", "11:22:33:44:55:66", "Ada", "ada@example.com", 480, created_at
        )

        document = collection.insert_one.await_args.args[0]
        assert document["_id"] == record.id
        assert document["cache_id"] == "cache-1"
        assert document["device_id"] == "AA:BB:CC:DD:EE:FF"
        assert document["ap_id"] == "11:22:33:44:55:66"
        assert document["name"] == "Ada"
        assert document["email"] == "ada@example.com"
        assert document["duration"] == 480
        assert document["created_at"] == created_at

    @pytest.mark.asyncio
    async def test_created_at_defaults_to_now(self, service):
        """Test that a missing creation time is filled in."""
        record = await service.record("cache-1", "AA:BB:CC:DD:EE:FF", "", "", "", 60)
        assert record.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_database_failure_raises_persistence_error(self, service, collection):
        """Test that driver errors are wrapped in PersistenceError."""
        collection.insert_one.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(PersistenceError, match="cache-1"):
            await service.record("cache-1", "AA:BB:CC:DD:EE:FF", "", "Ada", "", 60)

    @pytest.mark.asyncio
    async def test_duplicate_cache_id_raises_persistence_error(self, service, collection):
        """Test that a second record for the same cache id is rejected."""
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")

        with pytest.raises(PersistenceError):
            await service.record("cache-1", "AA:BB:CC:DD:EE:FF", "", "Ada", "", 60)


class TestIndexes:
    """Tests for startup index creation."""

    @pytest.mark.asyncio
    async def test_unique_cache_id_index(self, service, collection):
        """Test that cache_id is indexed as unique on startup."""
        await service.on_start()
        collection.create_index.assert_any_await([("cache_id", 1)], unique=True)
