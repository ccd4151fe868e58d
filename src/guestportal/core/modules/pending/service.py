import asyncio
import contextlib
from datetime import timedelta
from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from guestportal.core.core import Service
from guestportal.core.modules.pending.models import CacheToken, PendingLogin
from guestportal.core.modules.pending.store import PendingLoginStore

logger = structlog.get_logger(__name__)


class PendingLoginService(Service):
    """Owns the pending login store and its periodic expiry sweep."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]], store: PendingLoginStore | None = None) -> None:
        super().__init__(database)
        self.store = store or PendingLoginStore()
        self._purge_task: asyncio.Task[None] | None = None

    async def on_start(self) -> None:
        self._purge_task = asyncio.create_task(self._purge_loop())
        logger.debug("pending_purge_started", interval=self.core.config.pending_purge_interval)

    async def on_stop(self) -> None:
        if self._purge_task is None:
            return
        self._purge_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._purge_task
        self._purge_task = None
        logger.debug("pending_purge_stopped")

    async def _purge_loop(self) -> None:
        interval = self.core.config.pending_purge_interval
        while True:
            await asyncio.sleep(interval)
            try:
                self.purge_expired()
            except Exception:
                logger.exception("pending_purge_failed")

    def purge_expired(self) -> int:
        """Remove pending logins older than the configured max age."""
        removed = self.store.sweep_expired(timedelta(seconds=self.core.config.pending_max_age))
        if removed:
            logger.info("pending_logins_purged", count=removed, remaining=len(self.store))
        return removed

    def start_login(self, device_id: str, ap_id: str, existing_token: str | None = None) -> CacheToken:
        """Register a guest arriving from the captive-portal redirect.

        A still-valid token for the same device is reused so that reloading the
        login page does not pile up entries.
        """
        if existing_token:
            entry = self.store.resolve(existing_token)
            if entry is not None and entry.device_id == device_id:
                return entry.token

        token = self.store.create(device_id, ap_id)
        logger.info("pending_login_created", token=token, device_id=device_id, ap_id=ap_id)
        return token

    def checkout(self, token: str) -> PendingLogin | None:
        return self.store.checkout(token)

    def release(self, token: str) -> None:
        self.store.release(token)

    def consume(self, token: str) -> bool:
        return self.store.consume(token)
