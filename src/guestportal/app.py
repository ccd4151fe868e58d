from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

import structlog

from guestportal.config import Config
from guestportal.core.core import Core
from guestportal.core.modules.pending.models import CacheToken
from guestportal.errors import ControllerError, NotFoundError, PersistenceError

logger = structlog.get_logger(__name__)


class App:
    """Facade for all captive-portal operations, drives a guest from redirect to confirmation."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    def is_login_path(self, path: str) -> bool:
        return self._core.services.frontend.is_login_path(path)

    def is_success_path(self, path: str) -> bool:
        return self._core.services.frontend.is_success_path(path)

    def start_guest_login(self, device_id: str, ap_id: str, existing_token: str | None = None) -> CacheToken:
        """Register a guest arriving from the captive-portal redirect and return its cache token."""
        return self._core.services.pending.start_login(device_id, ap_id, existing_token)

    def get_login_page(self, cache_token: str | None = None) -> str:
        """Render the login page, embedding the cache token if there is one."""
        return self._core.services.frontend.render_login_page(cache_token)

    def get_success_page(self) -> str:
        return self._core.services.frontend.render_success_page()

    def get_asset_path(self, path: str) -> Path:
        """Resolve a static asset. Raises NotFoundError if it does not exist."""
        return self._core.services.frontend.get_asset_path(path)

    def has_asset(self, path: str) -> bool:
        try:
            self.get_asset_path(path)
        except NotFoundError:
            return False
        return True

    async def complete_guest_login(self, cache_id: str, name: str, email: str) -> bool:
        """Authorize the guest behind cache_id and record the login.

        Unknown, expired or already used tokens are ignored. A failed controller
        call is logged and the login is still recorded and the token consumed, so
        the guest always reaches the confirmation page.

        Returns True only if the controller granted access.
        """
        if not cache_id:
            return False

        services = self._core.services
        pending = services.pending.checkout(cache_id)
        if pending is None:
            logger.info("guest_login_unknown_token", cache_id=cache_id)
            return False

        consumed = False
        try:
            duration = self._core.config.guest_duration
            authorized = await self._authorize(pending.device_id, pending.ap_id, duration)
            try:
                await services.audit.record(cache_id, pending.device_id, pending.ap_id, name, email, duration)
            except PersistenceError:
                logger.exception("audit_record_failed", cache_id=cache_id, device_id=pending.device_id)
            consumed = services.pending.consume(cache_id)
        finally:
            if not consumed:
                services.pending.release(cache_id)
        return authorized

    async def _authorize(self, device_id: str, ap_id: str, duration: int) -> bool:
        try:
            await self._core.services.controller.authorize_guest(device_id, ap_id, duration)
        except ControllerError as e:
            # TODO: confirm with product whether a failed authorization should still record the login
            logger.error(
                "guest_authorization_failed",
                device_id=device_id,
                ap_id=ap_id,
                error=str(e),
                status_code=e.status_code,
                body=e.body,
            )
            return False
        return True
