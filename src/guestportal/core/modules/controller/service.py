from typing import Any

import httpx
import structlog
from pymongo.asynchronous.database import AsyncDatabase

from guestportal.core.core import Service
from guestportal.core.modules.controller.client import ControllerAuthClient
from guestportal.core.modules.controller.models import ControllerCredentials

logger = structlog.get_logger(__name__)


class ControllerService(Service):
    """Issues guest authorizations to the configured UniFi controller."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]], transport: httpx.AsyncBaseTransport | None = None) -> None:
        super().__init__(database)
        self._transport = transport

    def create_client(self) -> ControllerAuthClient:
        config = self.core.config
        return ControllerAuthClient(
            controller_url=config.controller_url,
            site=config.controller_site,
            credentials=ControllerCredentials(username=config.controller_username, password=config.controller_password),
            verify_tls=not config.disable_tls,
            timeout=config.controller_timeout,
            transport=self._transport,
        )

    async def on_start(self) -> None:
        if self.core.config.disable_tls:
            logger.warning("controller_tls_verification_disabled", controller_url=self.core.config.controller_url)

    async def authorize_guest(self, device_id: str, ap_id: str, duration_minutes: int) -> None:
        """Grant network access to a device. Raises ControllerError on failure."""
        await self.create_client().authorize_guest(device_id, ap_id, duration_minutes)
        logger.info("guest_authorized", device_id=device_id, ap_id=ap_id, minutes=duration_minutes)
