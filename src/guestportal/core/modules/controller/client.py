"""Two-step guest authorization against a UniFi controller."""

import httpx
import structlog

from guestportal.core.modules.controller.models import (
    CSRF_HEADER,
    AuthorizeGuestCommand,
    ControllerCredentials,
    ControllerSession,
)
from guestportal.errors import AuthorizationFailedError, LoginFailedError

logger = structlog.get_logger(__name__)


class ControllerAuthClient:
    """Logs into the controller and authorizes a guest device.

    Each call to authorize_guest performs a fresh login on its own short-lived
    HTTP client. Nothing is shared between calls, so concurrent authorizations
    for different guests need no locking.

    Setting verify_tls to False disables certificate validation for both steps.
    It exists for controllers with self-signed certificates on a trusted LAN.
    """

    def __init__(
        self,
        controller_url: str,
        site: str,
        credentials: ControllerCredentials,
        verify_tls: bool = True,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.controller_url = controller_url.rstrip("/")
        self.site = site
        self._credentials = credentials
        self._verify_tls = verify_tls
        self._timeout = timeout
        self._transport = transport

    @property
    def login_url(self) -> str:
        return f"{self.controller_url}/api/auth/login"

    @property
    def authorize_url(self) -> str:
        return f"{self.controller_url}/proxy/network/api/s/{self.site}/cmd/stamgr"

    async def authorize_guest(self, device_id: str, ap_id: str, duration_minutes: int) -> None:
        """Grant device_id network access for duration_minutes.

        Raises:
            LoginFailedError: controller login was rejected or unreachable
            AuthorizationFailedError: authorize-guest command was rejected or unreachable
        """
        async with httpx.AsyncClient(verify=self._verify_tls, timeout=self._timeout, transport=self._transport) as client:
            session = await self._login(client)
            command = AuthorizeGuestCommand(mac=device_id, minutes=duration_minutes, ap_mac=ap_id)
            await self._send_authorize(client, session, command)

    async def _login(self, client: httpx.AsyncClient) -> ControllerSession:
        try:
            response = await client.post(self.login_url, json=self._credentials.model_dump())
        except httpx.HTTPError as e:
            raise LoginFailedError(f"Failed to login to controller: {e}") from e

        if response.status_code != httpx.codes.OK:
            raise LoginFailedError(
                f"Controller login failed with status {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        csrf_token = response.headers.get(CSRF_HEADER)
        if not csrf_token:
            logger.warning("controller_login_without_csrf_token", controller_url=self.controller_url)
        return ControllerSession(cookies=httpx.Cookies(response.cookies), csrf_token=csrf_token)

    async def _send_authorize(
        self, client: httpx.AsyncClient, session: ControllerSession, command: AuthorizeGuestCommand
    ) -> None:
        # Sent explicitly so Secure cookies also reach controllers served over plain http
        headers: dict[str, str] = {}
        if session.cookies:
            headers["cookie"] = session.cookie_header()
        if session.csrf_token:
            headers[CSRF_HEADER] = session.csrf_token
        client.cookies.clear()
        try:
            response = await client.post(self.authorize_url, json=command.model_dump(), headers=headers)
        except httpx.HTTPError as e:
            raise AuthorizationFailedError(f"Failed to authorize guest: {e}") from e

        if response.status_code != httpx.codes.OK:
            raise AuthorizationFailedError(
                f"Guest authorization failed with status {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        logger.debug("controller_authorize_sent", mac=command.mac, ap_mac=command.ap_mac, minutes=command.minutes)
