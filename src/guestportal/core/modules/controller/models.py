"""UniFi controller exchange models."""

import httpx
from pydantic import BaseModel, ConfigDict

CSRF_HEADER = "x-csrf-token"
AUTHORIZE_GUEST_CMD = "authorize-guest"


class ControllerCredentials(BaseModel):
    """Local controller account used to issue guest authorizations."""

    username: str
    password: str


class ControllerSession(BaseModel):
    """Cookies and CSRF token obtained from one controller login.

    Belongs to a single authorization attempt and is discarded right after.
    """

    cookies: httpx.Cookies
    csrf_token: str | None = None

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    def cookie_header(self) -> str:
        """Every captured cookie as a Cookie header value, Secure flag ignored."""
        return "; ".join(f"{cookie.name}={cookie.value}" for cookie in self.cookies.jar)


class AuthorizeGuestCommand(BaseModel):
    """Body of the stamgr command that grants a device network access."""

    cmd: str = AUTHORIZE_GUEST_CMD
    mac: str
    minutes: int
    ap_mac: str = ""
