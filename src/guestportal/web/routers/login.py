from fastapi import APIRouter
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, ConfigDict, Field

from guestportal.web.deps import AppDep
from guestportal.web.openapi import ErrorResponse

router = APIRouter(tags=["login"])


class LoginRequest(BaseModel):
    """Guest login form submission."""

    cache_id: str = Field("", alias="cacheId", description="Cache token embedded in the login page")
    username: str = Field("", description="Guest display name")
    email: str = Field("", description="Guest email address")

    model_config = ConfigDict(populate_by_name=True)


@router.post(
    "/login",
    summary="Complete guest login",
    description=(
        "Authorize the guest device behind the cache token on the controller, record the login, "
        "and redirect to the confirmation page. Unknown or already used tokens redirect without side effects."
    ),
    operation_id="guestLogin",
    status_code=303,
    response_class=RedirectResponse,
    responses={
        303: {"description": "Redirect to /success"},
        400: {"model": ErrorResponse, "description": "Malformed JSON body"},
    },
)
async def guest_login(login_data: LoginRequest, app: AppDep) -> RedirectResponse:
    await app.complete_guest_login(login_data.cache_id, login_data.username, login_data.email)
    return RedirectResponse("/success", status_code=303)
