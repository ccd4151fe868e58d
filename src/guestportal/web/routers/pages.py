"""Captive-portal pages and static assets."""

from typing import Annotated

from fastapi import APIRouter, Query, Request
from fastapi.responses import FileResponse, HTMLResponse, Response

from guestportal.web.deps import AppDep

router = APIRouter(tags=["pages"], include_in_schema=False)


@router.get("/success")
async def success_page(app: AppDep) -> HTMLResponse:
    return HTMLResponse(app.get_success_page())


@router.get("/{path:path}")
async def portal_page(
    request: Request,
    app: AppDep,
    device_id: Annotated[str | None, Query(alias="id")] = None,
    ap_id: Annotated[str, Query(alias="ap")] = "",
    cache_id: Annotated[str | None, Query(alias="cacheId")] = None,
) -> Response:
    """Serve the login page or a static asset.

    A guest redirected by the controller arrives with its MAC in `id` and the
    access point MAC in `ap`. Such a request gets a fresh cache token embedded
    in the login page. Paths that are neither a login path nor an existing
    asset also fall back to the login page for redirected guests. The page
    files themselves are always rendered, never served raw.
    """
    path = request.url.path
    if app.is_success_path(path):
        return HTMLResponse(app.get_success_page())

    is_login = app.is_login_path(path) or (bool(device_id) and not app.has_asset(path))
    if not is_login:
        return FileResponse(app.get_asset_path(path))

    cache_token = app.start_guest_login(device_id, ap_id, cache_id) if device_id else None
    return HTMLResponse(app.get_login_page(cache_token))
