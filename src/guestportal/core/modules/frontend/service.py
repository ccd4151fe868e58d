from pathlib import Path

from guestportal.core.core import Service
from guestportal.core.modules.frontend.pages import LOGIN_PAGE, SUCCESS_PAGE, read_page, render_page, resolve_asset_path
from guestportal.errors import NotFoundError


class FrontendService(Service):
    """Serves the captive-portal pages and static assets."""

    def is_login_path(self, path: str) -> bool:
        """Check if the path is one the controller redirects guests to."""
        site = self.core.config.controller_site
        return path in ("", "/", f"/{LOGIN_PAGE}", "/guest/s/default/", f"/guest/s/{site}/")

    def is_success_path(self, path: str) -> bool:
        return path in ("/success", f"/{SUCCESS_PAGE}")

    def render_login_page(self, cache_token: str | None = None) -> str:
        return self._render(LOGIN_PAGE, cache_token)

    def render_success_page(self) -> str:
        return self._render(SUCCESS_PAGE, None)

    def get_asset_path(self, path: str) -> Path:
        """Resolve a static asset. Raises NotFoundError for unknown paths."""
        asset = resolve_asset_path(self.core.config.frontend_path, path)
        if asset is None:
            raise NotFoundError(f"Page '{path}' not found")
        return asset

    def _render(self, file_name: str, cache_token: str | None) -> str:
        content = read_page(self.core.config.frontend_path, file_name)
        if content is None:
            raise NotFoundError(f"Page '{file_name}' not found")
        return render_page(content, self.core.config.page_title, cache_token)
