"""Tests for the frontend service."""

from unittest.mock import MagicMock

import pytest

from guestportal.core.modules.frontend.service import FrontendService
from guestportal.errors import NotFoundError


@pytest.fixture
def service(core_stub):
    service = FrontendService(MagicMock())
    service.set_core(core_stub)
    return service


class TestLoginPaths:
    """Tests for recognizing controller redirect targets."""

    @pytest.mark.parametrize("path", ["", "/", "/index.html", "/guest/s/default/", "/guest/s/lobby/"])
    def test_login_paths(self, service, path):
        assert service.is_login_path(path)

    @pytest.mark.parametrize("path", ["/success", "/success.html", "/guest/s/other/", "/assets/app.js"])
    def test_other_paths(self, service, path):
        assert not service.is_login_path(path)



class TestSuccessPaths:
    """Tests for recognizing the confirmation page."""

    @pytest.mark.parametrize("path", ["/success", "/success.html"])
    def test_success_paths(self, service, path):
        assert service.is_success_path(path)

    def test_login_page_is_not_success(self, service):
        assert not service.is_success_path("/index.html")

class TestPages:
    """Tests for rendering pages from the frontend directory."""

    def test_missing_page_raises(self, core_stub, tmp_path):
        """Test that a frontend directory without index.html gives NotFoundError."""
        core_stub.config.frontend_path = str(tmp_path)
        service = FrontendService(MagicMock())
        service.set_core(core_stub)

        with pytest.raises(NotFoundError):
            service.render_login_page("tok")

    def test_unknown_asset_raises(self, service):
        with pytest.raises(NotFoundError):
            service.get_asset_path("/nope.png")
