"""Tests for the controller service."""

from unittest.mock import MagicMock

import httpx
import pytest

from guestportal.core.modules.controller.service import ControllerService


class TestCreateClient:
    """Tests for building clients from configuration."""

    def test_client_uses_config(self, core_stub):
        """Test that URL, site, credentials and timeout come from config."""
        service = ControllerService(MagicMock())
        service.set_core(core_stub)

        client = service.create_client()

        assert client.authorize_url == "https://unifi.example.com/proxy/network/api/s/lobby/cmd/stamgr"
        assert client._credentials.username == "portal"
        assert client._timeout == core_stub.config.controller_timeout
        assert client._verify_tls is True

    def test_disable_tls_turns_off_verification(self, core_stub):
        """Test that disable_tls is passed through as verify_tls=False."""
        core_stub.config.disable_tls = True
        service = ControllerService(MagicMock())
        service.set_core(core_stub)

        assert service.create_client()._verify_tls is False

    @pytest.mark.asyncio
    async def test_authorize_guest_runs_full_exchange(self, core_stub):
        """Test that the service performs login and authorize through its transport."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, headers={"x-csrf-token": "t"}, json={})

        service = ControllerService(MagicMock(), transport=httpx.MockTransport(handler))
        service.set_core(core_stub)

        await service.authorize_guest("AA:BB:CC:DD:EE:FF", "11:22:33:44:55:66", 480)

        assert seen == ["/api/auth/login", "/proxy/network/api/s/lobby/cmd/stamgr"]
