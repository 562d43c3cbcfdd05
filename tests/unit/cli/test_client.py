"""Unit tests for the CLI HTTP client."""

import asyncio
from unittest.mock import patch

import httpx
import pytest

from quickhttp.cli.client import HttpClient, get_http_client
from quickhttp.core.exceptions import TransportError


def _request(url: str = "http://test/get") -> httpx.Request:
    return httpx.Request("GET", url)


class TestHttpClient:
    """Tests for HttpClient class."""

    def test_client_initialization(self, client_config) -> None:
        """Test client takes its timeout from the configuration."""
        client = HttpClient(client_config)
        assert client.timeout == 5.0
        assert client.config is client_config

    @pytest.mark.asyncio
    async def test_send_returns_response(self, client_config, recording_handler) -> None:
        """Test a request goes through the transport unchanged."""
        handler = recording_handler(200, json_data={"ok": True})

        async with HttpClient(client_config, transport=httpx.MockTransport(handler)) as client:
            response = await client.send(_request())

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert handler.requests[0].url == "http://test/get"

    @pytest.mark.asyncio
    async def test_error_status_is_not_an_exception(self, client_config, recording_handler) -> None:
        """Test 4xx/5xx responses are returned, not raised."""
        handler = recording_handler(503, text="down")

        async with HttpClient(client_config, transport=httpx.MockTransport(handler)) as client:
            response = await client.send(_request())

        assert response.status_code == 503

    @pytest.mark.asyncio
    async def test_connect_error_becomes_transport_error(self, client_config) -> None:
        """Test httpx errors are wrapped in TransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with HttpClient(client_config, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(TransportError) as exc_info:
                await client.send(_request())

        assert "ConnectError" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_transport_failure_is_logged_at_debug(self, client_config) -> None:
        """Test failures are left to the CLI error message at default log levels."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with patch("quickhttp.cli.client.logger") as mock_logger:
            async with HttpClient(client_config, transport=httpx.MockTransport(handler)) as client:
                with pytest.raises(TransportError):
                    await client.send(_request())

        mock_logger.error.assert_not_called()
        mock_logger.warning.assert_not_called()
        mock_logger.debug.assert_called_once()
        assert mock_logger.debug.call_args.args[0] == "Request failed"

    @pytest.mark.asyncio
    async def test_deadline_becomes_transport_error(self, client_config) -> None:
        """Test the overall deadline cancels a hanging request."""

        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(5)
            return httpx.Response(200)

        config = client_config.model_copy(update={"timeout_seconds": 0.05})

        async with HttpClient(config, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(TransportError) as exc_info:
                await client.send(_request())

        assert "timed out" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_redirects_follow_configuration(self, client_config) -> None:
        """Test redirects are followed when configured."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old":
                return httpx.Response(302, headers={"Location": "http://test/new"})
            return httpx.Response(200, text="moved")

        async with HttpClient(client_config, transport=httpx.MockTransport(handler)) as client:
            response = await client.send(_request("http://test/old"))

        assert response.status_code == 200
        assert response.text == "moved"

    @pytest.mark.asyncio
    async def test_redirects_not_followed_when_disabled(self, client_config) -> None:
        """Test the redirect response is returned as-is when disabled."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(302, headers={"Location": "http://test/new"})

        config = client_config.model_copy(update={"follow_redirects": False})

        async with HttpClient(config, transport=httpx.MockTransport(handler)) as client:
            response = await client.send(_request("http://test/old"))

        assert response.status_code == 302

    @pytest.mark.asyncio
    async def test_close_client(self, client_config) -> None:
        """Test client closes properly."""
        client = HttpClient(client_config)

        await client._get_client()
        assert client._client is not None

        await client.close()
        assert client._client is None

    @pytest.mark.asyncio
    async def test_context_manager_closes(self, client_config) -> None:
        """Test leaving the context closes the underlying client."""
        async with HttpClient(client_config) as client:
            internal = await client._get_client()

        assert internal.is_closed
        assert client._client is None


class TestModuleLevelFunctions:
    """Tests for module-level client functions."""

    def test_get_http_client_uses_config(self, client_config) -> None:
        client = get_http_client(client_config)
        assert isinstance(client, HttpClient)
        assert client.config is client_config
