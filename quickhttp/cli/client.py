"""
HTTP Client for CLI.

Thin wrapper around httpx.AsyncClient that sends exactly one prepared
request under an overall deadline and maps transport failures to
TransportError.
"""

import asyncio
import time

import httpx

from quickhttp.core.config_schema import ClientConfig
from quickhttp.core.exceptions import TransportError
from quickhttp.core.logging import get_logger

logger = get_logger(__name__)


class HttpClient:
    """
    Sends requests built by the request builder.

    Features:
    - Per-phase httpx timeouts plus an overall deadline
    - Redirect policy from ClientConfig
    - Structured logging of requests/responses
    - Transport errors wrapped in TransportError

    Usage:
        async with HttpClient(config) as client:
            response = await client.send(request)
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Client configuration (timeout, redirect policy)
            transport: Optional transport override, e.g. httpx.MockTransport in tests
        """
        self.config = config
        self.timeout = config.timeout_seconds
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=self.config.follow_redirects,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying httpx client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def send(self, request: httpx.Request) -> httpx.Response:
        """
        Send ``request`` and return the fully read response.

        Raises:
            TransportError: On any httpx error or when the deadline expires
        """
        client = await self._get_client()
        url = str(request.url)

        logger.info("Sending request", method=request.method, url=url)
        started = time.monotonic()

        try:
            response = await asyncio.wait_for(client.send(request), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.debug("Request deadline exceeded", method=request.method, url=url, timeout=self.timeout)
            raise TransportError(f"Request to {url} timed out after {self.timeout:g}s") from e
        except httpx.HTTPError as e:
            logger.debug(
                "Request failed",
                method=request.method,
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TransportError(f"{type(e).__name__}: {str(e) or 'request failed'}") from e

        logger.info(
            "Response received",
            method=request.method,
            url=url,
            status_code=response.status_code,
            elapsed_ms=round((time.monotonic() - started) * 1000, 1),
        )
        return response


def get_http_client(config: ClientConfig) -> HttpClient:
    """Create the client used by the CLI commands."""
    return HttpClient(config)
