"""
Unit Test Fixtures.

Fixtures for unit tests - the network is always replaced by
httpx.MockTransport and terminal output is captured in memory.
"""

import io
import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from rich.console import Console
from rich.text import Text

from quickhttp.core.config_schema import ClientConfig, OutputConfig


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def client_config() -> ClientConfig:
    """Client configuration with predictable default headers."""
    return ClientConfig(
        user_agent="quickhttp-test/1.0",
        default_headers={"X-Powered-By": "Python", "Accept": "*/*"},
        timeout_seconds=5.0,
        follow_redirects=True,
    )


@pytest.fixture
def output_config() -> OutputConfig:
    """Output configuration matching the bundled defaults."""
    return OutputConfig(theme="monokai", color_system="truecolor", json_indent=2)


# =============================================================================
# Console Fixtures
# =============================================================================


@pytest.fixture
def color_console() -> Console:
    """
    In-memory console that always emits 24-bit escape sequences.

    Usage:
        def test_output(color_console):
            format_body(mime, body, color_console, output_config)
            assert "\\x1b[38;2;" in color_console.file.getvalue()
    """
    return Console(file=io.StringIO(), force_terminal=True, color_system="truecolor", width=120)


@pytest.fixture
def plain_console() -> Console:
    """In-memory console without colour."""
    return Console(file=io.StringIO(), color_system=None, width=120)


def _console_text(console: Console) -> str:
    return Text.from_ansi(console.file.getvalue()).plain


@pytest.fixture
def read_console() -> Callable[[Console], str]:
    """Return a reader for captured console output with escape sequences removed."""
    return _console_text


# =============================================================================
# HTTP Mock Fixtures
# =============================================================================


class RecordingHandler:
    """
    MockTransport handler that records requests and returns a fixed response.

    Usage:
        handler = RecordingHandler(200, json_data={"ok": True})
        transport = httpx.MockTransport(handler)
        ...
        assert handler.requests[0].method == "GET"
    """

    def __init__(
        self,
        status_code: int = 200,
        json_data: Any | None = None,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.json_data = json_data
        self.text = text
        self.headers = headers
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.json_data is not None:
            return httpx.Response(self.status_code, json=self.json_data, headers=self.headers)
        return httpx.Response(self.status_code, text=self.text or "", headers=self.headers)

    @property
    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recording_handler() -> Callable[..., RecordingHandler]:
    """Factory for RecordingHandler instances."""
    return RecordingHandler
