"""
HTTP Commands.

`get` and `post`: parse the URL and items, build one request, send it and
render the response.
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console

from quickhttp.cli.client import get_http_client
from quickhttp.core.config import get_app_config, get_client_config
from quickhttp.core.config_schema import OutputConfig
from quickhttp.core.exceptions import ApplicationError, ParseError
from quickhttp.core.logging import get_logger
from quickhttp.schemas.kv import KvPair, parse_kv_pair
from quickhttp.schemas.request import GetSpec, PostSpec, RequestSpec, validate_url
from quickhttp.services.renderer import render_response
from quickhttp.services.request_builder import build_request
from quickhttp.services.response import ResponseView

logger = get_logger(__name__)

error_console = Console(stderr=True)

ITEMS_HINT = "'[ITEMS]...'"


def _validate_url(value: str) -> str:
    """Argument callback: reject a bad URL before anything else runs."""
    try:
        return validate_url(value)
    except ParseError as e:
        raise typer.BadParameter(e.message) from e


def _parse_items(items: list[str] | None) -> list[KvPair]:
    pairs = []
    for token in items or []:
        try:
            pairs.append(parse_kv_pair(token))
        except ParseError as e:
            raise typer.BadParameter(e.message, param_hint=ITEMS_HINT) from e
    return pairs


def build_console(output: OutputConfig, **kwargs) -> Console:
    """Create the stdout console; colour only when writing to a terminal."""
    probe = Console(**kwargs)
    color_system = output.color_system if probe.is_terminal else None
    return Console(color_system=color_system, highlight=False, **kwargs)


async def _execute(spec: RequestSpec, timeout: float | None) -> None:
    """Build, send and render one request."""
    app_config = get_app_config()
    client_config = get_client_config(timeout)
    console = build_console(app_config.output)

    request = build_request(spec, client_config)

    async with get_http_client(client_config) as client:
        response = await client.send(request)

    render_response(ResponseView.from_response(response), console, app_config.output)


def _run(spec: RequestSpec, timeout: float | None) -> None:
    """Run the request and translate failures into exit codes."""
    try:
        asyncio.run(_execute(spec, timeout))
    except ParseError as e:
        raise typer.BadParameter(e.message, param_hint=ITEMS_HINT) from e
    except ApplicationError as e:
        logger.debug("Command failed", code=e.code, error=e.message)
        error_console.print(f"[red]Error: {e.message}[/red]", markup=True, highlight=False)
        raise typer.Exit(1) from e


def get(
    url: str = typer.Argument(..., callback=_validate_url, help="Absolute URL, e.g. http://httpbin.org/get"),
    items: Optional[list[str]] = typer.Argument(
        None,
        help="Header:value headers and name=value query parameters",
        show_default=False,
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", min=0.001, help="Overall request deadline in seconds",
    ),
) -> None:
    """
    Send a GET request and print the response.

    Examples:
        quickhttp get http://httpbin.org/get
        quickhttp get http://httpbin.org/get Authorization:'Bearer token' page=2
    """
    spec = GetSpec.from_items(url, _parse_items(items))
    _run(spec, timeout)


def post(
    url: str = typer.Argument(..., callback=_validate_url, help="Absolute URL, e.g. http://httpbin.org/post"),
    items: Optional[list[str]] = typer.Argument(
        None,
        help="name=value string fields, name:=json raw JSON fields and Header:value headers",
        show_default=False,
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", min=0.001, help="Overall request deadline in seconds",
    ),
) -> None:
    """
    Send the items as a JSON object in a POST request and print the response.

    Examples:
        quickhttp post http://httpbin.org/post name=alice
        quickhttp post http://httpbin.org/post age:=30 tags:='["a","b"]' X-Trace:1
    """
    spec = PostSpec.from_items(url, _parse_items(items))
    _run(spec, timeout)
