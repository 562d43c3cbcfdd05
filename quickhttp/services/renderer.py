"""
Response Renderer.

Prints a ResponseView in a fixed order: status line, blank line, headers,
blank line, body.
"""

from rich.console import Console
from rich.text import Text

from quickhttp.core.config_schema import OutputConfig
from quickhttp.services.formatter import format_body
from quickhttp.services.response import ResponseView


def status_style(status_code: int) -> str:
    """Return a rich style for the status class."""
    if status_code < 200:
        return "bold cyan"
    if status_code < 300:
        return "bold green"
    if status_code < 400:
        return "bold yellow"
    if status_code < 500:
        return "bold red"
    return "bold bright_red"


def print_status(view: ResponseView, console: Console) -> None:
    console.print(Text(view.status_line, style=status_style(view.status_code)), soft_wrap=True)
    console.print()


def print_headers(view: ResponseView, console: Console) -> None:
    for name, value in view.headers:
        line = Text()
        line.append(name, style="green")
        line.append(": ")
        line.append(value)
        console.print(line, soft_wrap=True)
    console.print()


def render_response(view: ResponseView, console: Console, output: OutputConfig) -> None:
    """
    Render a complete response to ``console``.

    Errors propagate; anything already printed stays printed.
    """
    print_status(view, console)
    print_headers(view, console)
    format_body(view.content_type, view.body, console, output)
