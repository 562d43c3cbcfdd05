"""
quickhttp CLI.

Command-line HTTP client.
Built with Typer for commands and Rich for formatted output.

Usage:
    quickhttp --help                                      # Show help
    quickhttp --version                                   # Show version

    quickhttp get <url> [Header:value ...] [name=value ...]
    quickhttp post <url> [name=value ...] [name:=json ...] [Header:value ...]

Options:
    --verbose, -v     Enable verbose output (INFO level logging)
    --debug, -d       Enable debug mode (DEBUG level logging)
    --version, -V     Show version and exit
"""

from typing import Optional

import typer
from rich.console import Console

from quickhttp.cli.commands import get, post
from quickhttp.core.config import get_app_config
from quickhttp.core.logging import setup_logging

app = typer.Typer(
    name="quickhttp",
    help="Command-line HTTP client with pretty-printed, highlighted responses.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.command()(get)
app.command()(post)


def _version_callback(value: bool) -> None:
    if value:
        application = get_app_config().application
        console.print(f"{application.name} {application.version}", highlight=False)
        raise typer.Exit()


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Command-line HTTP client.

    Items after the URL are classified by separator:
    Header:value, name=value, name:=json.
    """
    if debug:
        setup_logging(level="DEBUG")
    elif verbose:
        setup_logging(level="INFO")
    else:
        setup_logging()


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
