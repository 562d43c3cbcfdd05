"""
Content Formatter.

Chooses how to print a response body from its declared content type:

    JSON        pretty-printed, then highlighted with the json lexer
    HTML        highlighted with the html lexer
    otherwise   content type descriptor followed by the raw body

Highlighting is delegated to rich's Syntax (Pygments lexers and styles);
the console's color system decides the escape sequences (24-bit by default).
"""

import json

from rich.console import Console
from rich.syntax import Syntax
from rich.text import Text

from quickhttp.core.config_schema import OutputConfig
from quickhttp.core.exceptions import FormatError
from quickhttp.core.logging import get_logger
from quickhttp.services.response import MimeType

logger = get_logger(__name__)


_JSON_WHITESPACE = " \t\r\n"


def pretty_json(text: str, indent: int = 2) -> str:
    """
    Re-indent a JSON document.

    Only whitespace between tokens changes: key order, duplicate keys,
    number spelling and string escapes come out exactly as received.

    Raises:
        FormatError: If ``text`` is not valid JSON
    """
    try:
        json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f"Body is not valid JSON: {e}") from e
    return _reindent(text.strip(_JSON_WHITESPACE), " " * indent)


def _reindent(text: str, pad: str) -> str:
    """Lay out already-validated JSON one member per line."""
    out: list[str] = []
    depth = 0
    in_string = False
    escaped = False
    i = 0
    while i < len(text):
        ch = text[i]
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
            out.append(ch)
        elif ch in "{[":
            j = i + 1
            while text[j] in _JSON_WHITESPACE:
                j += 1
            if text[j] in "}]":
                # Empty container stays on one line.
                out.append(ch + text[j])
                i = j
            else:
                depth += 1
                out.append(ch + "\n" + pad * depth)
        elif ch in "}]":
            depth -= 1
            out.append("\n" + pad * depth + ch)
        elif ch == ",":
            out.append(",\n" + pad * depth)
        elif ch == ":":
            out.append(": ")
        elif ch not in _JSON_WHITESPACE:
            out.append(ch)
        i += 1
    return "".join(out)


def highlight(code: str, lexer: str, console: Console, output: OutputConfig) -> None:
    """Print ``code`` line by line with syntax highlighting."""
    syntax = Syntax(code, lexer, theme=output.theme, background_color="default")
    for line in syntax.highlight(code).split("\n"):
        console.print(line, soft_wrap=True)


def print_raw(mime: MimeType | None, body: str, console: Console) -> None:
    """Print the content type descriptor, then the body exactly as received."""
    descriptor = str(mime) if mime is not None else "no content type"
    console.print(Text(descriptor, style="dim"), soft_wrap=True)
    # Written around rich so tabs and control characters are not rewritten.
    console.file.write(body if body.endswith("\n") else body + "\n")
    console.file.flush()


def format_body(
    mime: MimeType | None,
    body: str,
    console: Console,
    output: OutputConfig,
) -> None:
    """
    Print ``body`` using the formatter selected by ``mime``.

    A JSON body that fails to parse is printed raw instead of aborting.
    """
    if not body:
        return

    if mime is not None and mime.is_json:
        try:
            pretty = pretty_json(body, indent=output.json_indent)
        except FormatError as e:
            logger.warning("JSON pretty-print failed, printing raw body", error=e.message)
            print_raw(mime, body, console)
            return
        highlight(pretty, "json", console, output)
    elif mime is not None and mime.is_html:
        highlight(body, "html", console, output)
    else:
        print_raw(mime, body, console)
