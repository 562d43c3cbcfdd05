"""
Request Builder.

Maps a GetSpec or PostSpec plus the process-wide ClientConfig into a single
httpx.Request. Pure: nothing here touches the network.
"""

import json
import re
from typing import Any

import httpx

from quickhttp.core.config_schema import ClientConfig
from quickhttp.core.exceptions import HeaderError, ParseError
from quickhttp.core.logging import get_logger
from quickhttp.schemas.kv import KvKind, KvPair
from quickhttp.schemas.request import GetSpec, PostSpec, RequestSpec

logger = get_logger(__name__)

# RFC 7230 token characters.
_HEADER_NAME_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
# Control characters other than horizontal tab.
_HEADER_VALUE_ILLEGAL_RE = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")
# Optional whitespace around a field value (RFC 7230 OWS).
_HEADER_VALUE_OWS = " \t"


def check_header(name: str, value: str) -> None:
    """
    Validate a single header.

    Raises:
        HeaderError: If the name is not a token, or the value has control
            characters or leading/trailing whitespace
    """
    if not _HEADER_NAME_RE.match(name):
        raise HeaderError(f"Invalid header name {name!r}")
    if _HEADER_VALUE_ILLEGAL_RE.search(value):
        raise HeaderError(f"Invalid value for header {name!r}: control characters are not allowed")
    if value != value.strip(_HEADER_VALUE_OWS):
        raise HeaderError(f"Invalid value for header {name!r}: leading or trailing whitespace")


def merge_headers(config: ClientConfig, supplied: tuple[KvPair, ...]) -> list[tuple[str, bytes]]:
    """
    Combine default and caller-supplied headers.

    Defaults come first; a caller-supplied header replaces every default of
    the same name (case-insensitive). Repeated caller headers are all sent.
    Whitespace around caller values is dropped, so `Name: value` works.
    """
    user_headers = [(pair.key, pair.value.strip(_HEADER_VALUE_OWS)) for pair in supplied]
    overridden = {name.lower() for name, _ in user_headers}
    defaults = [("User-Agent", config.user_agent), *config.default_headers.items()]

    merged = [(name, value) for name, value in defaults if name.lower() not in overridden]
    merged.extend(user_headers)

    for name, value in merged:
        check_header(name, value)
    return [(name, value.encode("utf-8")) for name, value in merged]


def build_json_body(pairs: tuple[KvPair, ...]) -> dict[str, Any]:
    """
    Fold body pairs into a flat JSON object.

    FIELD values stay strings; JSON_FIELD values are decoded as raw JSON.
    When a key repeats, the last pair wins.

    Raises:
        ParseError: If a JSON_FIELD value is not valid JSON
    """
    body: dict[str, Any] = {}
    for pair in pairs:
        if pair.kind is KvKind.JSON_FIELD:
            try:
                body[pair.key] = json.loads(pair.value)
            except json.JSONDecodeError as e:
                raise ParseError(f"Invalid JSON value for {pair.key!r}: {e}") from e
        else:
            body[pair.key] = pair.value
    return body


def build_request(spec: RequestSpec, config: ClientConfig) -> httpx.Request:
    """
    Build the outgoing request for ``spec``.

    Args:
        spec: Parsed GetSpec or PostSpec
        config: Process-wide client configuration (default headers)

    Returns:
        httpx.Request ready to be sent

    Raises:
        HeaderError: On an illegal header name or value
        ParseError: On an undecodable JSON_FIELD body value
    """
    headers = merge_headers(config, spec.headers)

    if isinstance(spec, GetSpec):
        params = [(pair.key, pair.value) for pair in spec.query] or None
        request = httpx.Request("GET", spec.url, params=params, headers=headers)
    elif isinstance(spec, PostSpec):
        request = httpx.Request("POST", spec.url, headers=headers, json=build_json_body(spec.body))
    else:
        raise TypeError(f"Unsupported request spec: {type(spec).__name__}")

    logger.debug(
        "Request built",
        method=request.method,
        url=str(request.url),
        header_count=len(headers),
    )
    return request
