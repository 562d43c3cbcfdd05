"""
Request Descriptors.

GetSpec and PostSpec describe one outgoing request, fully parsed and
validated before any network I/O.
"""

from collections.abc import Iterable
from typing import ClassVar, Union

import httpx
from pydantic import BaseModel, ConfigDict, field_validator

from quickhttp.core.exceptions import ParseError
from quickhttp.schemas.kv import KvKind, KvPair


def validate_url(url: str) -> str:
    """
    Check that ``url`` is an absolute URL with a scheme and a host.

    The input is returned unchanged so the request goes out exactly as typed.

    Raises:
        ParseError: If the URL cannot be parsed or is not absolute
    """
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise ParseError(f"Invalid URL {url!r}: {e}") from e

    if not parsed.scheme or not parsed.host:
        raise ParseError(f"Invalid URL {url!r}: expected an absolute URL such as http://example.com")
    return url


def _split_items(pairs: Iterable[KvPair]) -> tuple[tuple[KvPair, ...], tuple[KvPair, ...]]:
    """Split pairs into (headers, data items), preserving order."""
    headers: list[KvPair] = []
    items: list[KvPair] = []
    for pair in pairs:
        if pair.kind is KvKind.HEADER:
            headers.append(pair)
        else:
            items.append(pair)
    return tuple(headers), tuple(items)


class _RequestSpecBase(BaseModel):
    url: str
    headers: tuple[KvPair, ...] = ()

    model_config = ConfigDict(frozen=True)

    method: ClassVar[str]

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        # ParseError is not a ValueError, so it propagates out of the model as-is.
        return validate_url(value)


class GetSpec(_RequestSpecBase):
    """A GET request: headers plus query parameters."""

    method: ClassVar[str] = "GET"

    query: tuple[KvPair, ...] = ()

    @classmethod
    def from_items(cls, url: str, pairs: Iterable[KvPair]) -> "GetSpec":
        headers, query = _split_items(pairs)
        return cls(url=url, headers=headers, query=query)


class PostSpec(_RequestSpecBase):
    """A POST request: headers plus JSON body fields."""

    method: ClassVar[str] = "POST"

    body: tuple[KvPair, ...] = ()

    @classmethod
    def from_items(cls, url: str, pairs: Iterable[KvPair]) -> "PostSpec":
        headers, body = _split_items(pairs)
        return cls(url=url, headers=headers, body=body)


RequestSpec = Union[GetSpec, PostSpec]
