"""
Response Projection.

ResponseView is the read-only slice of an httpx.Response that the
renderer consumes: version, status, headers in arrival order, declared
content type and the decoded body.
"""

from dataclasses import dataclass, field

import httpx


@dataclass(frozen=True)
class MimeType:
    """A parsed Content-Type value."""

    type: str
    subtype: str
    suffix: str | None = None
    params: tuple[tuple[str, str], ...] = field(default=())

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"

    @property
    def is_json(self) -> bool:
        return self.subtype == "json" or self.suffix == "json"

    @property
    def is_html(self) -> bool:
        return self.subtype == "html"

    def __str__(self) -> str:
        parts = [self.essence, *(f"{name}={value}" for name, value in self.params)]
        return "; ".join(parts)

    @classmethod
    def parse(cls, value: str | None) -> "MimeType | None":
        """Parse a Content-Type header value. Returns None if it is unusable."""
        if not value:
            return None

        essence, *raw_params = value.split(";")
        type_, sep, subtype = essence.strip().lower().partition("/")
        if not sep or not type_ or not subtype or "/" in subtype:
            return None

        suffix = subtype.rpartition("+")[2] if "+" in subtype else None

        params = []
        for raw in raw_params:
            name, sep, param_value = raw.strip().partition("=")
            if sep and name:
                params.append((name.strip().lower(), param_value.strip().strip('"')))

        return cls(type=type_, subtype=subtype, suffix=suffix, params=tuple(params))


@dataclass(frozen=True)
class ResponseView:
    """Read-only projection of a completed HTTP response."""

    http_version: str
    status_code: int
    reason_phrase: str
    headers: tuple[tuple[str, str], ...]
    content_type: MimeType | None
    body: str

    @property
    def status_line(self) -> str:
        return f"{self.http_version} {self.status_code} {self.reason_phrase}".rstrip()

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ResponseView":
        """Project a fully read httpx.Response."""
        return cls(
            http_version=response.http_version,
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            headers=tuple(response.headers.multi_items()),
            content_type=MimeType.parse(response.headers.get("content-type")),
            body=response.text,
        )
