"""
Key/Value Items.

Command-line items are tokens of the form ``key<sep>value``:

    name=value     FIELD       query parameter (get) or JSON string (post)
    name:=value    JSON_FIELD  raw JSON value
    Name:value     HEADER      request header
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from quickhttp.core.exceptions import ParseError

SEP_JSON_FIELD = ":="
SEP_FIELD = "="
SEP_HEADER = ":"


class KvKind(str, Enum):
    """Item kind, named by the separator that produced it."""

    FIELD = SEP_FIELD
    JSON_FIELD = SEP_JSON_FIELD
    HEADER = SEP_HEADER


class KvPair(BaseModel):
    """A parsed command-line item."""

    key: str = Field(min_length=1)
    value: str
    kind: KvKind = KvKind.FIELD

    model_config = ConfigDict(frozen=True)


def _find_separator(token: str) -> tuple[int, str] | None:
    """Locate the separator that splits ``token``, or None."""
    # ':=' contains '=', so it wins outright when present.
    index = token.find(SEP_JSON_FIELD)
    if index != -1:
        return index, SEP_JSON_FIELD

    found = [
        (token.find(sep), sep)
        for sep in (SEP_FIELD, SEP_HEADER)
        if sep in token
    ]
    if not found:
        return None
    return min(found)


def parse_kv_pair(token: str) -> KvPair:
    """
    Parse a ``key<sep>value`` token.

    Only the first occurrence of the chosen separator is significant; any
    further '=' or ':' characters are kept verbatim in the value.

    Args:
        token: Raw command-line item

    Returns:
        KvPair tagged with the separator kind

    Raises:
        ParseError: If no separator is present or the key is empty
    """
    located = _find_separator(token)
    if located is None:
        raise ParseError(f"Failed to parse {token!r}: expected key=value, key:=json or Header:value")

    index, sep = located
    key = token[:index]
    value = token[index + len(sep):]
    if not key:
        raise ParseError(f"Failed to parse {token!r}: empty key")

    return KvPair(key=key, value=value, kind=KvKind(sep))
