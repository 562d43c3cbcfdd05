"""
Schemas.

Typed descriptors built from command-line input.
"""

from quickhttp.schemas.kv import KvKind, KvPair, parse_kv_pair
from quickhttp.schemas.request import GetSpec, PostSpec, RequestSpec, validate_url

__all__ = [
    "GetSpec",
    "KvKind",
    "KvPair",
    "PostSpec",
    "RequestSpec",
    "parse_kv_pair",
    "validate_url",
]
