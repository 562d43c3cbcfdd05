"""
CLI Commands.

One module per command family.
"""

from quickhttp.cli.commands.http import get, post

__all__ = [
    "get",
    "post",
]
