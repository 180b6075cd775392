"""CLI command modules."""

from . import parse, tenders

__all__ = [
    "parse",
    "tenders",
]
