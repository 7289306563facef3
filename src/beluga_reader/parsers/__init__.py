"""Parsers package."""

from beluga_reader.parsers.base import FeedParser
from beluga_reader.parsers.beluga_parser import BelugaParser

__all__ = [
    "FeedParser",
    "BelugaParser",
]
