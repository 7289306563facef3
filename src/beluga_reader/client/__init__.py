"""Client package."""

from beluga_reader.client.base import FeedFetcher
from beluga_reader.client.feed_client import FEED_PATH, FeedClient, feed_url

__all__ = [
    "FeedFetcher",
    "FeedClient",
    "FEED_PATH",
    "feed_url",
]
