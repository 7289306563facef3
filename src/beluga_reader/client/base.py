"""Abstract feed fetcher interface using Protocol."""

from typing import Protocol

from beluga_reader.models.outcome import FetchOutcome


class FeedFetcher(Protocol):
    """Feed fetch abstraction protocol.

    FeedSession depends on this rather than on FeedClient so that any
    fetch-and-decode implementation can drive it.
    """

    async def fetch(self, base_url: str) -> FetchOutcome:
        """Fetch and decode the feed of one instance.

        Args:
            base_url: Instance URL, without a trailing slash.

        Returns:
            FetchOutcome describing the result. Expected failures are
            returned, not raised.
        """
        ...
