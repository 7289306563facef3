"""Beluga feed client.

Performs one fetch-and-decode cycle per call and classifies the result.
"""

import httpx
import structlog

from beluga_reader.exceptions import DecodeError
from beluga_reader.models.outcome import (
    FetchOutcome,
    HttpError,
    NotFound,
    Ok,
    ParseError,
    TransportError,
)
from beluga_reader.parsers.base import FeedParser
from beluga_reader.parsers.beluga_parser import BelugaParser

logger = structlog.get_logger()

FEED_PATH = "/beluga.json"


def feed_url(base_url: str) -> str:
    """Build the feed URL for an instance.

    The path is appended as-is: callers pass the instance URL without a
    trailing slash.

    Example: https://example.test -> https://example.test/beluga.json
    """
    return f"{base_url}{FEED_PATH}"


class FeedClient:
    """Client for the beluga.json well-known feed.

    Holds no state between calls. The HTTP client and parser are injected
    so both can be swapped in tests.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        parser: FeedParser | None = None,
    ):
        """Initialize feed client.

        Args:
            http_client: Async HTTP client used for the GET request. The
                caller owns it and is responsible for closing it.
            parser: Body decoder. Defaults to BelugaParser.
        """
        self._http_client = http_client
        self._parser = parser or BelugaParser()

    async def fetch(self, base_url: str) -> FetchOutcome:
        """Fetch and decode the feed of one instance.

        Issues exactly one GET request, no retries.

        Args:
            base_url: Instance URL, without a trailing slash.

        Returns:
            Ok with the document on success, NotFound on 404, HttpError on
            any other non-success status, ParseError when a success body
            does not decode, TransportError when no response was obtained.
        """
        url = feed_url(base_url)
        log = logger.bind(url=url)

        try:
            response = await self._http_client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            detail = str(e) or type(e).__name__
            log.warning("Feed request failed", error_type=type(e).__name__, error=detail)
            return TransportError(detail=detail)

        if response.status_code == httpx.codes.NOT_FOUND:
            log.warning("Feed not found", status_code=response.status_code)
            return NotFound()

        if not response.is_success:
            log.warning(
                "Feed request returned error status",
                status_code=response.status_code,
                body=response.text[:200],
            )
            return HttpError(status_code=response.status_code)

        try:
            document = self._parser.parse(response.content, url)
        except DecodeError as e:
            log.warning("Feed body could not be decoded", error=e.detail)
            return ParseError(detail=e.detail)

        log.debug(
            "Feed fetched",
            author_count=len(document.authors),
            post_count=len(document.posts),
        )
        return Ok(document=document)
