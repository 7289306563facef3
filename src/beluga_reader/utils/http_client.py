"""HTTP client utilities.

Provides configured HTTP client with sensible defaults.
"""

import httpx

DEFAULT_USER_AGENT = "BelugaReader/0.1"


def create_http_client(
    timeout: float | None = None,
    user_agent: str = DEFAULT_USER_AGENT,
    follow_redirects: bool = True,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a configured async HTTP client.

    Args:
        timeout: Request timeout in seconds. None keeps httpx's default.
        user_agent: User-Agent header value.
        follow_redirects: Whether to follow redirects.
        transport: Optional transport override (e.g. httpx.MockTransport).

    Returns:
        Configured httpx.AsyncClient.
    """
    kwargs: dict = {
        "headers": {"User-Agent": user_agent, "Accept": "application/json"},
        "follow_redirects": follow_redirects,
    }
    if timeout is not None:
        kwargs["timeout"] = timeout
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.AsyncClient(**kwargs)
