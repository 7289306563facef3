"""Command line entry point.

Loads one Beluga instance and prints it the way the reader screen would.
"""

import argparse
import asyncio
import sys

from beluga_reader.client.feed_client import FeedClient
from beluga_reader.config.settings import Settings, get_settings
from beluga_reader.presenters.console import ConsolePresenter
from beluga_reader.session.feed_session import FeedSession
from beluga_reader.session.state import UiState
from beluga_reader.utils.http_client import create_http_client
from beluga_reader.utils.logger import configure_logging, get_logger

EXIT_CODES = {
    UiState.SUCCESS: 0,
    UiState.FAILED: 1,
    UiState.NOT_FOUND: 2,
}


async def run_cli(url: str, settings: Settings, verbose: bool = False) -> UiState:
    """Load one instance, printing each session transition.

    Args:
        url: Instance URL without trailing slash.
        settings: Application settings.
        verbose: Print failure details.

    Returns:
        Final session state.
    """
    logger = get_logger("cli")
    logger.info("Loading instance", url=url)

    async with create_http_client(
        timeout=settings.http_timeout,
        user_agent=settings.user_agent,
        follow_redirects=settings.follow_redirects,
    ) as http_client:
        session = FeedSession(FeedClient(http_client), instance_url=url)
        session.subscribe(ConsolePresenter(verbose=verbose))

        session.load(url)
        await session.wait_idle()

        state = session.state
        session.close()

    logger.info("Instance loaded", url=url, state=state.value)
    return state


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Beluga Reader - read a Beluga blog feed")
    parser.add_argument(
        "url",
        nargs="?",
        default=settings.default_instance_url,
        help=f"Instance URL without trailing slash (default: {settings.default_instance_url})",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Log level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=settings.log_json,
        help="Emit logs as JSON",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show failure details",
    )
    args = parser.parse_args(argv)

    configure_logging(log_level=args.log_level, json_format=args.json_logs)

    state = asyncio.run(run_cli(args.url, settings, verbose=args.verbose))
    return EXIT_CODES.get(state, 1)


if __name__ == "__main__":
    sys.exit(main())
