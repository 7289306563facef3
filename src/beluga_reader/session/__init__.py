"""Session package."""

from beluga_reader.session.feed_session import FeedSession, Observer
from beluga_reader.session.state import SessionSnapshot, UiState

__all__ = [
    "FeedSession",
    "Observer",
    "SessionSnapshot",
    "UiState",
]
