"""Beluga Reader - client for the Beluga blog feed format."""

from beluga_reader.client.feed_client import FeedClient
from beluga_reader.models.document import Attachment, Author, Document, Post
from beluga_reader.models.outcome import (
    FetchOutcome,
    HttpError,
    NotFound,
    Ok,
    ParseError,
    TransportError,
)
from beluga_reader.session.feed_session import FeedSession
from beluga_reader.session.state import SessionSnapshot, UiState

__version__ = "0.1.0"

__all__ = [
    "FeedClient",
    "FeedSession",
    "SessionSnapshot",
    "UiState",
    "Document",
    "Author",
    "Post",
    "Attachment",
    "FetchOutcome",
    "Ok",
    "NotFound",
    "HttpError",
    "ParseError",
    "TransportError",
]
