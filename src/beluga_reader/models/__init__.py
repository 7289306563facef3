"""Models package."""

from beluga_reader.models.document import Attachment, Author, Document, Post
from beluga_reader.models.outcome import (
    FetchOutcome,
    HttpError,
    NotFound,
    Ok,
    ParseError,
    TransportError,
)

__all__ = [
    "Attachment",
    "Author",
    "Document",
    "Post",
    "FetchOutcome",
    "Ok",
    "NotFound",
    "HttpError",
    "ParseError",
    "TransportError",
]
