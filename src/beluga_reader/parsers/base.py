"""Abstract feed parser interface using Protocol."""

from typing import Protocol

from beluga_reader.models.document import Document


class FeedParser(Protocol):
    """Feed body decoder abstraction protocol."""

    def parse(self, raw_content: bytes | str, source: str) -> Document:
        """Decode a feed body into a Document.

        Args:
            raw_content: Raw response body.
            source: Label of the body (usually its URL) for error messages.

        Returns:
            Parsed Document.

        Raises:
            DecodeError: When the body is not a valid document.
        """
        ...
