"""Custom exceptions for Beluga Reader.

Provides a structured exception hierarchy for different error scenarios.
Expected fetch failures are reported as outcome values (see
``beluga_reader.models.outcome``); these exceptions cover the seams where
a failure has to travel as a raised error.
"""


class BelugaReaderError(Exception):
    """Base exception class for all Beluga Reader errors."""

    pass


class DecodeError(BelugaReaderError):
    """Raised when a beluga.json body cannot be decoded into a Document.

    Attributes:
        source: The URL (or other label) of the body that failed to decode.
        detail: Description of what was wrong with the body.
    """

    def __init__(self, source: str, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"Failed to decode {source}: {detail}")


class SessionClosedError(BelugaReaderError):
    """Raised when load() is called on a session that has been closed."""

    pass
