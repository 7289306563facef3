"""Session state types."""

from dataclasses import dataclass
from enum import Enum

from beluga_reader.models.document import Document
from beluga_reader.models.outcome import FetchOutcome


class UiState(str, Enum):
    """States of a feed session as seen by the presentation layer."""

    INITIAL = "initial"
    LOADING = "loading"
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable view of a session at one point in time.

    Attributes:
        state: Current UI state.
        document: Last successfully loaded document, kept across failures.
        instance_url: URL of the most recent load() call.
        outcome: Outcome that produced the current state. None while loading,
            before the first result and after an unexpected fetch failure.
    """

    state: UiState
    document: Document | None = None
    instance_url: str | None = None
    outcome: FetchOutcome | None = None
