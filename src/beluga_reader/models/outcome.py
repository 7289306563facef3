"""Fetch outcome models.

A fetch attempt ends in exactly one of these values. Expected failures
travel as data so the caller can tell a missing feed apart from a broken
one.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from beluga_reader.models.document import Document


class _Outcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def is_success(self) -> bool:
        """Whether the fetch produced a document."""
        return False


class Ok(_Outcome):
    """Success status and a well-formed document."""

    kind: Literal["ok"] = "ok"
    document: Document

    @property
    def is_success(self) -> bool:
        return True


class NotFound(_Outcome):
    """HTTP 404: the URL is not a Beluga instance."""

    kind: Literal["not_found"] = "not_found"


class HttpError(_Outcome):
    """Any non-success status other than 404."""

    kind: Literal["http_error"] = "http_error"
    status_code: int = Field(..., description="HTTP status code returned")


class ParseError(_Outcome):
    """Success status, but the body is not a valid Beluga document."""

    kind: Literal["parse_error"] = "parse_error"
    detail: str = Field(..., description="What was wrong with the body")


class TransportError(_Outcome):
    """No response obtained (connection, DNS, timeout, bad URL)."""

    kind: Literal["transport_error"] = "transport_error"
    detail: str = Field(..., description="Transport failure description")


FetchOutcome = Ok | NotFound | HttpError | ParseError | TransportError
