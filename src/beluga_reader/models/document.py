"""Beluga feed document models.

Field names match the beluga.json wire identifiers, so a body validates
straight into these models. All models are frozen: a Document is never
mutated after decoding, a newer load produces a new instance.
"""

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# Calendar date, T separator, at least hours and minutes
_DATE_TIME_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 offset date-time as used by date_published/date_modified.

    Date-only values, week dates and date-times without a UTC offset are
    rejected.

    Example: 2025-03-01T08:00:00+02:00, 2025-03-01T08:00:00Z

    Raises:
        ValueError: If the value is not an ISO-8601 offset date-time.
    """
    if not _DATE_TIME_PREFIX.match(value):
        raise ValueError(f"expected YYYY-MM-DDTHH:MM..., got {value!r}")
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        raise ValueError(f"missing UTC offset in {value!r}")
    return parsed


class _WireModel(BaseModel):
    # Unknown wire fields are dropped, not rejected
    model_config = ConfigDict(frozen=True, extra="ignore")


class Attachment(_WireModel):
    """A linked resource (image, file) attached to a post."""

    id: str = Field(..., description="Attachment identifier")
    hash_digest: str = Field(..., description="Content digest of the resource")
    link_title: str = Field(..., description="Display title for the link")
    link_url: str = Field(..., description="URL of the resource")
    index: int = Field(..., strict=True, description="Ordering hint, carried as data only")


class Author(_WireModel):
    """Blog author. Authors carry no identity beyond their name."""

    name: str = Field(..., description="Display name")
    avatar: str = Field(..., description="Avatar image URL")


class Post(_WireModel):
    """A single blog post."""

    id: str = Field(..., description="Post identifier, unique within a document")
    url: str = Field(..., description="Permalink")
    content_text: str = Field(..., description="Plain text body")
    content_html: str = Field(..., description="HTML body")
    date_published: str = Field(..., description="ISO-8601 publication time")
    date_modified: str | None = Field(default=None, description="ISO-8601 modification time")
    attachments: tuple[Attachment, ...] = Field(..., description="Attachments in server order")

    @field_validator("date_published", "date_modified")
    @classmethod
    def _check_timestamp(cls, value: str | None) -> str | None:
        # Keep the wire string verbatim, only check that it parses
        if value is not None:
            try:
                parse_timestamp(value)
            except ValueError as e:
                raise ValueError(f"not an ISO-8601 date-time: {value!r}") from e
        return value

    @property
    def published_at(self) -> datetime:
        """Publication time as a datetime."""
        return parse_timestamp(self.date_published)

    @property
    def modified_at(self) -> datetime | None:
        """Modification time as a datetime, None if the post was never modified."""
        if self.date_modified is None:
            return None
        return parse_timestamp(self.date_modified)


class Document(_WireModel):
    """Parsed beluga.json feed for one instance.

    Authors and posts keep the order the server sent them in; that order
    is the render order.
    """

    home_page_url: str = Field(..., description="Blog home page URL")
    authors: tuple[Author, ...] = Field(..., description="Authors in server order")
    posts: tuple[Post, ...] = Field(..., description="Posts in server order")

    @model_validator(mode="after")
    def _check_unique_post_ids(self) -> "Document":
        seen: set[str] = set()
        for post in self.posts:
            if post.id in seen:
                raise ValueError(f"duplicate post id: {post.id!r}")
            seen.add(post.id)
        return self

    @property
    def primary_author(self) -> Author | None:
        """First listed author, or None if the feed lists no authors."""
        return self.authors[0] if self.authors else None

    def author_of(self, post: Post) -> Author | None:
        """Return the author to display for a post.

        The feed format has no per-post author reference, so every post
        is attributed to the primary author.
        """
        return self.primary_author

    def get_post(self, post_id: str) -> Post | None:
        """Look up a post by id."""
        for post in self.posts:
            if post.id == post_id:
                return post
        return None
