"""Plain text presentation of a feed session.

Observes session snapshots and renders them; never touches session state.
"""

import sys
from typing import TextIO

from beluga_reader.client.feed_client import FEED_PATH
from beluga_reader.models.document import Author, Document, Post
from beluga_reader.models.outcome import HttpError, ParseError, TransportError
from beluga_reader.session.state import SessionSnapshot, UiState

DATE_FORMAT = "%Y-%m-%d %H:%M"

FAILED_MESSAGE = "An error occurred. Please try again."


def not_found_message(instance_url: str | None) -> str:
    """Message shown when the instance has no feed file."""
    return (
        f"Could not find file {FEED_PATH.lstrip('/')} at {instance_url}. "
        "Make sure you entered the main page without slash at the end"
    )


def failure_detail(snapshot: SessionSnapshot) -> str | None:
    """Technical detail of a failed load, if the outcome carries one."""
    outcome = snapshot.outcome
    if isinstance(outcome, HttpError):
        return f"HTTP {outcome.status_code}"
    if isinstance(outcome, (ParseError, TransportError)):
        return outcome.detail
    return None


def render_authors(authors: tuple[Author, ...]) -> str:
    return "  ".join(author.name for author in authors)


def render_post(post: Post, author: Author | None) -> str:
    """Render one post with its header line and attachments."""
    header = post.published_at.strftime(DATE_FORMAT)
    if author is not None:
        header = f"{author.name}  {header}"
    if post.modified_at is not None:
        header += f" (edited {post.modified_at.strftime(DATE_FORMAT)})"

    lines = [header, post.content_text]
    for attachment in post.attachments:
        lines.append(f"  [{attachment.index}] {attachment.link_title} <{attachment.link_url}>")
    return "\n".join(lines)


def render_document(document: Document) -> str:
    """Render authors followed by posts in server order."""
    blocks = [render_authors(document.authors)]
    for post in document.posts:
        blocks.append(render_post(post, document.author_of(post)))
    return "\n\n".join(blocks)


def render_snapshot(snapshot: SessionSnapshot, verbose: bool = False) -> str:
    """Render a snapshot the way the reader screen shows it.

    Args:
        snapshot: Session snapshot to render.
        verbose: Append the technical failure detail to FAILED.

    Returns:
        Rendered text, empty for the initial state.
    """
    if snapshot.state == UiState.LOADING:
        return f"Loading {snapshot.instance_url}..."
    if snapshot.state == UiState.NOT_FOUND:
        return not_found_message(snapshot.instance_url)
    if snapshot.state == UiState.FAILED:
        detail = failure_detail(snapshot) if verbose else None
        return f"{FAILED_MESSAGE} ({detail})" if detail else FAILED_MESSAGE
    if snapshot.state == UiState.SUCCESS and snapshot.document is not None:
        return render_document(snapshot.document)
    return ""


class ConsolePresenter:
    """Session observer that writes every transition to a text stream."""

    def __init__(self, stream: TextIO | None = None, verbose: bool = False):
        """Initialize console presenter.

        Args:
            stream: Output stream. Defaults to stdout.
            verbose: Include failure details in FAILED output.
        """
        self._stream = stream or sys.stdout
        self._verbose = verbose

    def __call__(self, snapshot: SessionSnapshot) -> None:
        text = render_snapshot(snapshot, verbose=self._verbose)
        if text:
            print(text, file=self._stream)
