"""Presenters package."""

from beluga_reader.presenters.console import ConsolePresenter, render_document, render_snapshot

__all__ = [
    "ConsolePresenter",
    "render_document",
    "render_snapshot",
]
