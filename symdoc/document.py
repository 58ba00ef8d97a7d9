"""Data model for a rendered output document."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Document:
    """A rendered Markdown page for one symbol."""

    path: str  # relative file path, e.g. foo-bar.md
    title: str
    content: str
