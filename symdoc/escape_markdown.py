"""Escaping and whitespace helpers for Markdown text."""

import re

# Backslash must be in the class so existing backslashes are escaped too.
MARKDOWN_SPECIAL_RE = re.compile(r"([\\<>()#`\[\]])")
LEADING_SPACES_RE = re.compile(r"^[ \t]+", flags=re.MULTILINE)


def escape_markdown_characters(text: str) -> str:
    r"""Backslash-escape Markdown's reserved characters in a single pass.

    Not idempotent: escaping ``\(`` again yields ``\\\(``.
    """
    return MARKDOWN_SPECIAL_RE.sub(r"\\\1", text)


def strip_leading_whitespace(text: str) -> str:
    """Remove leading spaces and tabs from every line."""
    return LEADING_SPACES_RE.sub("", text)


def one_line(text: str) -> str:
    """Collapse text onto a single line."""
    return text.replace("\r\n", " ").replace("\n", " ").strip()


def table_cell(text: str) -> str:
    """Make text safe for a Markdown table cell."""
    return one_line(text).replace("|", "\\|")
