"""Markdown to HTML rendering."""

import markdown

from src.core.config import settings


def render_markdown(text: str) -> str:
    """Render markdown to an HTML fragment.

    A fresh converter is built per call so rendering stays pure; the output is
    returned as-is and inserted into pages verbatim.
    """
    return markdown.markdown(text, extensions=settings.markdown_extensions)
