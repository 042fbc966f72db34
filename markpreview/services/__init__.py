"""Rendering and preview services."""

from .html_truncate import truncate_visible
from .link_wrapper import link_to_markdown
from .markdown_service import (
    first_line_in_markdown,
    random_markdown_tip,
    render_markdown,
    render_wiki_content,
)

__all__ = [
    "truncate_visible",
    "link_to_markdown",
    "first_line_in_markdown",
    "random_markdown_tip",
    "render_markdown",
    "render_wiki_content",
]
