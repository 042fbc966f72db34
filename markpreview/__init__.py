"""markpreview: markdown rendering and visible-length HTML previews."""

from .services import first_line_in_markdown, truncate_visible

__all__ = ["first_line_in_markdown", "truncate_visible"]
