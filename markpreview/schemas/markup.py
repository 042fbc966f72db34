"""Markup rendering schemas."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional


class MarkdownOptions(BaseModel):
    """Markdown renderer switches.

    Frozen so that each distinct option set maps to one cached renderer.
    """
    model_config = ConfigDict(frozen=True)

    tables: bool = True
    strikethrough: bool = True
    footnotes: bool = True
    task_lists: bool = False
    hard_wrap: bool = False  # Single newlines become <br>
    allow_html: bool = True  # Raw HTML passes through to the sanitizer
    typographer: bool = False


class WikiPage(BaseModel):
    """A stored page: source text, its format, and optional pre-rendered HTML."""
    content: str = ""
    format: str = "markdown"
    formatted_content: Optional[str] = None


class RenderRequest(BaseModel):
    """Schema for rendering a page body to HTML."""
    text: str
    format: str = "markdown"
    formatted_content: Optional[str] = None
    options: MarkdownOptions = Field(default_factory=MarkdownOptions)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "text": "# Release notes\n\nFixes **two** crashes.",
                    "format": "markdown",
                }
            ]
        }
    }


class PreviewRequest(BaseModel):
    """Schema for a first-line preview of markdown text."""
    text: str
    max_chars: Optional[int] = Field(default=None, ge=0)
    options: MarkdownOptions = Field(default_factory=MarkdownOptions)


class TruncateRequest(BaseModel):
    """Schema for truncating already rendered HTML."""
    html: str
    max_chars: int = Field(ge=0)


class LinkRequest(BaseModel):
    """Schema for wrapping rendered markdown in a link."""
    body: str
    url: str = Field(min_length=1)
    attributes: Dict[str, str] = Field(default_factory=dict)


class HtmlResponse(BaseModel):
    """Rendered HTML fragment."""
    html: str


class TipResponse(BaseModel):
    """Markdown usage tip."""
    tip: str
