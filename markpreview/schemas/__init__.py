"""Pydantic schemas for request/response validation."""

from .markup import (
    MarkdownOptions,
    WikiPage,
    RenderRequest,
    PreviewRequest,
    TruncateRequest,
    LinkRequest,
    HtmlResponse,
    TipResponse,
)

__all__ = [
    "MarkdownOptions",
    "WikiPage",
    "RenderRequest",
    "PreviewRequest",
    "TruncateRequest",
    "LinkRequest",
    "HtmlResponse",
    "TipResponse",
]
