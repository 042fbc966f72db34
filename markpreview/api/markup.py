"""Markup API endpoints.

Endpoints are thin: they bound input size and delegate to the services.
"""

from fastapi import APIRouter

from ..core.config import settings
from ..exceptions import InputTooLargeError
from ..schemas.markup import (
    HtmlResponse,
    LinkRequest,
    PreviewRequest,
    RenderRequest,
    TipResponse,
    TruncateRequest,
    WikiPage,
)
from ..services import (
    first_line_in_markdown,
    link_to_markdown,
    random_markdown_tip,
    render_wiki_content,
    truncate_visible,
)

router = APIRouter(prefix="/api/markup", tags=["markup"])


def _check_size(field: str, value: str) -> None:
    if len(value) > settings.max_input_chars:
        raise InputTooLargeError(field, len(value), settings.max_input_chars)


@router.post("/render", response_model=HtmlResponse)
def render(request: RenderRequest):
    """Render page text to sanitized HTML according to its format."""
    _check_size("text", request.text)
    if request.formatted_content is not None:
        _check_size("formatted_content", request.formatted_content)

    page = WikiPage(
        content=request.text,
        format=request.format,
        formatted_content=request.formatted_content,
    )
    return HtmlResponse(html=render_wiki_content(page, request.options))


@router.post("/preview", response_model=HtmlResponse)
def preview(request: PreviewRequest):
    """First-line preview of markdown text for list views."""
    _check_size("text", request.text)
    max_chars = request.max_chars if request.max_chars is not None else settings.preview_max_chars
    return HtmlResponse(html=first_line_in_markdown(request.text, max_chars, request.options))


@router.post("/truncate", response_model=HtmlResponse)
def truncate(request: TruncateRequest):
    """Shorten rendered HTML to a visible-character budget."""
    _check_size("html", request.html)
    return HtmlResponse(html=truncate_visible(request.html, request.max_chars))


@router.post("/link", response_model=HtmlResponse)
def link(request: LinkRequest):
    """Render markdown as link text pointing at ``url``."""
    _check_size("body", request.body)
    return HtmlResponse(html=link_to_markdown(request.body, request.url, request.attributes))


@router.get("/tip", response_model=TipResponse)
def tip():
    """Random markdown tip for editor placeholders."""
    return TipResponse(tip=random_markdown_tip())
