"""Markdown/asciidoc rendering façade.

Picks the renderer for a content format, runs it, and hands back sanitized
HTML. Everything downstream (previews, link wrapping, truncation) relies on
that guarantee and does no sanitization of its own.

Markdown goes through markdown-it-py. Asciidoc has no bundled engine: a
renderer callable is registered at startup from ``ASCIIDOC_RENDERER``.
"""

import importlib
import logging
import random
from enum import Enum
from functools import lru_cache
from typing import Any, Callable, Optional

from markdown_it import MarkdownIt
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from ..exceptions import RenderError, RendererUnavailableError, UnsupportedFormatError
from ..schemas.markup import MarkdownOptions, WikiPage
from .html_truncate import truncate_visible
from .sanitizer import sanitize_html

logger = logging.getLogger(__name__)

AsciidocRenderer = Callable[..., str]

_asciidoc_renderer: Optional[AsciidocRenderer] = None


class ContentFormat(str, Enum):
    """Source formats with a dedicated renderer."""
    MARKDOWN = "markdown"
    ASCIIDOC = "asciidoc"


MARKDOWN_TIPS = (
    "End a line with two or more spaces for a line-break, or soft-return",
    "Inline code can be denoted by `surrounding it with backticks`",
    "Blocks of code can be denoted by three backticks ``` or four leading spaces",
    "Emoji can be added by :emoji_name:, for example :thumbsup:",
    "Notify other participants using @user_name",
    "Notify a specific group using @group_name",
    "Notify the entire team using @all",
    "Reference an issue using a hash, for example issue #123",
    "Reference a merge request using an exclamation point, for example MR !123",
    "Italicize words or phrases using *asterisks* or _underscores_",
    "Bold words or phrases using **double asterisks** or __double underscores__",
    "Strikethrough words or phrases using ~~two tildes~~",
    "Make a bulleted list using + pluses, - minuses, or * asterisks",
    "Denote blockquotes using > at the beginning of a line",
    "Make a horizontal line using three or more hyphens ---, asterisks ***, or underscores ___",
)


@lru_cache(maxsize=32)
def _build_renderer(options: MarkdownOptions) -> MarkdownIt:
    """One markdown-it instance per distinct option set."""
    md = MarkdownIt(
        "commonmark",
        {
            "html": options.allow_html,
            "breaks": options.hard_wrap,
            "typographer": options.typographer,
        },
    )
    if options.tables:
        md.enable("table")
    if options.strikethrough:
        md.enable("strikethrough")
    if options.typographer:
        md.enable(["replacements", "smartquotes"])
    if options.footnotes:
        md.use(footnote_plugin)
    if options.task_lists:
        md.use(tasklists_plugin)
    return md


def render_markdown(text: str, options: Optional[MarkdownOptions] = None) -> str:
    """Render markdown text to sanitized HTML."""
    if not text:
        return ""
    html = _build_renderer(options or MarkdownOptions()).render(text)
    return sanitize_html(html)


def render_inline_markdown(text: str, options: Optional[MarkdownOptions] = None) -> str:
    """Render a single line of markdown without a wrapping paragraph."""
    if not text:
        return ""
    html = _build_renderer(options or MarkdownOptions()).renderInline(text)
    return sanitize_html(html)


def register_asciidoc_renderer(renderer: Optional[AsciidocRenderer]) -> None:
    """Install (or with None, remove) the asciidoc renderer callable."""
    global _asciidoc_renderer
    _asciidoc_renderer = renderer


def load_asciidoc_renderer(import_path: str) -> AsciidocRenderer:
    """Resolve ``"package.module:callable"`` to the callable it names."""
    module_name, _, attr = import_path.partition(":")
    module = importlib.import_module(module_name)
    renderer = getattr(module, attr)
    if not callable(renderer):
        raise TypeError(f"{import_path} is not callable")
    return renderer


def asciidoc_available() -> bool:
    return _asciidoc_renderer is not None


def render_asciidoc(text: str, **context: Any) -> str:
    """Render asciidoc text through the registered renderer.

    ``context`` (project, ref, requested path, ...) is passed through to the
    renderer untouched.

    Raises:
        RendererUnavailableError: No asciidoc renderer is registered.
        RenderError: The renderer raised.
    """
    if _asciidoc_renderer is None:
        raise RendererUnavailableError(ContentFormat.ASCIIDOC.value)
    if not text:
        return ""
    try:
        html = _asciidoc_renderer(text, **context)
    except Exception as e:
        logger.exception("Asciidoc renderer failed")
        raise RenderError(ContentFormat.ASCIIDOC.value, e) from e
    return sanitize_html(html)


def render_wiki_content(
    page: WikiPage,
    options: Optional[MarkdownOptions] = None,
    **context: Any,
) -> str:
    """Render a wiki page according to its format.

    Formats without a renderer fall back to the page's pre-rendered HTML,
    which is sanitized like everything else.

    Raises:
        UnsupportedFormatError: Unknown format and no pre-rendered content.
    """
    if page.format == ContentFormat.MARKDOWN:
        return render_markdown(page.content, options)
    if page.format == ContentFormat.ASCIIDOC:
        return render_asciidoc(page.content, **context)
    if page.formatted_content is None:
        raise UnsupportedFormatError(page.format)
    return sanitize_html(page.formatted_content)


def first_line_in_markdown(
    text: str,
    max_chars: Optional[int] = None,
    options: Optional[MarkdownOptions] = None,
) -> str:
    """Return the first line of ``text`` as HTML, up to ``max_chars`` visible characters.

    Markup in the rendered output does not count toward ``max_chars``. When
    the limit falls inside an element, its text is shortened and its closing
    tag kept. Without ``max_chars`` only the first-line rule applies.
    """
    html = render_markdown(text, options).strip()
    if not html:
        return ""
    return truncate_visible(html, max_chars if max_chars is not None else len(html))


def random_markdown_tip() -> str:
    """Return a random markdown tip for use as a textarea placeholder."""
    return random.choice(MARKDOWN_TIPS)
