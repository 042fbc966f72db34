"""Wrap rendered markdown in a link without producing nested anchors.

Rendering ``"see #12 for details"`` may produce an anchor of its own. Putting
that output inside another ``<a>`` yields ``<a>see <a>#12</a> for details</a>``,
which browsers split apart, leaving the trailing text unlinked. Instead each
top-level text run is wrapped in its own copy of the requested link:
``<a>see </a><a>#12</a><a> for details</a>``.
"""

import logging
from typing import Dict, Optional

from bs4 import BeautifulSoup, NavigableString, Tag

from ..schemas.markup import MarkdownOptions
from .markdown_service import render_inline_markdown
from .sanitizer import sanitize_html

logger = logging.getLogger(__name__)

_ESCAPING_OPTIONS = MarkdownOptions(allow_html=False)


def link_to_markdown(body: str, url: str, attributes: Optional[Dict[str, str]] = None) -> str:
    """Render ``body`` as inline markdown, linking every part of it to ``url``.

    Args:
        body: Link text. Raw HTML is escaped unless the body is an image tag.
        url: Link target.
        attributes: Extra attributes for every generated anchor.

    Returns:
        Sanitized HTML, or ``""`` for a blank body.
    """
    if not body or not body.strip():
        return ""

    if body.lstrip().startswith("<img"):
        rendered = sanitize_html(body)
    else:
        rendered = render_inline_markdown(body, _ESCAPING_OPTIONS)

    fragment = BeautifulSoup(rendered, "html.parser")
    children = list(fragment.contents)

    if len(children) == 1 and isinstance(children[0], Tag) and children[0].name == "a":
        # The whole body rendered as one link; replace it with ours.
        children[0].replace_with(_make_link(fragment, children[0].get_text(), url, attributes))
    else:
        for node in children:
            if isinstance(node, NavigableString):
                node.replace_with(_make_link(fragment, str(node), url, attributes))

    return sanitize_html(str(fragment))


def _make_link(fragment: BeautifulSoup, text: str, url: str, attributes: Optional[Dict[str, str]]) -> Tag:
    anchor = fragment.new_tag("a", attrs={**(attributes or {}), "href": url})
    anchor.string = text
    return anchor
