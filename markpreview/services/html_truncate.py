"""Visible-length truncation of rendered HTML.

Markup never counts toward the limit: only the characters of text nodes do.
The fragment is parsed with BeautifulSoup, walked once in document order and
shortened in place, so every element that survives keeps its closing tag.

A truncated fragment ends with ``...``. The marker lands either inside the
text node where the budget ran out (or where a soft line break was found), or
at the end of the first block element that is followed by more content.
"""

import logging
import re
from dataclasses import dataclass

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.element import PreformattedString
from bs4.formatter import HTMLFormatter

from ..exceptions import ValidationError
from .block_elements import can_hold_marker, is_block_element

TRUNCATION_MARKER = "..."

# Trailing run of whitespace plus the partial word after it.
_PARTIAL_WORD = re.compile(r"\s+\S*$")

# Minimal escaping (&, <, >) and HTML-style void elements: <br>, not <br/>.
_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)

logger = logging.getLogger(__name__)


@dataclass
class _TruncationState:
    """Running totals for one truncate_visible call."""
    max_chars: int
    content_length: int = 0
    truncated: bool = False

    @property
    def remaining(self) -> int:
        return self.max_chars - self.content_length


def truncate_visible(html: str, max_chars: int) -> str:
    """Return ``html`` shortened to at most ``max_chars`` visible characters.

    Args:
        html: Well-formed, already sanitized HTML fragment.
        max_chars: Visible-character budget. ``...`` markers are not counted.

    Returns:
        Serialized HTML fragment. Unchanged (modulo serialization) when the
        text fits and no block boundary is followed by more content.

    Raises:
        ValidationError: If ``max_chars`` is negative.
    """
    if max_chars < 0:
        raise ValidationError("max_chars must be zero or greater", field="max_chars")
    if not html:
        return ""

    fragment = BeautifulSoup(html, "html.parser")
    state = _TruncationState(max_chars=max_chars)
    _walk(fragment, state)

    if state.truncated:
        logger.debug(
            "Truncated HTML fragment",
            extra={"max_chars": max_chars, "content_length": state.content_length},
        )
    return fragment.decode(formatter=_FORMATTER)


def _walk(parent: Tag, state: _TruncationState) -> None:
    # Children first: a block is only a boundary once its own text is counted.
    for node in list(parent.contents):
        if isinstance(node, Tag):
            _walk(node, state)
            _visit_element(node, state)
        elif _is_text(node):
            _visit_text(node, state)
        elif state.truncated:
            node.extract()


def _visit_text(node: NavigableString, state: _TruncationState) -> None:
    if state.truncated:
        node.extract()
        return

    text = str(node)
    if not text.strip():
        # Spaces between inline siblings are read; indentation between blocks is not.
        if _is_inline_whitespace(node):
            if len(text) > state.remaining:
                node.extract()
            else:
                state.content_length += len(text)
        return

    cut = False
    if "\n" in text.strip():
        text = _first_line(text)
        cut = True

    if len(text) > state.remaining:
        text = _shorten(text, state.remaining)
        cut = True

    state.content_length += len(text)
    if cut:
        node.replace_with(text + TRUNCATION_MARKER)
        state.truncated = True


def _visit_element(tag: Tag, state: _TruncationState) -> None:
    if state.truncated:
        # Ancestors of the cut keep their text; everything after it goes.
        if not _has_visible_text(tag):
            tag.extract()
        return

    if (
        is_block_element(tag.name)
        and can_hold_marker(tag.name)
        and _has_visible_text(tag)
        and _has_following_content(tag)
    ):
        tag.append(TRUNCATION_MARKER)
        state.truncated = True


def _is_text(node) -> bool:
    """Comments, CDATA, doctypes and processing instructions are not visible."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def _has_visible_text(tag: Tag) -> bool:
    return any(_is_text(node) and node.strip() for node in tag.descendants)


def _is_inline_whitespace(node: NavigableString) -> bool:
    parent = node.parent
    if isinstance(parent, Tag) and not isinstance(parent, BeautifulSoup) and not is_block_element(parent.name):
        return True
    return (
        _flows_inline(_nearest_sibling(node.previous_siblings))
        and _flows_inline(_nearest_sibling(node.next_siblings))
    )


def _nearest_sibling(siblings):
    for sibling in siblings:
        if isinstance(sibling, Tag) or _is_text(sibling):
            return sibling
    return None


def _flows_inline(node) -> bool:
    if node is None:
        return False
    if isinstance(node, Tag):
        return not is_block_element(node.name)
    return True


def _has_following_content(tag: Tag) -> bool:
    for sibling in tag.next_siblings:
        if isinstance(sibling, Tag) or (_is_text(sibling) and sibling.strip()):
            return True
    return False


def _first_line(text: str) -> str:
    """Text up to the first line break that follows visible characters."""
    start = len(text) - len(text.lstrip())
    end = text.find("\n", start)
    if end == -1:
        return text
    return text[:end].rstrip()


def _shorten(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, preferring a word boundary."""
    if limit <= 0:
        return ""

    shortened = text[:limit]
    if len(text) > limit and not text[limit].isspace():
        match = _PARTIAL_WORD.search(shortened)
        if match and shortened[:match.start()].strip():
            shortened = shortened[:match.start()]
    return shortened.rstrip()
