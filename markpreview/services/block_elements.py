"""Block-level classification of HTML elements.

Static lookup owned by this project rather than read from parser metadata,
so the truncator behaves the same whichever BeautifulSoup tree builder is
installed.
"""

BLOCK_ELEMENTS = frozenset({
    "address", "article", "aside", "blockquote", "body", "caption",
    "center", "col", "colgroup", "dd", "details", "dialog", "dir", "div",
    "dl", "dt", "fieldset", "figcaption", "figure", "footer", "form",
    "h1", "h2", "h3", "h4", "h5", "h6", "header", "hgroup", "hr", "html",
    "li", "main", "menu", "nav", "noscript", "ol", "p", "pre", "section",
    "summary", "table", "tbody", "td", "tfoot", "th", "thead", "tr", "ul",
})
"""
Elements that start on their own line by HTML convention.

Everything else (span, em, strong, a, code, sup, img, br, ...) flows inline.
"""

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input", "link",
    "meta", "source", "track", "wbr",
})
"""Elements that never have children and so cannot carry a truncation marker."""


def is_block_element(name: str) -> bool:
    """Return True when the tag name is a block-level HTML element."""
    return name.lower() in BLOCK_ELEMENTS


def can_hold_marker(name: str) -> bool:
    """Return True when text may be appended inside the element."""
    return name.lower() not in VOID_ELEMENTS
