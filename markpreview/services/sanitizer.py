"""HTML sanitization policy applied to every rendered fragment."""

import bleach
from bleach.css_sanitizer import CSSSanitizer

ALLOWED_TAGS = frozenset({
    "a", "abbr", "b", "blockquote", "br", "code", "dd", "del", "details",
    "div", "dl", "dt", "em", "h1", "h2", "h3", "h4", "h5", "h6", "hr", "i",
    "img", "input", "ins", "kbd", "li", "mark", "ol", "p", "pre", "s",
    "section", "span", "strong", "sub", "summary", "sup", "table", "tbody",
    "td", "tfoot", "th", "thead", "tr", "ul",
})

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "id", "class", "rel", "target"],
    "img": ["src", "alt", "title", "width", "height"],
    "code": ["class"],
    "pre": ["class"],
    "div": ["class"],
    "span": ["class"],
    "section": ["class"],
    "hr": ["class"],
    "ol": ["class", "start"],
    "ul": ["class"],
    "li": ["class", "id"],
    "sup": ["class"],
    # Column alignment from markdown tables arrives as style="text-align:..."
    "th": ["style"],
    "td": ["style"],
    # Task list checkboxes
    "input": ["class", "type", "checked", "disabled"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

_CSS_SANITIZER = CSSSanitizer(allowed_css_properties=["text-align"])


def sanitize_html(html: str) -> str:
    """Strip tags, attributes and URL schemes outside the allow-lists."""
    if not html:
        return ""
    return bleach.clean(
        html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        css_sanitizer=_CSS_SANITIZER,
        strip=True,
    )
