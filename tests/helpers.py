"""Assertion helpers shared by the rendering and truncation tests."""

from bs4 import BeautifulSoup

from markpreview.services.html_truncate import TRUNCATION_MARKER


def visible_text(html: str) -> str:
    """Concatenated text of a fragment, as a reader would see it."""
    return BeautifulSoup(html, "html.parser").get_text()


def visible_length(html: str) -> int:
    """Characters a browser shows, markers excluded and whitespace runs collapsed."""
    text = visible_text(html).replace(TRUNCATION_MARKER, "")
    return len(" ".join(text.split()))
