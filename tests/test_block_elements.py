"""Tests for block-level element classification."""

import pytest

from markpreview.services.block_elements import can_hold_marker, is_block_element


class TestIsBlockElement:

    @pytest.mark.parametrize("name", ["p", "div", "li", "ul", "ol", "h1", "h6", "blockquote", "table", "td", "pre"])
    def test_block_elements(self, name):
        assert is_block_element(name) is True

    @pytest.mark.parametrize("name", ["span", "em", "strong", "a", "code", "img", "br", "sup"])
    def test_inline_elements(self, name):
        assert is_block_element(name) is False

    def test_case_insensitive(self):
        assert is_block_element("DIV") is True

    def test_unknown_element_is_inline(self):
        assert is_block_element("custom-widget") is False


class TestCanHoldMarker:

    def test_void_elements(self):
        assert can_hold_marker("hr") is False
        assert can_hold_marker("br") is False

    def test_container_elements(self):
        assert can_hold_marker("p") is True
        assert can_hold_marker("li") is True
