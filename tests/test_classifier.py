"""Tests for resource kinds and menu/text classification."""

import pytest
from gopher_tui.core.classifier import (
    MAX_PROBE_LENGTH,
    ResourceKind,
    is_menu_response,
)

MENU_BODY = b"1Files\t/files\texample.org\t70\r\n.\r\n"
TEXT_BODY = b"Just some text\nwith two lines\n"


class TestResourceKind:
    """Tests for ResourceKind."""

    @pytest.mark.parametrize("tag,kind", [
        ("0", ResourceKind.TEXT),
        ("1", ResourceKind.DIRECTORY),
        ("3", ResourceKind.ERROR),
        ("7", ResourceKind.SEARCH),
        ("9", ResourceKind.BINARY),
        ("g", ResourceKind.GIF),
        ("I", ResourceKind.IMAGE),
        ("h", ResourceKind.HTML),
        ("i", ResourceKind.INFO),
    ])
    def test_known_tags(self, tag, kind):
        """Known tags map to their kinds."""
        assert ResourceKind.from_tag(tag) is kind

    @pytest.mark.parametrize("tag", ["x", "?", "+", "Z", "\x00"])
    def test_unknown_tags(self, tag):
        """Anything else is UNKNOWN."""
        assert ResourceKind.from_tag(tag) is ResourceKind.UNKNOWN


class TestIsMenuResponse:
    """Tests for is_menu_response."""

    def test_text_selector_is_never_menu(self):
        """A type 0 selector is text even when the body looks like a menu."""
        assert is_menu_response("0/about.txt", MENU_BODY) is False
        assert is_menu_response("0/about.txt", TEXT_BODY) is False

    @pytest.mark.parametrize("selector", ["4/f.hqx", "5/f.zip", "6/f.uu", "9/f.bin", "g/f.gif", "I/f.png", "hURL:x"])
    def test_non_menu_types(self, selector):
        """Binary, image and HTML selectors are not menus."""
        assert is_menu_response(selector, MENU_BODY) is False

    def test_empty_selector_is_menu(self):
        """The root selector is always a menu."""
        assert is_menu_response("", TEXT_BODY) is True

    def test_directory_selector_is_menu(self):
        """A type 1 selector is always a menu."""
        assert is_menu_response("1/dir", TEXT_BODY) is True

    def test_heuristic_tab_means_menu(self):
        """For other selectors, a tab on the first line means menu."""
        assert is_menu_response("/docs", MENU_BODY) is True

    def test_heuristic_no_tab_means_text(self):
        """No tab on the first line means text."""
        assert is_menu_response("/docs", TEXT_BODY) is False

    def test_heuristic_only_checks_first_line(self):
        """Tabs after the first line do not count."""
        body = b"plain first line\n1Files\t/f\thost\t70\n"
        assert is_menu_response("/x", body) is False

    def test_heuristic_misclassifies_tabbed_text(self):
        """A text file with a tab in its first line is shown as a menu."""
        assert is_menu_response("/notes", b"col1\tcol2\nmore\n") is True

    def test_heuristic_probe_is_bounded(self):
        """A tab past the probe limit is not seen."""
        body = b"x" * MAX_PROBE_LENGTH + b"\tlate tab\n"
        assert is_menu_response("/long", body) is False

    def test_no_newline_uses_whole_body(self):
        """A body without newline is probed as a single line."""
        assert is_menu_response("/x", b"a\tb") is True

    def test_empty_body_is_text(self):
        """Empty content under an ambiguous selector is text."""
        assert is_menu_response("/x", b"") is False

    def test_missing_content_is_not_menu(self):
        """None content is never a menu."""
        assert is_menu_response("", None) is False
