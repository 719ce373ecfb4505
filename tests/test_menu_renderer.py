"""Tests for the MenuRenderer module."""

import pytest
from gopher_tui.core.classifier import ResourceKind
from gopher_tui.core.menu_parser import MenuItem, parse_menu
from gopher_tui.core.menu_renderer import MenuRenderer, describe_kind


MENU = (
    b"iWelcome\t\tnull.host\t1\r\n"
    b"1Documents\t/docs\th.org\t70\r\n"
    b"0Readme\t/readme\th.org\t70\r\n"
    b"7Search\t/search\th.org\t70\r\n"
)


class TestMenuRenderer:
    """Tests for MenuRenderer."""

    @pytest.fixture
    def renderer(self):
        """Create a MenuRenderer instance."""
        return MenuRenderer(width=40)

    @pytest.fixture
    def items(self):
        return parse_menu(MENU, "h.org", 70)

    def test_empty_menu(self, renderer):
        """An empty menu renders no lines."""
        assert renderer.render([], selected_ordinal=1) == []

    def test_selected_marker(self, renderer, items):
        """The selected item gets the arrow marker."""
        lines = renderer.render(items, selected_ordinal=2)
        assert lines[2].selected is True
        assert lines[2].text == "->Readme"
        assert lines[1].text == "  Documents"

    def test_info_never_selected(self, renderer, items):
        """Info lines are never highlighted."""
        lines = renderer.render(items, selected_ordinal=1)
        assert lines[0].selected is False
        assert lines[0].kind is ResourceKind.INFO

    def test_window(self, renderer, items):
        """offset and max_lines select the visible window."""
        lines = renderer.render(items, selected_ordinal=1, offset=1, max_lines=2)
        assert [line.text.strip("-> ") for line in lines] == ["Documents", "Readme"]

    def test_zero_rows(self, renderer, items):
        """No rows means nothing to draw."""
        assert renderer.render(items, selected_ordinal=1, max_lines=0) == []

    def test_truncated_to_width(self, items):
        """Lines are cut to the renderer width."""
        renderer = MenuRenderer(width=5)
        lines = renderer.render(items, selected_ordinal=1)
        assert all(len(line.text) <= 5 for line in lines)

    def test_item_type_prefix(self, items):
        """show_item_types adds a type tag before each label."""
        renderer = MenuRenderer(width=60, show_item_types=True)
        lines = renderer.render(items, selected_ordinal=1)
        assert "<DIR>" in lines[1].text
        assert "<SEARCH>" in lines[3].text
        assert "<" not in lines[0].text

    def test_describe_kind(self):
        """Unknown kinds get a generic tag."""
        assert describe_kind(ResourceKind.TEXT) == "<TEXT>"
        assert describe_kind(ResourceKind.INFO) == ""
        assert describe_kind(ResourceKind.UNKNOWN) == "<UNKN>"

    def test_tabs_never_reach_the_terminal(self):
        """Tabs in labels become spaces so the width cut is exact."""
        item = MenuItem(kind=ResourceKind.INFO, tag="i", label="a\tb\tc")
        lines = MenuRenderer(width=6).render([item], selected_ordinal=1)
        assert "\t" not in lines[0].text
        assert lines[0].text == "  a b "

    def test_info_line_filler_not_rendered(self):
        """Info lines with filler fields render only their text."""
        items = parse_menu(b"iWelcome\tfake\t(NULL)\t0\r\n", "h.org", 70)
        lines = MenuRenderer(width=40).render(items, selected_ordinal=1)
        assert lines[0].text == "  Welcome"
