"""Scroll and selection bookkeeping for menu and text views."""

from dataclasses import dataclass, field

from .menu_parser import MenuItem


@dataclass
class ViewState:
    """Selection cursor and scroll offsets, kept consistent with the viewport.

    ``selected_ordinal`` counts selectable items only; the menu scroll
    offset counts every listing line, selectable or not.
    """

    viewport_rows: int = 0
    viewport_cols: int = 0
    selected_ordinal: int = 1
    menu_scroll_offset: int = 0
    text_scroll_line: int = 0
    total_lines: int = 0
    total_items: int = 0
    selectable_positions: tuple[int, ...] = field(default_factory=tuple)

    @property
    def total_selectable(self) -> int:
        """Number of selectable items in the current menu."""
        return len(self.selectable_positions)

    @property
    def page_size(self) -> int:
        """Lines moved by a page jump."""
        return max(1, self.viewport_rows)

    def reset(self) -> None:
        """Return to the top of the page with the first item selected."""
        self.selected_ordinal = 1
        self.menu_scroll_offset = 0
        self.text_scroll_line = 0

    def load_menu(self, items: list[MenuItem]) -> None:
        """Take the geometry of a freshly parsed menu and reset."""
        self.total_items = len(items)
        self.total_lines = 0
        self.selectable_positions = tuple(
            index for index, item in enumerate(items) if item.selectable
        )
        self.reset()

    def load_text(self, line_count: int) -> None:
        """Take the geometry of a text page and reset."""
        self.total_lines = line_count
        self.total_items = 0
        self.selectable_positions = ()
        self.reset()

    def resize(self, rows: int, cols: int) -> None:
        """Adopt a new viewport size and reclamp both scroll positions."""
        self.viewport_rows = max(0, rows)
        self.viewport_cols = max(0, cols)
        self._clamp_text()
        self._clamp_menu()

    # Menu selection

    def selected_position(self) -> int | None:
        """Listing index of the selected item, None if nothing is selectable."""
        if not self.selectable_positions:
            return None
        return self.selectable_positions[self.selected_ordinal - 1]

    def select_next(self) -> None:
        """Move the selection down, wrapping from the last item to the first."""
        if not self.selectable_positions:
            self.scroll_menu(1)
            return
        if self.selected_ordinal < self.total_selectable:
            self.selected_ordinal += 1
        else:
            self.selected_ordinal = 1
        self._follow_selection()

    def select_previous(self) -> None:
        """Move the selection up, wrapping from the first item to the last."""
        if not self.selectable_positions:
            self.scroll_menu(-1)
            return
        if self.selected_ordinal > 1:
            self.selected_ordinal -= 1
        else:
            self.selected_ordinal = self.total_selectable
        self._follow_selection()

    def page_selection(self, pages: int) -> None:
        """Jump the selection by whole viewports, clamped to the first/last item."""
        if not self.selectable_positions:
            self.scroll_menu(pages * self.page_size)
            return
        target = self.selected_ordinal + pages * self.page_size
        self.selected_ordinal = min(max(target, 1), self.total_selectable)
        self._follow_selection()

    def scroll_menu(self, delta: int) -> None:
        """Scroll a listing that has nothing to select."""
        self.menu_scroll_offset += delta
        self._clamp_menu()

    def max_menu_offset(self) -> int:
        return max(0, self.total_items - self.viewport_rows)

    def _follow_selection(self) -> None:
        position = self.selected_position()
        if position is None or self.viewport_rows <= 0:
            return
        if position < self.menu_scroll_offset:
            self.menu_scroll_offset = position
        elif position >= self.menu_scroll_offset + self.viewport_rows:
            self.menu_scroll_offset = position - self.viewport_rows + 1

    def _clamp_menu(self) -> None:
        self.menu_scroll_offset = min(max(self.menu_scroll_offset, 0), self.max_menu_offset())
        self._follow_selection()

    # Text scrolling

    def max_text_scroll(self) -> int:
        return max(0, self.total_lines - self.viewport_rows)

    def scroll_text(self, delta: int) -> None:
        """Scroll the text view by delta lines, staying within the content."""
        self.text_scroll_line += delta
        self._clamp_text()

    def page_text(self, pages: int) -> None:
        """Scroll the text view by whole viewports."""
        self.scroll_text(pages * self.page_size)

    def _clamp_text(self) -> None:
        self.text_scroll_line = min(max(self.text_scroll_line, 0), self.max_text_scroll())
