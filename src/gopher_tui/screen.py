"""Screen painter for the Gopher browser."""

from . import __version__
from .core import ResourceKind, MenuLine
from .core.text_layout import sanitize
from .interfaces import Terminal

RESET = "\x1b[0m"
HEADER_STYLE = "\x1b[48;5;17m\x1b[1;37m"
FOOTER_STYLE = "\x1b[1;94m"
ERROR_STYLE = "\x1b[1;31m"
TEXT_STYLE = "\x1b[1;33m"
SELECTED_STYLE = "\x1b[1;30;47m"
TITLE_STYLE = "\x1b[1;32m"
ART_STYLE = "\x1b[1;35m"

KIND_STYLES = {
    ResourceKind.TEXT: "\x1b[1;33m",
    ResourceKind.DIRECTORY: "\x1b[1;32m",
    ResourceKind.CSO: "\x1b[1;36m",
    ResourceKind.ERROR: "\x1b[1;31m",
    ResourceKind.BINHEX: "\x1b[1;35m",
    ResourceKind.DOS_BINARY: "\x1b[1;35m",
    ResourceKind.UUENCODED: "\x1b[1;35m",
    ResourceKind.BINARY: "\x1b[1;35m",
    ResourceKind.SEARCH: "\x1b[1;34m",
    ResourceKind.TELNET: "\x1b[1;37m",
    ResourceKind.GIF: "\x1b[1;35m",
    ResourceKind.IMAGE: "\x1b[1;35m",
    ResourceKind.HTML: "\x1b[1;36m",
    ResourceKind.INFO: "\x1b[0;90m",
}
UNKNOWN_STYLE = "\x1b[1;91m"

# Header row, a blank row, then content; footer and status rows at the bottom
CONTENT_ROW = 3
CHROME_ROWS = 4

KEY_HINTS = "arrows:move  enter:open  b:back  f:fwd  o:url  r:reload  a:about  q:quit"

ABOUT_ART = [
    "    \\`~'/",
    "    (o o)",
    "   / \\ / \\",
    "      \"",
]

ABOUT_SHORTCUTS = [
    "Shortcuts:",
    "    Arrows: Navigate",
    "  PgUp/PgDn: Page",
    "      Enter: Select",
    "        b: Back",
    "        f: Forward",
    "        o: Open URL",
    "        r: Reload",
    "        a: About",
    "        q: Quit",
]


def viewport_rows(terminal_rows: int) -> int:
    """Rows left for content once header, footer and status line are drawn."""
    return max(0, terminal_rows - CHROME_ROWS)


class Screen:
    """Paints pages, prompts and overlays onto a Terminal."""

    def __init__(self, terminal: Terminal, content_width: int = 78):
        """
        Initialize the screen.

        Args:
            terminal: Where to paint.
            content_width: Width of the centered content band.
        """
        self.terminal = terminal
        self.content_width = content_width
        self.rows = 24
        self.cols = 80

    def resize(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols

    @property
    def left_column(self) -> int:
        return max(1, (self.cols - self.content_width) // 2 + 1)

    @property
    def prompt_row(self) -> int:
        return max(1, self.rows)

    def draw_page(self, url: str, footer: str = "") -> None:
        """Clear the screen and draw the header and footer."""
        self.terminal.clear()
        self._draw_header(url)
        if self.rows > CHROME_ROWS - 1:
            self._paint(self.rows - 1, self.left_column, self._footer_text(footer), FOOTER_STYLE)

    def draw_menu(self, url: str, lines: list[MenuLine], footer: str = "") -> None:
        """Draw a menu page. Lines are the visible window, already laid out."""
        self.draw_page(url, footer)
        for index, line in enumerate(lines[:viewport_rows(self.rows)]):
            if line.selected:
                style = SELECTED_STYLE
            else:
                style = KIND_STYLES.get(line.kind, UNKNOWN_STYLE)
            self._paint(CONTENT_ROW + index, self.left_column, line.text, style)
        self.terminal.flush()

    def draw_text(self, url: str, lines: list[str], footer: str = "") -> None:
        """Draw a text page. Lines are the visible window, already laid out."""
        self.draw_page(url, footer)
        for index, line in enumerate(lines[:viewport_rows(self.rows)]):
            self._paint(CONTENT_ROW + index, self.left_column, line, TEXT_STYLE)
        self.terminal.flush()

    def show_status(self, message: str, error: bool = False) -> None:
        """Replace the bottom line with a message."""
        self._clear_line(self.prompt_row)
        style = ERROR_STYLE if error else FOOTER_STYLE
        self._paint(self.prompt_row, self.left_column, sanitize(message)[:self.cols], style)
        self.terminal.flush()

    def show_prompt(self, label: str, text: str) -> None:
        """Draw an input prompt on the bottom line with the cursor after the text."""
        self._clear_line(self.prompt_row)
        visible = max(0, self.cols - self.left_column - len(label))
        shown = text[-visible:] if visible else ""
        self._paint(self.prompt_row, self.left_column, label, FOOTER_STYLE)
        self.terminal.write(shown)
        self.terminal.set_cursor_visible(True)
        self.terminal.flush()

    def hide_prompt(self) -> None:
        """Remove the prompt and hide the cursor again."""
        self.terminal.set_cursor_visible(False)
        self._clear_line(self.prompt_row)
        self.terminal.flush()

    def show_about(self) -> None:
        """Draw the about overlay."""
        self.terminal.clear()
        self._draw_header("About gopher-tui")

        body = [f"Welcome to gopher-tui {__version__}!"] + ABOUT_ART + [""] + ABOUT_SHORTCUTS
        width = max(len(line) for line in body)
        start_row = max(CONTENT_ROW, (self.rows - len(body)) // 2)
        start_col = max(1, (self.cols - width) // 2)

        for index, line in enumerate(body):
            if index == 0 or line == ABOUT_SHORTCUTS[0]:
                style = TITLE_STYLE
            elif line in ABOUT_ART:
                style = ART_STYLE
            else:
                style = TEXT_STYLE
            self._paint(start_row + index, start_col, line, style)
        self.terminal.flush()

    def _footer_text(self, footer: str) -> str:
        """Fit key hints and footer into the row; hints are cut first."""
        width = max(0, self.cols - self.left_column + 1)
        if not footer:
            return KEY_HINTS[:width]
        room = width - len(footer) - 2
        if room <= 0:
            return footer[:width]
        return f"{KEY_HINTS[:room].rstrip():<{room}}  {footer}"

    def _draw_header(self, title: str) -> None:
        band = min(self.content_width, self.cols)
        band_col = max(1, (self.cols - band) // 2 + 1)
        title = sanitize(title)[:band]
        title_col = max(1, (self.cols - len(title)) // 2 + 1)
        self._paint(1, band_col, " " * band, HEADER_STYLE)
        self._paint(1, title_col, title, HEADER_STYLE)

    def _clear_line(self, row: int) -> None:
        self.terminal.write_at(row, 1, "\x1b[2K")

    def _paint(self, row: int, col: int, text: str, style: str) -> None:
        self.terminal.write_at(row, col, f"{style}{text}{RESET}")
