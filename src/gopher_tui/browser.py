"""GopherBrowser - Interactive session controller for the Gopher browser."""

import logging
from dataclasses import replace
from enum import Enum

from .config import Config
from .core import (
    Address,
    AddressFormatError,
    CommandParser,
    MoveCommand,
    PageCommand,
    SelectCommand,
    BackCommand,
    ForwardCommand,
    ReloadCommand,
    AboutCommand,
    OpenCommand,
    QuitCommand,
    InvalidCommand,
    MenuItem,
    MenuRenderer,
    NavigationHistory,
    ResourceKind,
    TextLayout,
    ViewState,
    display_url,
    is_menu_response,
    parse_address,
    parse_menu,
)
from .core.command_parser import BACKSPACE_KEYS, CTRL_C, ENTER_KEYS, ESC
from .interfaces import (
    InputSource,
    KeyEvent,
    ResizeEvent,
    Terminal,
    Transport,
    TransportError,
)
from .screen import Screen, viewport_rows

logger = logging.getLogger(__name__)


class Mode(Enum):
    """How the current page is presented."""

    MENU = "menu"
    TEXT = "text"


class GopherBrowser:
    """Main controller tying history, view state and collaborators together.

    Owns the navigation history and the view state, decides between menu
    and text presentation, and turns input events into navigation,
    scrolling and selection changes. Uses dependency injection for the
    transport, terminal and input source.
    """

    SEARCH_SEPARATOR = "\t"
    MAX_INPUT_LENGTH = 1024

    SEARCH_PROMPT = "Search query: "
    OPEN_PROMPT = "Open URL: "

    def __init__(
        self,
        transport: Transport,
        terminal: Terminal,
        input_source: InputSource,
        config: Config | None = None,
    ):
        """
        Initialize the browser.

        Args:
            transport: Fetches selectors from servers.
            terminal: Display to paint on.
            input_source: Source of keystrokes and resize events.
            config: Browser configuration (uses defaults if None).
        """
        self.transport = transport
        self.terminal = terminal
        self.input_source = input_source
        self.config = config or Config()

        # Initialize components
        self.parser = CommandParser()
        self.layout = TextLayout(width=self.config.content_width)
        self.renderer = MenuRenderer(
            width=self.config.content_width,
            show_item_types=self.config.show_item_types,
        )
        self.screen = Screen(terminal, content_width=self.config.content_width)
        self.history = NavigationHistory()
        self.view = ViewState()

        self.mode = Mode.TEXT
        self.items: list[MenuItem] = []
        self.text_lines: list[str] = []
        self.running = False

    def run(self, address: Address) -> None:
        """
        Browse starting at address until the user quits.

        Args:
            address: The first location to open.
        """
        self.running = True
        self.refresh_geometry()
        self.go_to(address)
        self.redraw()

        timeout = self.config.poll_interval_ms / 1000

        try:
            while self.running:
                event = self.input_source.read_event(timeout)
                if event is None:
                    continue
                self.handle_event(event)
                if self.running:
                    self.redraw()
        except EOFError:
            logger.info("Input closed, leaving")
            self.running = False

    def close(self) -> None:
        """Release the history and everything fetched during the session."""
        self.history.destroy_all()
        self.items = []
        self.text_lines = []

    def handle_event(self, event: KeyEvent | ResizeEvent) -> None:
        """
        Apply one input event to the session.

        Args:
            event: A keystroke or a resize notification.
        """
        if isinstance(event, ResizeEvent):
            self.refresh_geometry()
            return

        command = self.parser.parse(event.data)
        logger.debug(f"Key {event.data!r}: {command.__class__.__name__}")
        self._process_command(command)

    def _process_command(self, command) -> None:
        """
        Process a command against the active mode.

        Args:
            command: The parsed command.
        """
        if isinstance(command, QuitCommand):
            logger.info("Quit requested")
            self.running = False
            return

        if isinstance(command, InvalidCommand):
            logger.debug(f"Ignoring key {command.original_input!r}: {command.reason}")
            return

        if isinstance(command, MoveCommand):
            if self.mode is Mode.MENU:
                if command.delta > 0:
                    self.view.select_next()
                else:
                    self.view.select_previous()
            else:
                self.view.scroll_text(command.delta)
            return

        if isinstance(command, PageCommand):
            if self.mode is Mode.MENU:
                self.view.page_selection(command.pages)
            else:
                self.view.page_text(command.pages)
            return

        if isinstance(command, SelectCommand):
            if self.mode is Mode.MENU:
                self._activate_selection()
            return

        if isinstance(command, BackCommand):
            if self.history.back():
                logger.info(f"Back to {self.history.current.address}")
                self._enter_current()
            return

        if isinstance(command, ForwardCommand):
            if self.history.forward():
                logger.info(f"Forward to {self.history.current.address}")
                self._enter_current()
            return

        if isinstance(command, ReloadCommand):
            logger.info(f"Reloading {self.history.current.address}")
            self.history.drop_content()
            self._enter_current()
            return

        if isinstance(command, AboutCommand):
            self._show_about()
            return

        if isinstance(command, OpenCommand):
            self._open_prompt()
            return

    def go_to(self, address: Address) -> None:
        """Navigate to a new address, discarding any forward history."""
        logger.info(f"Navigating to {address}")
        self.history.go_to(address)
        self._enter_current()

    def selected_item(self) -> MenuItem | None:
        """Get the menu item under the selection cursor."""
        if self.mode is not Mode.MENU:
            return None
        position = self.view.selected_position()
        if position is None:
            return None
        return self.items[position]

    def refresh_geometry(self) -> None:
        """Re-read the terminal size and reclamp scroll positions."""
        rows, cols = self.terminal.get_size()
        logger.debug(f"Terminal size {rows}x{cols}")
        self.screen.resize(rows, cols)
        self.view.resize(viewport_rows(rows), cols)

    def redraw(self) -> None:
        """Paint the current page as the view state describes it."""
        node = self.history.current
        if node is None:
            return
        url = display_url(node.address)

        if self.mode is Mode.MENU:
            lines = self.renderer.render(
                self.items,
                self.view.selected_ordinal,
                offset=self.view.menu_scroll_offset,
                max_lines=self.view.viewport_rows,
            )
            footer = ""
            if self.view.total_selectable:
                footer = f"[{self.view.selected_ordinal}/{self.view.total_selectable}]"
            self.screen.draw_menu(url, lines, footer)
        else:
            start = self.view.text_scroll_line
            visible = self.text_lines[start:start + self.view.viewport_rows]
            footer = ""
            if visible:
                footer = f"[{start + 1}-{start + len(visible)}/{len(self.text_lines)}]"
            self.screen.draw_text(url, visible, footer)

    def _enter_current(self) -> None:
        """Make the current node's content visible, fetching it if needed."""
        node = self.history.current

        if node.needs_fetch():
            self._fetch(node)

        if node.error is not None:
            self.mode = Mode.TEXT
            self.items = []
            self.text_lines = self._error_page(node.address, node.error)
            self.view.load_text(len(self.text_lines))
        elif is_menu_response(node.address.selector, node.content):
            self.mode = Mode.MENU
            self.items = parse_menu(node.content, node.address.host, node.address.port)
            self.text_lines = []
            self.view.load_menu(self.items)
        else:
            self.mode = Mode.TEXT
            self.items = []
            self.text_lines = self.layout.split_lines(node.content)
            self.view.load_text(len(self.text_lines))

        logger.debug(f"Showing {node.address} as {self.mode.value}")

    def _fetch(self, node) -> None:
        self.screen.show_status(f"Fetching {display_url(node.address)} ...")
        try:
            node.content = self.transport.fetch(node.address)
        except TransportError as e:
            logger.warning(f"Fetch of {node.address} failed: {e}")
            node.error = str(e)

    def _error_page(self, address: Address, error: str) -> list[str]:
        lines = [
            f"Could not load {display_url(address)}",
            "",
            f"Error: {error}",
            "",
            "Press b to go back or r to try again.",
        ]
        return [self.layout.fit(line) for line in lines]

    def _activate_selection(self) -> None:
        """Follow the selected item, prompting first for search items."""
        item = self.selected_item()
        if item is None:
            return

        logger.info(f"Selected [{item.ordinal}]: {item.label}")

        if item.kind is ResourceKind.SEARCH:
            query = self._read_line(self.SEARCH_PROMPT)
            if not query:
                logger.debug("Search cancelled")
                return
            selector = f"{item.address.selector}{self.SEARCH_SEPARATOR}{query}"
            self.go_to(replace(item.address, selector=selector))
        else:
            self.go_to(item.address)

    def _open_prompt(self) -> None:
        """Ask for an address until one parses or the user cancels."""
        while True:
            text = self._read_line(self.OPEN_PROMPT)
            if not text:
                return

            try:
                address = parse_address(text, default_port=self.config.default_port)
            except AddressFormatError as e:
                logger.debug(f"Rejected address {text!r}: {e}")
                self.screen.show_status(f"Error: {e}. Press any key.", error=True)
                self._wait_for_key()
                continue

            self.go_to(address)
            return

    def _read_line(self, label: str) -> str | None:
        """
        Collect a line of text on the prompt row.

        Args:
            label: Text shown before the input.

        Returns:
            The entered text, or None if the user pressed escape.
        """
        chars: list[str] = []
        self.screen.show_prompt(label, "")

        try:
            while True:
                event = self.input_source.read_event(None)
                if event is None:
                    continue

                if isinstance(event, ResizeEvent):
                    self.refresh_geometry()
                    self.redraw()
                    self.screen.show_prompt(label, "".join(chars))
                    continue

                key = event.data
                if key in ENTER_KEYS:
                    return "".join(chars)
                if key in (ESC, CTRL_C):
                    return None
                if key in BACKSPACE_KEYS:
                    if chars:
                        chars.pop()
                elif len(key) == 1 and 0x20 <= key[0] < 0x7F:
                    if len(chars) < self.MAX_INPUT_LENGTH:
                        chars.append(chr(key[0]))

                self.screen.show_prompt(label, "".join(chars))
        finally:
            self.screen.hide_prompt()

    def _wait_for_key(self) -> None:
        while True:
            event = self.input_source.read_event(None)
            if isinstance(event, KeyEvent):
                return
            if isinstance(event, ResizeEvent):
                self.refresh_geometry()

    def _show_about(self) -> None:
        """Show the about overlay until a key is pressed."""
        self.screen.show_about()
        while True:
            event = self.input_source.read_event(None)
            if isinstance(event, KeyEvent):
                return
            if isinstance(event, ResizeEvent):
                self.refresh_geometry()
                self.screen.show_about()
