"""Pytest configuration and fixtures."""

import pytest

from gopher_tui.core import Address
from gopher_tui.interfaces import (
    InputSource,
    KeyEvent,
    ResizeEvent,
    Terminal,
    Transport,
    TransportError,
)


ROOT_MENU = (
    b"iWelcome to the test server\tfake\tnull.host\t1\r\n"
    b"1Documents\t/docs\texample.org\t70\r\n"
    b"0About this server\t/about.txt\texample.org\t70\r\n"
    b"7Search the archive\t/search\texample.org\t70\r\n"
    b"3Broken link\t\terror.host\t1\r\n"
    b".\r\n"
)

DOCS_MENU = (
    b"1Papers\t/docs/papers\texample.org\t70\r\n"
    b"0Readme\t/docs/readme.txt\texample.org\t70\r\n"
    b".\r\n"
)

ABOUT_TEXT = b"About this server\r\nLine two\r\nLine three\r\n"


class FakeTransport(Transport):
    """Transport serving canned responses keyed by address."""

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.requests = []

    def fetch(self, address: Address) -> bytes:
        self.requests.append(address)
        response = self.responses.get(address)
        if response is None:
            raise KeyError(f"Unexpected request: {address}")
        if isinstance(response, TransportError):
            raise response
        return response


class FakeTerminal(Terminal):
    """Terminal that records everything written to it."""

    def __init__(self, rows=24, cols=80):
        self.rows = rows
        self.cols = cols
        self.output = []
        self.raw = False
        self.cursor_visible = True
        self.flushes = 0

    def enable_raw_mode(self) -> None:
        self.raw = True

    def disable_raw_mode(self) -> None:
        self.raw = False

    def set_cursor_visible(self, visible: bool) -> None:
        self.cursor_visible = visible

    def clear(self) -> None:
        self.output.clear()

    def move_cursor(self, row: int, col: int) -> None:
        pass

    def write(self, text: str) -> None:
        self.output.append(text)

    def flush(self) -> None:
        self.flushes += 1

    def get_size(self) -> tuple[int, int]:
        return self.rows, self.cols

    def screen_text(self) -> str:
        return "".join(self.output)


class ScriptedInput(InputSource):
    """Input source replaying a fixed list of events, then quitting."""

    def __init__(self, events=None):
        self.events = list(events or [])

    def push_keys(self, *keys):
        for key in keys:
            self.events.append(KeyEvent(key))

    def push_resize(self):
        self.events.append(ResizeEvent())

    def read_event(self, timeout=None):
        if not self.events:
            raise EOFError("Script exhausted")
        return self.events.pop(0)


def keys(*data):
    """Build key events from raw byte strings."""
    return [KeyEvent(d) for d in data]


@pytest.fixture
def root_address():
    return Address(host="example.org", port=70, selector="")


@pytest.fixture
def fake_transport(root_address):
    """Transport with a small example.org site."""
    return FakeTransport({
        root_address: ROOT_MENU,
        Address("example.org", 70, "/docs"): DOCS_MENU,
        Address("example.org", 70, "/about.txt"): ABOUT_TEXT,
        Address("example.org", 70, "/docs/readme.txt"): b"Read me\n",
        Address("example.org", 70, "/docs/papers"): b"1Paper one\t/p1\texample.org\t70\r\n",
    })


@pytest.fixture
def fake_terminal():
    return FakeTerminal()
