"""Tests for the TerminalInput module."""

import os
import pytest

from gopher_tui.interfaces import KeyEvent, ResizeEvent
from gopher_tui.terminal import TerminalInput


@pytest.fixture
def pipe():
    """A pipe standing in for the tty: (input source, writer fd)."""
    read_fd, write_fd = os.pipe()
    yield TerminalInput(read_fd), write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


class TestTerminalInput:
    """Tests for TerminalInput."""

    def test_timeout_returns_none(self, pipe):
        """No input within the timeout gives None."""
        source, _ = pipe
        assert source.read_event(timeout=0.01) is None

    def test_single_key(self, pipe):
        """Plain bytes become one key event each."""
        source, writer = pipe
        os.write(writer, b"qb")
        assert source.read_event(0.1) == KeyEvent(b"q")
        assert source.read_event(0.1) == KeyEvent(b"b")

    def test_arrow_sequence(self, pipe):
        """An escape sequence is delivered as one key."""
        source, writer = pipe
        os.write(writer, b"\x1b[Aq")
        assert source.read_event(0.1) == KeyEvent(b"\x1b[A")
        assert source.read_event(0.1) == KeyEvent(b"q")

    def test_page_sequence(self, pipe):
        """Sequences ending in '~' are read completely."""
        source, writer = pipe
        os.write(writer, b"\x1b[6~")
        assert source.read_event(0.1) == KeyEvent(b"\x1b[6~")

    def test_application_mode_sequence(self, pipe):
        """SS3 sequences are grouped too."""
        source, writer = pipe
        os.write(writer, b"\x1bOB")
        assert source.read_event(0.1) == KeyEvent(b"\x1bOB")

    def test_lone_escape(self, pipe):
        """Escape with nothing after it is the escape key."""
        source, writer = pipe
        os.write(writer, b"\x1b")
        assert source.read_event(0.1) == KeyEvent(b"\x1b")

    def test_escape_then_letter(self, pipe):
        """Escape followed by a letter yields both keys."""
        source, writer = pipe
        os.write(writer, b"\x1bq")
        assert source.read_event(0.1) == KeyEvent(b"\x1b")
        assert source.read_event(0.1) == KeyEvent(b"q")

    def test_eof(self, pipe):
        """A closed input raises EOFError."""
        source, writer = pipe
        os.close(writer)
        with pytest.raises(EOFError):
            source.read_event(0.1)

    def test_resize_notification(self, pipe):
        """notify_resize wakes read_event with a ResizeEvent."""
        source, _ = pipe
        with source.resize_notifications():
            source.notify_resize()
            source.notify_resize()
            assert source.read_event(0.1) == ResizeEvent()
            # Coalesced into a single event
            assert source.read_event(0.01) is None

    def test_notify_outside_block_ignored(self, pipe):
        """Resize notifications outside the block are dropped."""
        source, _ = pipe
        source.notify_resize()
        assert source.read_event(0.01) is None

    def test_resize_before_key(self, pipe):
        """A pending resize is reported, then the key."""
        source, writer = pipe
        with source.resize_notifications():
            source.notify_resize()
            os.write(writer, b"r")
            assert source.read_event(0.1) == ResizeEvent()
            assert source.read_event(0.1) == KeyEvent(b"r")
