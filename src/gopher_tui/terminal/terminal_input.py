"""Keyboard input and resize notifications from a tty.

Reads raw bytes from stdin and groups escape sequences into single key
events. SIGWINCH is turned into a byte on a self-pipe so that a resize
wakes the same select() call that waits for keys.
"""

import contextlib
import logging
import os
import select
import signal

from ..interfaces import InputSource, KeyEvent, ResizeEvent

logger = logging.getLogger(__name__)

ESC = b"\x1b"
ESC_SEQUENCE_TIMEOUT = 0.025
MAX_SEQUENCE_LENGTH = 8


class TerminalInput(InputSource):
    """Input source reading keystrokes from a file descriptor."""

    def __init__(self, fd: int):
        """
        Bind to an input descriptor.

        Args:
            fd: Descriptor to read keys from, normally stdin.
        """
        self.fd = fd
        self._pending: list[bytes] = []
        self._wake_read: int | None = None
        self._wake_write: int | None = None

    @contextlib.contextmanager
    def resize_notifications(self):
        """Deliver SIGWINCH as ResizeEvent for the duration of the block."""
        read_fd, write_fd = os.pipe()
        os.set_blocking(read_fd, False)
        os.set_blocking(write_fd, False)
        self._wake_read, self._wake_write = read_fd, write_fd
        previous = signal.signal(signal.SIGWINCH, self._on_resize)
        try:
            yield self
        finally:
            signal.signal(signal.SIGWINCH, previous)
            self._wake_read = self._wake_write = None
            os.close(read_fd)
            os.close(write_fd)

    def notify_resize(self) -> None:
        """Queue a resize notification. Safe to call from a signal handler."""
        if self._wake_write is None:
            return
        try:
            os.write(self._wake_write, b"\0")
        except BlockingIOError:
            # Pipe full: a notification is already pending
            pass

    def _on_resize(self, signum, frame) -> None:
        self.notify_resize()

    def read_event(self, timeout: float | None = None) -> KeyEvent | ResizeEvent | None:
        """
        Wait for a keystroke or a resize.

        Args:
            timeout: Seconds to wait, None to block.

        Returns:
            The event, or None on timeout.

        Raises:
            EOFError: If the input descriptor was closed.
        """
        if self._pending:
            return KeyEvent(self._pending.pop(0))

        watched = [self.fd]
        if self._wake_read is not None:
            watched.append(self._wake_read)

        ready, _, _ = select.select(watched, [], [], timeout)
        if not ready:
            return None

        if self._wake_read is not None and self._wake_read in ready:
            self._drain_wakeups()
            return ResizeEvent()

        byte = os.read(self.fd, 1)
        if not byte:
            raise EOFError("Input closed")

        if byte != ESC:
            return KeyEvent(byte)
        return KeyEvent(self._read_escape_sequence())

    def _read_ready_byte(self, timeout: float) -> bytes | None:
        ready, _, _ = select.select([self.fd], [], [], timeout)
        if not ready:
            return None
        return os.read(self.fd, 1) or None

    def _read_escape_sequence(self) -> bytes:
        introducer = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT)
        if introducer is None:
            return ESC
        if introducer not in (b"[", b"O"):
            self._pending.append(introducer)
            return ESC

        sequence = ESC + introducer
        while len(sequence) < MAX_SEQUENCE_LENGTH:
            byte = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT)
            if byte is None:
                break
            sequence += byte
            # Final byte of a CSI sequence
            if 0x40 <= byte[0] <= 0x7E:
                break

        logger.debug(f"Escape sequence: {sequence!r}")
        return sequence

    def _drain_wakeups(self) -> None:
        while True:
            try:
                if not os.read(self._wake_read, 64):
                    return
            except BlockingIOError:
                return
