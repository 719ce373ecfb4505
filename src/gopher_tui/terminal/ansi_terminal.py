"""ANSI terminal output and raw-mode control."""

import logging
import os
import shutil
import termios

from ..interfaces import Terminal

logger = logging.getLogger(__name__)

RESET = "\x1b[0m"


class AnsiTerminal(Terminal):
    """Terminal driven with termios and ANSI escape sequences.

    Output is buffered until flush() so a redraw reaches the screen in one
    write.
    """

    def __init__(self, stdin_fd: int, stdout_fd: int):
        """
        Bind to the given descriptors.

        Args:
            stdin_fd: Descriptor whose tty settings are changed.
            stdout_fd: Descriptor that receives the escape sequences.
        """
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = None
        self._buffer: list[str] = []

    def enable_raw_mode(self) -> None:
        self._saved_tty_state = termios.tcgetattr(self.stdin_fd)
        raw = termios.tcgetattr(self.stdin_fd)
        raw[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, raw)
        # Alternate screen, cursor hidden
        self.write("\x1b[?1049h\x1b[?25l")
        self.flush()
        logger.debug("Raw mode enabled")

    def disable_raw_mode(self) -> None:
        self._buffer.clear()
        self.write(f"{RESET}\x1b[H\x1b[J\x1b[?25h\x1b[?1049l")
        self.flush()
        if self._saved_tty_state is not None:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
            self._saved_tty_state = None
        logger.debug("Raw mode disabled")

    def set_cursor_visible(self, visible: bool) -> None:
        self.write("\x1b[?25h" if visible else "\x1b[?25l")

    def clear(self) -> None:
        self.write("\x1b[H\x1b[J")

    def move_cursor(self, row: int, col: int) -> None:
        self.write(f"\x1b[{max(1, row)};{max(1, col)}H")

    def write(self, text: str) -> None:
        self._buffer.append(text)

    def flush(self) -> None:
        if not self._buffer:
            return
        data = "".join(self._buffer).encode("utf-8", errors="replace")
        self._buffer.clear()
        while data:
            try:
                written = os.write(self.stdout_fd, data)
            except InterruptedError:
                continue
            data = data[written:]

    def get_size(self) -> tuple[int, int]:
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError:
            size = shutil.get_terminal_size((80, 24))
        return size.lines, size.columns
