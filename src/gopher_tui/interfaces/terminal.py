"""Abstract interface for terminal output."""

import contextlib
from abc import ABC, abstractmethod


class Terminal(ABC):
    """Abstract interface for a character-cell display."""

    @abstractmethod
    def enable_raw_mode(self) -> None:
        """Switch off line buffering, echo and signal keys."""
        pass

    @abstractmethod
    def disable_raw_mode(self) -> None:
        """Restore the settings saved by enable_raw_mode."""
        pass

    @abstractmethod
    def set_cursor_visible(self, visible: bool) -> None:
        """Show or hide the cursor."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear the whole screen."""
        pass

    @abstractmethod
    def move_cursor(self, row: int, col: int) -> None:
        """Move the cursor to a 1-based row and column."""
        pass

    @abstractmethod
    def write(self, text: str) -> None:
        """Write text at the cursor position."""
        pass

    @abstractmethod
    def flush(self) -> None:
        """Push buffered output to the display."""
        pass

    @abstractmethod
    def get_size(self) -> tuple[int, int]:
        """Get the display size as (rows, columns)."""
        pass

    def write_at(self, row: int, col: int, text: str) -> None:
        """Write text starting at a 1-based row and column."""
        self.move_cursor(row, col)
        self.write(text)

    @contextlib.contextmanager
    def raw_mode(self):
        """Keep the terminal in raw mode for the duration of the block."""
        try:
            self.enable_raw_mode()
            yield self
        finally:
            self.disable_raw_mode()
