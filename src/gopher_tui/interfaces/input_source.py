"""Abstract interface for user input."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyEvent:
    """A keystroke: one byte, or a whole escape sequence."""

    data: bytes


@dataclass(frozen=True)
class ResizeEvent:
    """The display size changed."""

    pass


class InputSource(ABC):
    """Abstract interface for keystrokes and resize notifications."""

    @abstractmethod
    def read_event(self, timeout: float | None = None) -> KeyEvent | ResizeEvent | None:
        """Wait for the next event.

        Args:
            timeout: Seconds to wait, or None to block until something arrives.

        Returns:
            The event, or None if the timeout expired first.

        Raises:
            EOFError: If no more input can arrive.
        """
        pass
