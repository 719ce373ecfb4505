"""Terminal implementations."""

from .ansi_terminal import AnsiTerminal
from .terminal_input import TerminalInput

__all__ = ["AnsiTerminal", "TerminalInput"]
