"""Command parser for interpreting raw keystrokes."""

from abc import ABC
from dataclasses import dataclass


class Command(ABC):
    """Base class for all commands."""

    pass


@dataclass(frozen=True)
class MoveCommand(Command):
    """Command to move the selection or scroll by one line."""

    delta: int


@dataclass(frozen=True)
class PageCommand(Command):
    """Command to move the selection or scroll by one viewport."""

    pages: int


@dataclass(frozen=True)
class SelectCommand(Command):
    """Command to follow the selected menu item."""

    pass


@dataclass(frozen=True)
class BackCommand(Command):
    """Command to go back in history."""

    pass


@dataclass(frozen=True)
class ForwardCommand(Command):
    """Command to go forward in history."""

    pass


@dataclass(frozen=True)
class ReloadCommand(Command):
    """Command to fetch the current page again."""

    pass


@dataclass(frozen=True)
class AboutCommand(Command):
    """Command to display the about screen."""

    pass


@dataclass(frozen=True)
class OpenCommand(Command):
    """Command to prompt for an address to open."""

    pass


@dataclass(frozen=True)
class QuitCommand(Command):
    """Command to leave the browser."""

    pass


@dataclass(frozen=True)
class InvalidCommand(Command):
    """Represents an unrecognized key."""

    original_input: bytes
    reason: str = "Unknown key"


ESC = b"\x1b"
ENTER_KEYS = {b"\r", b"\n"}
BACKSPACE_KEYS = {b"\x7f", b"\x08"}
CTRL_C = b"\x03"


class CommandParser:
    """Parses keystrokes into Command objects."""

    # Arrow and page keys; some terminals drop the trailing '~'
    SEQUENCES = {
        b"\x1b[A": MoveCommand(delta=-1),
        b"\x1b[B": MoveCommand(delta=1),
        b"\x1bOA": MoveCommand(delta=-1),
        b"\x1bOB": MoveCommand(delta=1),
        b"\x1b[5~": PageCommand(pages=-1),
        b"\x1b[6~": PageCommand(pages=1),
        b"\x1b[5": PageCommand(pages=-1),
        b"\x1b[6": PageCommand(pages=1),
    }

    LETTERS = {
        "b": BackCommand(),
        "f": ForwardCommand(),
        "r": ReloadCommand(),
        "a": AboutCommand(),
        "o": OpenCommand(),
        "q": QuitCommand(),
    }

    def parse(self, key: bytes) -> Command:
        """
        Parse a keystroke into a Command object.

        Args:
            key: A single byte, or a complete escape sequence.

        Returns:
            A Command object representing the key.
        """
        if not key:
            return InvalidCommand(original_input=key, reason="Empty input")

        if key.startswith(ESC):
            command = self.SEQUENCES.get(key)
            if command is None:
                return InvalidCommand(original_input=key, reason="Unknown sequence")
            return command

        if key in ENTER_KEYS:
            return SelectCommand()

        if key in BACKSPACE_KEYS:
            return BackCommand()

        if key == CTRL_C:
            return QuitCommand()

        if len(key) == 1:
            command = self.LETTERS.get(chr(key[0]).lower())
            if command is not None:
                return command

        return InvalidCommand(original_input=key)
