"""Tests for the CommandParser module."""

import pytest
from gopher_tui.core.command_parser import (
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
)


class TestCommandParser:
    """Tests for CommandParser."""

    @pytest.fixture
    def parser(self):
        """Create a CommandParser instance."""
        return CommandParser()

    def test_arrow_up(self, parser):
        """Up arrow moves by -1."""
        assert parser.parse(b"\x1b[A") == MoveCommand(delta=-1)

    def test_arrow_down(self, parser):
        """Down arrow moves by +1."""
        assert parser.parse(b"\x1b[B") == MoveCommand(delta=1)

    def test_application_mode_arrows(self, parser):
        """SS3 arrow sequences are understood too."""
        assert parser.parse(b"\x1bOA") == MoveCommand(delta=-1)
        assert parser.parse(b"\x1bOB") == MoveCommand(delta=1)

    def test_page_up(self, parser):
        """Page up pages by -1."""
        assert parser.parse(b"\x1b[5~") == PageCommand(pages=-1)

    def test_page_down(self, parser):
        """Page down pages by +1."""
        assert parser.parse(b"\x1b[6~") == PageCommand(pages=1)

    def test_truncated_page_sequence(self, parser):
        """Page keys without the trailing '~' still work."""
        assert parser.parse(b"\x1b[6") == PageCommand(pages=1)

    @pytest.mark.parametrize("key", [b"\r", b"\n"])
    def test_enter(self, parser, key):
        """Enter and carriage return select."""
        assert isinstance(parser.parse(key), SelectCommand)

    @pytest.mark.parametrize("key", [b"b", b"B", b"\x7f", b"\x08"])
    def test_back(self, parser, key):
        """'b' and backspace go back."""
        assert isinstance(parser.parse(key), BackCommand)

    @pytest.mark.parametrize("key,command", [
        (b"f", ForwardCommand),
        (b"r", ReloadCommand),
        (b"a", AboutCommand),
        (b"o", OpenCommand),
        (b"q", QuitCommand),
        (b"Q", QuitCommand),
        (b"\x03", QuitCommand),
    ])
    def test_letter_commands(self, parser, key, command):
        """Single letters map to their commands."""
        assert isinstance(parser.parse(key), command)

    def test_unknown_letter(self, parser):
        """Unbound letters are invalid."""
        cmd = parser.parse(b"z")
        assert isinstance(cmd, InvalidCommand)
        assert cmd.original_input == b"z"

    def test_unknown_sequence(self, parser):
        """Unbound escape sequences are invalid."""
        cmd = parser.parse(b"\x1b[C")
        assert isinstance(cmd, InvalidCommand)
        assert cmd.reason == "Unknown sequence"

    def test_lone_escape(self, parser):
        """A lone escape does nothing."""
        assert isinstance(parser.parse(b"\x1b"), InvalidCommand)

    def test_empty_input(self, parser):
        """Empty input is invalid."""
        cmd = parser.parse(b"")
        assert isinstance(cmd, InvalidCommand)
        assert cmd.reason == "Empty input"

    def test_high_byte(self, parser):
        """Non-ASCII bytes are invalid rather than errors."""
        assert isinstance(parser.parse(b"\xc3"), InvalidCommand)

    def test_command_equality(self):
        """Commands with same data are equal."""
        assert MoveCommand(delta=1) == MoveCommand(delta=1)
        assert MoveCommand(delta=1) != MoveCommand(delta=-1)
        assert MoveCommand(delta=1) != PageCommand(pages=1)
