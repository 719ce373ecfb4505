"""Core components for the Gopher browser."""

from .address import (
    Address,
    AddressFormatError,
    DEFAULT_PORT,
    is_valid_port,
    parse_address,
    format_address,
    display_url,
)
from .classifier import ResourceKind, is_menu_response
from .command_parser import (
    CommandParser,
    Command,
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
from .history import HistoryNode, NavigationHistory
from .menu_parser import MenuItem, parse_menu
from .menu_renderer import MenuLine, MenuRenderer
from .text_layout import TextLayout
from .view_state import ViewState

__all__ = [
    "Address",
    "AddressFormatError",
    "DEFAULT_PORT",
    "is_valid_port",
    "parse_address",
    "format_address",
    "display_url",
    "ResourceKind",
    "is_menu_response",
    "CommandParser",
    "Command",
    "MoveCommand",
    "PageCommand",
    "SelectCommand",
    "BackCommand",
    "ForwardCommand",
    "ReloadCommand",
    "AboutCommand",
    "OpenCommand",
    "QuitCommand",
    "InvalidCommand",
    "HistoryNode",
    "NavigationHistory",
    "MenuItem",
    "parse_menu",
    "MenuLine",
    "MenuRenderer",
    "TextLayout",
    "ViewState",
]
