"""Abstract interfaces for the Gopher browser."""

from .input_source import InputSource, KeyEvent, ResizeEvent
from .terminal import Terminal
from .transport import Transport, TransportError, TransportErrorKind

__all__ = [
    "InputSource",
    "KeyEvent",
    "ResizeEvent",
    "Terminal",
    "Transport",
    "TransportError",
    "TransportErrorKind",
]
