"""Transport implementations."""

from .socket_transport import SocketTransport

__all__ = ["SocketTransport"]
