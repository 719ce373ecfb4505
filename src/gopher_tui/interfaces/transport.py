"""Abstract interface for fetching Gopher resources."""

from abc import ABC, abstractmethod
from enum import Enum

from ..core.address import Address


class TransportErrorKind(Enum):
    """Stage of a fetch that failed."""

    RESOLVE = "resolve"
    CONNECT = "connect"
    SEND = "send"
    RECEIVE = "receive"


class TransportError(Exception):
    """Raised when a resource cannot be fetched."""

    def __init__(self, kind: TransportErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value} failed: {self.message}"


class Transport(ABC):
    """Abstract interface for one-shot selector requests."""

    @abstractmethod
    def fetch(self, address: Address) -> bytes:
        """Send the selector to the address and return the whole response.

        Args:
            address: Host, port and selector to request.

        Returns:
            Every byte received until the server closed the connection.

        Raises:
            TransportError: If resolving, connecting, sending or receiving fails.
        """
        pass
