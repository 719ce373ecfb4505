"""TCP socket transport for Gopher requests."""

import logging
import socket

from ..core.address import Address
from ..core.menu_parser import WIRE_ENCODING, WIRE_ERRORS
from ..interfaces import Transport, TransportError, TransportErrorKind

logger = logging.getLogger(__name__)

CRLF = b"\r\n"


class SocketTransport(Transport):
    """Transport that opens one TCP connection per request.

    Writes the selector followed by CRLF and reads until the server
    closes the connection.
    """

    def __init__(self, timeout: float | None = 15.0, chunk_size: int = 4096):
        """
        Initialize the transport.

        Args:
            timeout: Socket timeout in seconds for connect, send and receive.
                     None blocks indefinitely.
            chunk_size: Bytes requested per recv() call.
        """
        self.timeout = timeout
        self.chunk_size = chunk_size

    def fetch(self, address: Address) -> bytes:
        """
        Fetch a resource.

        Args:
            address: Host, port and selector to request.

        Returns:
            The complete response.

        Raises:
            TransportError: If any stage of the request fails.
        """
        logger.info(f"Fetching {address.host}:{address.port} selector={address.selector!r}")
        request = address.selector.encode(WIRE_ENCODING, WIRE_ERRORS) + CRLF

        with self._connect(address.host, address.port) as sock:
            self._send_all(sock, request)
            data = self._receive_all(sock)

        logger.info(f"Received {len(data)} bytes from {address.host}:{address.port}")
        return data

    def _connect(self, host: str, port: int) -> socket.socket:
        try:
            infos = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
        except (socket.gaierror, UnicodeError) as e:
            raise TransportError(TransportErrorKind.RESOLVE, f"{host}: {e}") from e

        last_error: OSError | None = None
        for family, sock_type, proto, _, sockaddr in infos:
            sock = None
            try:
                sock = socket.socket(family, sock_type, proto)
                sock.settimeout(self.timeout)
                sock.connect(sockaddr)
                return sock
            except OSError as e:
                logger.debug(f"Connect to {sockaddr} failed: {e}")
                last_error = e
                if sock is not None:
                    sock.close()

        raise TransportError(
            TransportErrorKind.CONNECT,
            f"{host}:{port}: {last_error or 'no addresses'}",
        )

    def _send_all(self, sock: socket.socket, data: bytes) -> None:
        sent = 0
        while sent < len(data):
            try:
                sent += sock.send(data[sent:])
            except InterruptedError:
                # Retry the write, not the request
                continue
            except OSError as e:
                raise TransportError(TransportErrorKind.SEND, str(e)) from e

    def _receive_all(self, sock: socket.socket) -> bytes:
        chunks = []
        while True:
            try:
                chunk = sock.recv(self.chunk_size)
            except InterruptedError:
                continue
            except OSError as e:
                raise TransportError(TransportErrorKind.RECEIVE, str(e)) from e
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)
