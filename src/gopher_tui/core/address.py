"""Gopher address parsing and formatting."""

import re
from dataclasses import dataclass

DEFAULT_PORT = 70
MAX_PORT = 65535
SCHEME = "gopher://"

_PORT_PATTERN = re.compile(r"[0-9]+")


class AddressFormatError(ValueError):
    """Raised when a user-supplied address cannot be parsed."""

    pass


def is_valid_port(port: int) -> bool:
    """Check that port is a usable TCP port number."""
    return 0 < port <= MAX_PORT


@dataclass(frozen=True)
class Address:
    """A Gopher location: host, port and selector."""

    host: str
    port: int = DEFAULT_PORT
    selector: str = ""


def parse_address(text: str, default_port: int = DEFAULT_PORT) -> Address:
    """
    Parse an address such as ``gopher://example.org:70/1/dir``.

    The scheme prefix is optional. Everything after the first slash is the
    selector, which defaults to the root menu.

    Args:
        text: The address as typed by the user.
        default_port: Port used when the address has none.

    Returns:
        The parsed Address.

    Raises:
        AddressFormatError: If any part of the address is invalid.
    """
    if not text:
        raise AddressFormatError("Address is empty")

    rest = text
    if rest.lower().startswith(SCHEME):
        rest = rest[len(SCHEME):]

    host_port, _, selector = rest.partition("/")

    port = default_port
    host, colon, port_text = host_port.rpartition(":")
    if not colon:
        host = host_port
    else:
        if not port_text:
            raise AddressFormatError("Port is missing after ':'")
        if not _PORT_PATTERN.fullmatch(port_text):
            raise AddressFormatError(f"Port is not a number: {port_text}")
        port = int(port_text)
        if not is_valid_port(port):
            raise AddressFormatError(f"Port out of range: {port}")

    if not host:
        raise AddressFormatError("Host is missing")

    if any(ch.isspace() for ch in host):
        raise AddressFormatError(f"Host contains whitespace: {host!r}")

    # Minimal sanity check, not a hostname grammar
    if "." not in host and not host[0].isdigit():
        raise AddressFormatError(f"Not a valid host: {host}")

    return Address(host=host, port=port, selector=selector)


def format_address(address: Address) -> str:
    """Render an address as a full gopher:// URL that parses back to itself."""
    return f"{SCHEME}{address.host}:{address.port}/{address.selector}"


def display_url(address: Address) -> str:
    """Render an address for the header bar, hiding a root menu selector."""
    if address.selector in ("", "1"):
        return f"{SCHEME}{address.host}:{address.port}/"
    return format_address(address)
