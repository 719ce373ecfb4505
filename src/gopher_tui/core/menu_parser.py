"""Parser for Gopher menu responses."""

import logging
import re
from dataclasses import dataclass, replace

from .address import Address
from .classifier import ResourceKind

logger = logging.getLogger(__name__)

# Selectors travel back to the server byte for byte
WIRE_ENCODING = "utf-8"
WIRE_ERRORS = "surrogateescape"

END_OF_LISTING = "."

SELECTABLE_KINDS = frozenset({
    ResourceKind.TEXT,
    ResourceKind.DIRECTORY,
    ResourceKind.CSO,
    ResourceKind.SEARCH,
    ResourceKind.HTML,
})

# Placeholder hosts servers use for items that lead nowhere
PLACEHOLDER_HOSTS = frozenset({"null.host", "error.host"})

_LEADING_DIGITS = re.compile(r"\s*([0-9]+)")


@dataclass(frozen=True)
class MenuItem:
    """A single line of a Gopher menu."""

    kind: ResourceKind
    tag: str
    label: str
    address: Address | None = None
    selectable: bool = False
    ordinal: int | None = None


def decode_response(content: bytes) -> str:
    """Decode a raw response so that it can be re-encoded losslessly."""
    return content.decode(WIRE_ENCODING, WIRE_ERRORS)


def _parse_port(field: str, default_port: int) -> int:
    match = _LEADING_DIGITS.match(field)
    if match is None:
        return default_port
    port = int(match.group(1))
    if port <= 0 or port > 65535:
        return default_port
    return port


def parse_line(line: str, default_host: str, default_port: int) -> MenuItem | None:
    """
    Parse one menu line into an unnumbered MenuItem.

    Args:
        line: A single line without its trailing newline.
        default_host: Host used when the line leaves it empty.
        default_port: Port used when the line has none.

    Returns:
        The item, or None if the line carries nothing to show.
    """
    if line.endswith("\r"):
        line = line[:-1]

    if not line or line == END_OF_LISTING or len(line) < 2:
        return None

    tag = line[0]
    remainder = line[1:]
    kind = ResourceKind.from_tag(tag)
    fields = remainder.split("\t", 3)

    if kind is ResourceKind.INFO or len(fields) < 3:
        return MenuItem(kind=kind, tag=tag, label=fields[0].strip())

    label = fields[0].strip()
    selector = fields[1]
    host = fields[2] or default_host
    port = _parse_port(fields[3], default_port) if len(fields) > 3 else default_port

    selectable = kind in SELECTABLE_KINDS and host not in PLACEHOLDER_HOSTS

    return MenuItem(
        kind=kind,
        tag=tag,
        label=label,
        address=Address(host=host, port=port, selector=selector),
        selectable=selectable,
    )


def parse_menu(content: bytes, default_host: str, default_port: int) -> list[MenuItem]:
    """
    Split a raw menu response into ordered items.

    Each line is handled on its own; anything that cannot be interpreted
    is skipped rather than failing the whole listing. Selectable items are
    numbered 1, 2, 3... in the order they appear.

    Args:
        content: Raw response bytes.
        default_host: Host of the location that produced the response.
        default_port: Port of the location that produced the response.

    Returns:
        List of MenuItem objects, possibly empty.
    """
    items = []
    ordinal = 0

    for line in decode_response(content).split("\n"):
        item = parse_line(line, default_host, default_port)
        if item is None:
            continue

        if item.selectable:
            ordinal += 1
            item = replace(item, ordinal=ordinal)

        items.append(item)

    logger.debug(f"Parsed {len(items)} menu items, {ordinal} selectable")
    return items
