"""Resource kinds and menu/text classification of responses."""

from enum import Enum

# Longest first line inspected by the tab heuristic
MAX_PROBE_LENGTH = 1024


class ResourceKind(Enum):
    """Item types defined by RFC 1436, plus the common extensions."""

    TEXT = "0"
    DIRECTORY = "1"
    CSO = "2"
    ERROR = "3"
    BINHEX = "4"
    DOS_BINARY = "5"
    UUENCODED = "6"
    SEARCH = "7"
    TELNET = "8"
    BINARY = "9"
    GIF = "g"
    IMAGE = "I"
    HTML = "h"
    INFO = "i"
    UNKNOWN = "?"

    @classmethod
    def from_tag(cls, tag: str) -> "ResourceKind":
        """Map a type character to its kind, UNKNOWN if unrecognised."""
        if tag == cls.UNKNOWN.value:
            return cls.UNKNOWN
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN


# Types that are never menus, whatever the body looks like
NON_MENU_KINDS = frozenset({
    ResourceKind.TEXT,
    ResourceKind.BINHEX,
    ResourceKind.DOS_BINARY,
    ResourceKind.UUENCODED,
    ResourceKind.BINARY,
    ResourceKind.GIF,
    ResourceKind.IMAGE,
    ResourceKind.HTML,
})


def is_menu_response(selector: str, content: bytes | None) -> bool:
    """
    Decide whether a response should be shown as a menu.

    The selector's leading character is trusted first: non-menu types are
    always text, and the root or a type ``1`` selector is always a menu.
    For anything else the first line of the body is probed for a tab.
    That fallback is a heuristic; a text file whose first line happens to
    contain a tab is shown as a menu.

    Args:
        selector: The selector that produced the response.
        content: The raw response body.

    Returns:
        True for menu presentation, False for text.
    """
    if content is None:
        return False

    if selector:
        kind = ResourceKind.from_tag(selector[0])
        if kind in NON_MENU_KINDS:
            return False
        if kind is ResourceKind.DIRECTORY:
            return True
    else:
        return True

    first_line = content.split(b"\n", 1)[0][:MAX_PROBE_LENGTH]
    return b"\t" in first_line
