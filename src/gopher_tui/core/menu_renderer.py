"""Menu renderer for Gopher listings."""

from dataclasses import dataclass

from .classifier import ResourceKind
from .menu_parser import MenuItem
from .text_layout import sanitize

TYPE_DESCRIPTIONS = {
    ResourceKind.TEXT: "<TEXT>",
    ResourceKind.DIRECTORY: "<DIR>",
    ResourceKind.CSO: "<CSO>",
    ResourceKind.ERROR: "<ERROR>",
    ResourceKind.BINHEX: "<BINHEX>",
    ResourceKind.DOS_BINARY: "<DOS>",
    ResourceKind.UUENCODED: "<UUENC>",
    ResourceKind.SEARCH: "<SEARCH>",
    ResourceKind.TELNET: "<TELNET>",
    ResourceKind.BINARY: "<BINARY>",
    ResourceKind.GIF: "<GIF>",
    ResourceKind.IMAGE: "<IMAGE>",
    ResourceKind.HTML: "<HTML>",
    ResourceKind.INFO: "",
}

SELECTED_MARKER = "->"
UNSELECTED_MARKER = "  "


def describe_kind(kind: ResourceKind) -> str:
    """Get a short tag such as <DIR> for an item kind."""
    return TYPE_DESCRIPTIONS.get(kind, "<UNKN>")


@dataclass(frozen=True)
class MenuLine:
    """A menu item laid out for one screen row."""

    text: str
    kind: ResourceKind
    selected: bool = False


class MenuRenderer:
    """Renders the visible window of a menu as screen lines."""

    def __init__(self, width: int = 78, show_item_types: bool = False):
        """
        Initialize the renderer.

        Args:
            width: Maximum characters per line.
            show_item_types: Whether to prefix each line with its type tag.
        """
        self.width = width
        self.show_item_types = show_item_types

    def render(
        self,
        items: list[MenuItem],
        selected_ordinal: int,
        offset: int = 0,
        max_lines: int | None = None,
    ) -> list[MenuLine]:
        """
        Render the items visible from offset.

        Args:
            items: The parsed menu.
            selected_ordinal: Ordinal of the highlighted item.
            offset: Index of the first item to show.
            max_lines: Number of rows available (None for all).

        Returns:
            One MenuLine per visible item.
        """
        end = len(items) if max_lines is None else offset + max(0, max_lines)
        lines = []

        for item in items[offset:end]:
            selected = item.selectable and item.ordinal == selected_ordinal
            marker = SELECTED_MARKER if selected else UNSELECTED_MARKER
            label = sanitize(item.label.replace("\t", " "))

            if self.show_item_types and item.kind is not ResourceKind.INFO:
                label = f"{describe_kind(item.kind):<9}{label}"
            elif self.show_item_types:
                label = f"{'':<9}{label}"

            text = f"{marker}{label}"
            if self.width > 0:
                text = text[:self.width]
            lines.append(MenuLine(text=text, kind=item.kind, selected=selected))

        return lines
