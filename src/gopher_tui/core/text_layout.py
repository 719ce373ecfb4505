"""Text layout for splitting page content into display lines."""

import re
from dataclasses import dataclass

from .menu_parser import decode_response

# C0 controls (tab excluded), DEL and C1 controls
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0a-\x1f\x7f-\x9f]")


def sanitize(text: str) -> str:
    """Replace characters that would be interpreted by the terminal."""
    return _CONTROL_CHARS.sub("?", text)


@dataclass
class TextLayout:
    """Splits content into lines no wider than the display width."""

    width: int = 78
    tab_size: int = 8

    @staticmethod
    def count_lines(text: str) -> int:
        """
        Count lines the way the text view shows them.

        A final line without a trailing newline still counts.
        """
        if not text:
            return 0
        count = text.count("\n")
        if not text.endswith("\n"):
            count += 1
        return count

    def split_lines(self, content: bytes) -> list[str]:
        """
        Decode content and split it into lines ready for painting.

        Carriage returns before newlines are dropped, tabs are expanded,
        control characters replaced and long lines truncated to the width.

        Args:
            content: Raw response bytes.

        Returns:
            One string per line; its length equals count_lines().
        """
        text = decode_response(content)
        if not text:
            return []

        raw_lines = text.split("\n")
        if text.endswith("\n"):
            raw_lines.pop()

        return [self.fit(line) for line in raw_lines]

    def fit(self, line: str) -> str:
        """Prepare a single line for display."""
        if line.endswith("\r"):
            line = line[:-1]
        line = sanitize(line.expandtabs(self.tab_size))
        if self.width > 0 and len(line) > self.width:
            return line[:self.width]
        return line
