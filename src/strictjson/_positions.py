"""Line and column lookup for character offsets in a JSON document."""

from __future__ import annotations

from bisect import bisect_right
from typing import Final


class LineIndex:
    """Maps character offsets to 1-based line and column numbers.

    Line starts are recorded once when the index is built, so each lookup
    is a binary search instead of a rescan of the document. Only LF
    terminates a line; a CR before it counts as the last column of the
    preceding line.
    """

    def __init__(self, text: str) -> None:
        """Build the line-start table.

        Args:
            text: The document the offsets refer to
        """
        self.text: Final = text
        self.line_starts: list[int] = [0]

        self._build_line_starts()

    def _build_line_starts(self) -> None:
        """Record the offset following every newline."""
        pos = self.text.find("\n")
        while pos != -1:
            self.line_starts.append(pos + 1)
            pos = self.text.find("\n", pos + 1)

    def line_col(self, pos: int) -> tuple[int, int]:
        """Convert a 0-based character offset into (line, column).

        Args:
            pos: Character offset, clamped to the document bounds

        Returns:
            Tuple of 1-based line number and 1-based column number
        """
        pos = min(max(pos, 0), len(self.text))
        line = bisect_right(self.line_starts, pos)
        return line, pos - self.line_starts[line - 1] + 1

    def excerpt(self, pos: int, radius: int = 20) -> str:
        """Return the text surrounding pos, cut at the current line.

        Args:
            pos: Character offset the excerpt is centred on
            radius: Maximum characters taken on each side of pos

        Returns:
            Up to 2 * radius characters of context, without newlines
        """
        line, _ = self.line_col(pos)
        line_start = self.line_starts[line - 1]
        if line < len(self.line_starts):
            line_end = self.line_starts[line] - 1
        else:
            line_end = len(self.text)

        start = max(line_start, pos - radius)
        end = min(line_end, pos + radius)
        return self.text[start:end].rstrip("\r")
