"""Scroll offset and line suppression for text panes."""

from typing import List


class ScrollCursor:
    """Non-negative line offset shared by one text pane."""

    def __init__(self, offset: int = 0):
        self._offset = max(0, offset)

    @property
    def offset(self) -> int:
        return self._offset

    def scroll_up(self) -> None:
        if self._offset > 0:
            self._offset -= 1

    def scroll_down(self) -> None:
        self._offset += 1

    def wheel(self, delta: int) -> None:
        """Apply a wheel delta in notches; positive scrolls toward the top."""
        self._offset = max(0, self._offset - int(delta))

    def reset(self) -> None:
        self._offset = 0


class LinePager:
    """Single pass over emitted lines that skips the first ``offset`` of them.

    Every emitted line counts, blank separators included. Nothing is
    materialized for skipped lines.
    """

    def __init__(self, offset: int = 0):
        self._remaining = offset
        self.lines: List[str] = []

    def emit(self, line: str = "") -> None:
        if self._remaining <= 0:
            self.lines.append(line)
        self._remaining -= 1

    def write(self, line: str = "") -> None:
        """Add a line that is not subject to scrolling."""
        self.lines.append(line)

    @property
    def visible(self) -> bool:
        """True if the next emitted line will be kept."""
        return self._remaining <= 0

    def text(self) -> str:
        return "\n".join(self.lines)
