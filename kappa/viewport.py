"""Vertical scrolling window over the document."""

from __future__ import annotations


class Viewport:
    """Tracks the first visible line and the number of visible lines."""

    def __init__(self, height: int) -> None:
        self.scroll_offset = 0
        self.height = height

    def __repr__(self) -> str:
        return f"Viewport(scroll_offset={self.scroll_offset}, height={self.height})"

    def adjust_for_cursor(self, cursor_line: int) -> None:
        """Scroll just enough to keep the cursor line visible."""
        if cursor_line < self.scroll_offset:
            self.scroll_offset = cursor_line
        elif cursor_line >= self.scroll_offset + self.height:
            self.scroll_offset = cursor_line - self.height + 1

    def visible_range(self) -> range:
        return range(self.scroll_offset, self.scroll_offset + self.height)