"""Line-aware text storage for the editor."""

from __future__ import annotations

import re
from bisect import bisect_right
from collections.abc import Iterator

_LINE_BREAK = re.compile("\r\n|[\n\r\x0b\x0c\x85\u2028\u2029]")
_CHUNK_SIZE = 4096


def trim_line_endings(text: str) -> str:
    """Strip trailing carriage returns and line feeds."""
    return text.rstrip("\r\n")


class TextBuffer:
    """Mutable text addressed by character index and by line."""

    def __init__(self, content: str = "") -> None:
        self._text = content
        self._starts: list[int] | None = None

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"TextBuffer({self._text!r})"

    def _line_starts(self) -> list[int]:
        if self._starts is None:
            self._starts = [0] + [m.end() for m in _LINE_BREAK.finditer(self._text)]
        return self._starts

    def _replace(self, text: str) -> None:
        self._text = text
        self._starts = None

    def len_lines(self) -> int:
        return len(self._line_starts())

    def len_chars(self) -> int:
        return len(self._text)

    def _check_insert_index(self, idx: int) -> None:
        if not 0 <= idx <= len(self._text):
            raise IndexError(
                f"char index {idx} out of range for buffer of {len(self._text)} chars"
            )

    def insert_char(self, idx: int, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError("insert_char expects a single character")
        self.insert(idx, ch)

    def insert(self, idx: int, text: str) -> None:
        self._check_insert_index(idx)
        self._replace(self._text[:idx] + text + self._text[idx:])

    def remove(self, start: int, end: int) -> None:
        """Remove [start, end); an empty or out-of-bounds range is ignored."""
        if 0 <= start < end <= len(self._text):
            self._replace(self._text[:start] + self._text[end:])

    def delete_char(self, idx: int) -> None:
        if 0 <= idx < len(self._text):
            self.remove(idx, idx + 1)

    def line(self, line_idx: int) -> str | None:
        """Return the line with its terminator, or None past the last line."""
        starts = self._line_starts()
        if not 0 <= line_idx < len(starts):
            return None
        end = starts[line_idx + 1] if line_idx + 1 < len(starts) else len(self._text)
        return self._text[starts[line_idx]:end]

    def line_len(self, line_idx: int) -> int:
        """Length of a line without its trailing line ending; 0 past the end."""
        content = self.line(line_idx)
        return 0 if content is None else len(trim_line_endings(content))

    def char_to_line(self, char_idx: int) -> int:
        if not 0 <= char_idx <= len(self._text):
            raise IndexError(f"char index {char_idx} out of range")
        return bisect_right(self._line_starts(), char_idx) - 1

    def line_to_char(self, line_idx: int) -> int:
        starts = self._line_starts()
        if line_idx == len(starts):
            return len(self._text)
        if not 0 <= line_idx < len(starts):
            raise IndexError(f"line index {line_idx} out of range")
        return starts[line_idx]

    def get_slice(self, start: int, end: int) -> str:
        if 0 <= start < end <= len(self._text):
            return self._text[start:end]
        return ""

    def chunks(self) -> Iterator[str]:
        """Yield the text in consecutive pieces."""
        for pos in range(0, len(self._text), _CHUNK_SIZE):
            yield self._text[pos:pos + _CHUNK_SIZE]