"""Text insertion and deletion at the cursor."""

from __future__ import annotations

from kappa.buffer import TextBuffer
from kappa.cursor import CursorPosition

TAB = "    "


def _char_index(buffer: TextBuffer, cursor: CursorPosition) -> int:
    return buffer.line_to_char(cursor.line) + cursor.column


def insert_char(buffer: TextBuffer, cursor: CursorPosition, ch: str) -> None:
    buffer.insert_char(_char_index(buffer, cursor), ch)
    cursor.column += 1


def insert_newline(buffer: TextBuffer, cursor: CursorPosition) -> None:
    buffer.insert_char(_char_index(buffer, cursor), "\n")
    cursor.line += 1
    cursor.column = 0


def insert_tab(buffer: TextBuffer, cursor: CursorPosition) -> None:
    buffer.insert(_char_index(buffer, cursor), TAB)
    cursor.column += len(TAB)


def backspace(buffer: TextBuffer, cursor: CursorPosition) -> None:
    """Delete the character before the cursor, joining lines at line start."""
    if cursor.column > 0:
        idx = _char_index(buffer, cursor)
        buffer.remove(idx - 1, idx)
        cursor.column -= 1
    elif cursor.line > 0:
        prev_len = buffer.line_len(cursor.line - 1)
        idx = _char_index(buffer, cursor)
        buffer.remove(idx - 1, idx)
        cursor.line -= 1
        cursor.column = prev_len


def delete(buffer: TextBuffer, cursor: CursorPosition) -> None:
    """Delete the character under the cursor."""
    idx = _char_index(buffer, cursor)
    if idx < buffer.len_chars():
        buffer.remove(idx, idx + 1)