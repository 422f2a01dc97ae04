"""Cursor position and movement over a text buffer."""

from __future__ import annotations

from dataclasses import dataclass

from kappa.buffer import TextBuffer


@dataclass
class CursorPosition:
    """Zero-based line and column of the cursor."""

    line: int = 0
    column: int = 0

    def move_to(self, line: int, column: int) -> None:
        self.line = line
        self.column = column

    def reset(self) -> None:
        self.line = 0
        self.column = 0


def _clamp_column(cursor: CursorPosition, buffer: TextBuffer) -> None:
    cursor.column = min(cursor.column, buffer.line_len(cursor.line))


def move_left(cursor: CursorPosition, buffer: TextBuffer) -> None:
    if cursor.column > 0:
        cursor.column -= 1
    elif cursor.line > 0:
        cursor.line -= 1
        cursor.column = buffer.line_len(cursor.line)


def move_right(cursor: CursorPosition, buffer: TextBuffer) -> None:
    if cursor.column < buffer.line_len(cursor.line):
        cursor.column += 1
    elif cursor.line < buffer.len_lines() - 1:
        cursor.line += 1
        cursor.column = 0


def move_up(cursor: CursorPosition, buffer: TextBuffer) -> None:
    if cursor.line > 0:
        cursor.line -= 1
        _clamp_column(cursor, buffer)


def move_down(cursor: CursorPosition, buffer: TextBuffer) -> None:
    if cursor.line < buffer.len_lines() - 1:
        cursor.line += 1
        _clamp_column(cursor, buffer)


def move_line_start(cursor: CursorPosition) -> None:
    cursor.column = 0


def move_line_end(cursor: CursorPosition, buffer: TextBuffer) -> None:
    cursor.column = buffer.line_len(cursor.line)


def page_up(cursor: CursorPosition, buffer: TextBuffer, page_size: int) -> None:
    step = max(page_size - 1, 0)
    cursor.line = max(cursor.line - step, 0)
    _clamp_column(cursor, buffer)


def page_down(cursor: CursorPosition, buffer: TextBuffer, page_size: int) -> None:
    step = max(page_size - 1, 0)
    cursor.line = min(cursor.line + step, buffer.len_lines() - 1)
    _clamp_column(cursor, buffer)