"""Drawing the editor into a grid of styled character cells."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from wcwidth import wcswidth

from kappa.buffer import trim_line_endings
from kappa.state import EditorMode, EditorState

LINE_NUMBER_WIDTH = 5
POPUP_MAX_WIDTH = 60
PALETTE_HEIGHT = 12
INPUT_DIALOG_HEIGHT = 3
PALETTE_VISIBLE_COMMANDS = 8


class Color(Enum):
    """The colours the editor draws with."""

    RESET = "reset"
    BLACK = "black"
    WHITE = "white"
    YELLOW = "yellow"
    DARK_GRAY = "dark_gray"


@dataclass(frozen=True)
class Theme:
    """Colours for each part of the screen."""

    line_number: Color = Color.DARK_GRAY
    status_bar_bg: Color = Color.DARK_GRAY
    status_bar_fg: Color = Color.WHITE
    message_bar: Color = Color.YELLOW
    dialog_bg: Color = Color.BLACK
    dialog_fg: Color = Color.WHITE
    dialog_highlight: Color = Color.YELLOW


@dataclass(frozen=True)
class Rect:
    """A rectangle of cells; ``x`` and ``y`` are its top-left corner."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def inner(self) -> Rect:
        """The area inside a one-cell border."""
        return Rect(self.x + 1, self.y + 1, max(self.width - 2, 0), max(self.height - 2, 0))


@dataclass
class Cell:
    """One character cell and its style."""

    char: str = " "
    fg: Color = Color.RESET
    bg: Color = Color.RESET
    bold: bool = False


class Screen:
    """A grid of cells plus the position where the cursor should be shown."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("screen dimensions must not be negative")
        self.width = width
        self.height = height
        self.cells = [[Cell() for _ in range(width)] for _ in range(height)]
        self.cursor: tuple[int, int] | None = None

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def put(
        self,
        x: int,
        y: int,
        text: str,
        fg: Color | None = None,
        bg: Color | None = None,
        bold: bool | None = None,
    ) -> None:
        """Write text from (x, y) rightwards; unset styles keep the cell's own."""
        if not 0 <= y < self.height:
            return
        row = self.cells[y]
        for offset, ch in enumerate(text):
            column = x + offset
            if column >= self.width:
                break
            if column < 0:
                continue
            cell = row[column]
            cell.char = ch
            if fg is not None:
                cell.fg = fg
            if bg is not None:
                cell.bg = bg
            if bold is not None:
                cell.bold = bold

    def clear_area(self, area: Rect) -> None:
        """Reset every cell of the area to a blank, unstyled cell."""
        x0, x1 = max(area.x, 0), min(area.right, self.width)
        if x1 <= x0:
            return
        for row in self.cells[max(area.y, 0):min(area.bottom, self.height)]:
            row[x0:x1] = [Cell() for _ in range(x1 - x0)]

    def row_text(self, y: int) -> str:
        return "".join(cell.char for cell in self.cells[y])


def _cells_in(screen: Screen, area: Rect) -> Iterator[Cell]:
    x0, x1 = max(area.x, 0), min(area.right, screen.width)
    for row in screen.cells[max(area.y, 0):min(area.bottom, screen.height)]:
        yield from row[x0:x1]


def _style_area(
    screen: Screen, area: Rect, fg: Color | None = None, bg: Color | None = None
) -> None:
    for cell in _cells_in(screen, area):
        if fg is not None:
            cell.fg = fg
        if bg is not None:
            cell.bg = bg


def _put_in(
    screen: Screen,
    area: Rect,
    x: int,
    y: int,
    text: str,
    fg: Color | None = None,
    bold: bool | None = None,
) -> None:
    """Write text, clipped to the given area."""
    if not area.y <= y < area.bottom:
        return
    limit = area.right - x
    if limit <= 0:
        return
    screen.put(x, y, text[:limit], fg=fg, bold=bold)


def _text_width(text: str) -> int:
    width = wcswidth(text)
    return len(text) if width < 0 else width


def format_line_number(line_idx: int) -> str:
    """The gutter text for a zero-based line index."""
    return f"{line_idx + 1:4} "


def status_text(state: EditorState, width: int) -> str:
    """File name, position and line count, padded to fill ``width`` columns."""
    document = state.document
    modified = " [+]" if document.modified else ""
    status = (
        f" {document.file_name()} {modified}  "
        f"Ln {state.cursor.line + 1}, Col {state.cursor.column + 1}"
    )
    line_count = f" {document.buffer.len_lines()} lines "
    padding = max(width - _text_width(status) - _text_width(line_count), 0)
    return status + " " * padding + line_count


def render_editor(screen: Screen, state: EditorState, area: Rect) -> None:
    """Draw the visible lines with their numbers and place the cursor."""
    theme = Theme()
    buffer = state.document.buffer
    scroll = state.viewport.scroll_offset
    end_line = min(scroll + area.height, buffer.len_lines())

    for row, line_idx in enumerate(range(scroll, end_line)):
        content = buffer.line(line_idx)
        if content is None:
            continue
        y = area.y + row
        _put_in(screen, area, area.x, y, format_line_number(line_idx), fg=theme.line_number)
        _put_in(screen, area, area.x + LINE_NUMBER_WIDTH, y, trim_line_endings(content))

    cursor = state.cursor
    if scroll <= cursor.line < scroll + area.height:
        cursor_y = area.y + cursor.line - scroll
        cursor_x = area.x + LINE_NUMBER_WIDTH + cursor.column
        if cursor_x < area.right and cursor_y < area.bottom:
            screen.cursor = (cursor_x, cursor_y)


def render_status_bar(screen: Screen, state: EditorState, area: Rect) -> None:
    theme = Theme()
    _style_area(screen, area, fg=theme.status_bar_fg, bg=theme.status_bar_bg)
    _put_in(screen, area, area.x, area.y, status_text(state, area.width))


def render_message_bar(screen: Screen, state: EditorState, area: Rect) -> None:
    theme = Theme()
    _style_area(screen, area, fg=theme.message_bar)
    _put_in(screen, area, area.x, area.y, state.message.text or "")


def _popup_area(screen: Screen, height: int) -> Rect:
    width = min(screen.width, POPUP_MAX_WIDTH)
    return Rect(
        max((screen.width - width) // 2, 0),
        max((screen.height - height) // 2, 0),
        width,
        height,
    )


def _draw_block(screen: Screen, area: Rect, title: str, theme: Theme) -> Rect:
    """Clear the area, draw a titled border and return the inside."""
    screen.clear_area(area)
    _style_area(screen, area, bg=theme.dialog_bg)
    if area.width >= 2 and area.height >= 2:
        horizontal = "─" * (area.width - 2)
        screen.put(area.x, area.y, f"┌{horizontal}┐")
        screen.put(area.x, area.bottom - 1, f"└{horizontal}┘")
        for y in range(area.y + 1, area.bottom - 1):
            screen.put(area.x, y, "│")
            screen.put(area.right - 1, y, "│")
        title_area = Rect(area.x + 1, area.y, area.width - 2, 1)
        _put_in(screen, title_area, title_area.x, area.y, title)
    return area.inner()


def render_command_palette(screen: Screen, state: EditorState) -> None:
    """Draw the palette popup with its query line and matching commands."""
    theme = Theme()
    popup = _popup_area(screen, PALETTE_HEIGHT)
    inner = _draw_block(screen, popup, EditorMode.COMMAND_PALETTE.dialog_title(), theme)

    query_area = Rect(inner.x, inner.y, inner.width, min(inner.height, 1))
    _put_in(screen, query_area, inner.x, inner.y, f"> {state.command_input}", fg=theme.dialog_fg)

    list_area = Rect(inner.x, inner.y + 1, inner.width, max(inner.height - 1, 0))
    for row, command in enumerate(state.filtered_commands[:PALETTE_VISIBLE_COMMANDS]):
        highlighted = row == 0
        _put_in(
            screen,
            list_area,
            list_area.x,
            list_area.y + row,
            f"  {command.name}",
            fg=theme.dialog_highlight if highlighted else theme.dialog_fg,
            bold=highlighted,
        )

    screen.cursor = (popup.x + 3 + len(state.command_input), popup.y + 1)


def render_input_dialog(screen: Screen, state: EditorState) -> None:
    """Draw the one-line path entry popup for the open and save-as dialogs."""
    theme = Theme()
    popup = _popup_area(screen, INPUT_DIALOG_HEIGHT)
    inner = _draw_block(screen, popup, state.mode.dialog_title(), theme)
    _put_in(screen, inner, inner.x, inner.y, state.command_input, fg=theme.dialog_fg)
    screen.cursor = (popup.x + 1 + len(state.command_input), popup.y + 1)


def render(state: EditorState, width: int, height: int) -> Screen:
    """Draw the whole editor onto a new screen of the given size."""
    screen = Screen(width, height)
    editor_height = max(height - 2, 0)
    render_editor(screen, state, Rect(0, 0, width, editor_height))
    render_status_bar(screen, state, Rect(0, height - 2, width, 1))
    render_message_bar(screen, state, Rect(0, height - 1, width, 1))

    if state.mode is EditorMode.COMMAND_PALETTE:
        render_command_palette(screen, state)
    elif state.mode in (EditorMode.OPEN_FILE, EditorMode.SAVE_AS):
        render_input_dialog(screen, state)
    return screen