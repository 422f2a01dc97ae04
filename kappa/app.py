"""Terminal front end: reads keys, draws the screen, runs the main loop."""

from __future__ import annotations

import curses
import itertools
import os
import sys
from collections.abc import Sequence

from kappa.document import Document, load_from_file
from kappa.events import InputAction, KeyCode, KeyEvent
from kappa.handlers import handle_event
from kappa.render import Cell, Color, Screen, render
from kappa.state import EditorState

_SPECIAL_KEYS = {
    curses.KEY_LEFT: KeyCode.LEFT,
    curses.KEY_RIGHT: KeyCode.RIGHT,
    curses.KEY_UP: KeyCode.UP,
    curses.KEY_DOWN: KeyCode.DOWN,
    curses.KEY_HOME: KeyCode.HOME,
    curses.KEY_END: KeyCode.END,
    curses.KEY_PPAGE: KeyCode.PAGE_UP,
    curses.KEY_NPAGE: KeyCode.PAGE_DOWN,
    curses.KEY_BACKSPACE: KeyCode.BACKSPACE,
    curses.KEY_DC: KeyCode.DELETE,
    curses.KEY_ENTER: KeyCode.ENTER,
}

_NAMED_CHARS = {
    "\n": KeyCode.ENTER,
    "\r": KeyCode.ENTER,
    "\t": KeyCode.TAB,
    "\x1b": KeyCode.ESC,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
}

_CURSES_COLORS = {
    Color.BLACK: curses.COLOR_BLACK,
    Color.WHITE: curses.COLOR_WHITE,
    Color.YELLOW: curses.COLOR_YELLOW,
}


def translate_key(code: int | str) -> KeyEvent | None:
    """Turn a value from ``get_wch`` into a key event; None for non-key input."""
    if isinstance(code, int):
        if code == curses.KEY_RESIZE:
            return None
        return KeyEvent(_SPECIAL_KEYS.get(code, KeyCode.OTHER))
    if len(code) != 1:
        raise ValueError("expected a single character")
    named = _NAMED_CHARS.get(code)
    if named is not None:
        return KeyEvent(named)
    point = ord(code)
    if 1 <= point <= 26:
        return KeyEvent(KeyCode.CHAR, chr(point + ord("a") - 1), ctrl=True)
    if point < 32:
        return KeyEvent(KeyCode.OTHER)
    return KeyEvent(KeyCode.CHAR, code)


class _Palette:
    """Maps cell styles to curses attributes, allocating colour pairs lazily."""

    def __init__(self) -> None:
        self._pairs: dict[tuple[Color, Color], int] = {}
        self._enabled = False
        self._default_fg = -1
        self._default_bg = -1
        self._gray = curses.COLOR_BLACK
        try:
            if not curses.has_colors():
                return
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                self._default_fg = curses.COLOR_WHITE
                self._default_bg = curses.COLOR_BLACK
            if curses.COLORS >= 16:
                self._gray = 8
            self._enabled = True
        except curses.error:
            self._enabled = False

    def _number(self, color: Color, default: int) -> int:
        if color is Color.RESET:
            return default
        if color is Color.DARK_GRAY:
            return self._gray
        return _CURSES_COLORS[color]

    def attr(self, cell: Cell) -> int:
        attr = curses.A_BOLD if cell.bold else curses.A_NORMAL
        key = (cell.fg, cell.bg)
        if not self._enabled or key == (Color.RESET, Color.RESET):
            return attr
        pair = self._pairs.get(key)
        if pair is None:
            pair = len(self._pairs) + 1
            try:
                curses.init_pair(
                    pair,
                    self._number(cell.fg, self._default_fg),
                    self._number(cell.bg, self._default_bg),
                )
            except curses.error:
                return attr
            self._pairs[key] = pair
        return attr | curses.color_pair(pair)


def _set_cursor_visible(visible: bool) -> None:
    try:
        curses.curs_set(1 if visible else 0)
    except curses.error:
        pass


def _draw(stdscr, screen: Screen, palette: _Palette) -> None:
    stdscr.erase()
    for y, row in enumerate(screen.cells):
        x = 0
        for _, group in itertools.groupby(row, key=lambda c: (c.fg, c.bg, c.bold)):
            cells = list(group)
            try:
                stdscr.addstr(y, x, "".join(c.char for c in cells), palette.attr(cells[0]))
            except curses.error:
                pass  # writing the bottom-right cell moves the cursor off screen
            x += len(cells)
    cursor = screen.cursor
    if cursor is not None and 0 <= cursor[0] < screen.width and 0 <= cursor[1] < screen.height:
        _set_cursor_visible(True)
        stdscr.move(cursor[1], cursor[0])
    else:
        _set_cursor_visible(False)
    stdscr.refresh()


def run_app(stdscr, state: EditorState) -> None:
    """Draw and handle keys until the user quits."""
    stdscr.keypad(True)
    palette = _Palette()
    rows, _ = stdscr.getmaxyx()
    state.viewport.height = max(rows - 2, 0)

    def read_event() -> KeyEvent | None:
        return translate_key(stdscr.get_wch())

    while True:
        rows, cols = stdscr.getmaxyx()
        _draw(stdscr, render(state, cols, rows), palette)
        if handle_event(read_event(), state, read_event) is InputAction.QUIT:
            return


def _session(stdscr, state: EditorState) -> None:
    curses.raw()
    run_app(stdscr, state)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the file named on the command line, or an empty document."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        document = load_from_file(args[0]) if args else Document()
    except (OSError, UnicodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    state = EditorState(document)
    os.environ.setdefault("ESCDELAY", "25")
    curses.wrapper(_session, state)
    return 0


if __name__ == "__main__":
    sys.exit(main())