import pytest

from kappa.buffer import TextBuffer
from kappa.commands import Command
from kappa.document import NO_NAME, Document
from kappa.render import (
    LINE_NUMBER_WIDTH,
    PALETTE_VISIBLE_COMMANDS,
    Color,
    Rect,
    Screen,
    Theme,
    format_line_number,
    render,
    render_message_bar,
    status_text,
)
from kappa.state import HELP_MESSAGE, EditorMode, EditorState


def _state(text="alpha\nbeta\n"):
    return EditorState(Document(TextBuffer(text)))


def _find(screen, needle):
    for y in range(screen.height):
        row = screen.row_text(y)
        if needle in row:
            return y, row.index(needle)
    raise AssertionError(f"{needle!r} not on screen")


@pytest.mark.parametrize("idx", [0, 8, 41, 998])
def test_line_number_has_fixed_width_and_is_one_based(idx):
    text = format_line_number(idx)
    assert len(text) == LINE_NUMBER_WIDTH
    assert int(text) == idx + 1


def test_screen_put_clips_at_right_edge():
    screen = Screen(6, 2)
    screen.put(4, 0, "abcd")
    assert screen.row_text(0) == "    ab"
    assert screen.row_text(1) == "      "


def test_screen_put_ignores_rows_outside():
    screen = Screen(4, 1)
    screen.put(0, 3, "zz")
    screen.put(0, -1, "zz")
    assert screen.row_text(0) == "    "


def test_screen_put_keeps_unset_style():
    screen = Screen(4, 1)
    screen.put(0, 0, "ab", fg=Color.YELLOW, bg=Color.BLACK)
    screen.put(0, 0, "c", fg=Color.WHITE)
    assert screen.cells[0][0].fg is Color.WHITE
    assert screen.cells[0][0].bg is Color.BLACK


def test_clear_area_resets_cells():
    screen = Screen(5, 3)
    for y in range(3):
        screen.put(0, y, "xxxxx", fg=Color.YELLOW)
    screen.clear_area(Rect(1, 1, 2, 5))
    assert screen.row_text(0) == "xxxxx"
    assert screen.row_text(1) == "x  xx"
    assert screen.cells[2][1].fg is Color.RESET


def test_negative_screen_size_is_rejected():
    with pytest.raises(ValueError):
        Screen(-1, 3)


def test_status_text_fills_width():
    state = _state()
    text = status_text(state, 80)
    assert len(text) == 80
    assert text.startswith(f" {NO_NAME}")
    assert "Ln 1, Col 1" in text
    assert "[+]" not in text


def test_status_text_marks_modified():
    state = _state()
    state.document.mark_modified()
    assert "[+]" in status_text(state, 80)


def test_status_text_without_room_has_no_padding():
    state = _state()
    narrow = status_text(state, 0)
    wide = status_text(state, 200)
    assert len(narrow) < len(wide)
    assert narrow.endswith(f" {state.document.buffer.len_lines()} lines ")
    assert wide.replace(" " * (len(wide) - len(narrow)), "", 1) == narrow


def test_editor_lines_and_cursor():
    state = _state()
    screen = render(state, 40, 10)
    assert screen.row_text(0).startswith(format_line_number(0) + "alpha")
    assert screen.row_text(1).startswith(format_line_number(1) + "beta")
    assert screen.cursor == (LINE_NUMBER_WIDTH, 0)
    assert screen.cells[0][0].fg is Theme().line_number


def test_editor_respects_scroll_offset():
    state = _state()
    state.viewport.scroll_offset = 1
    state.cursor.move_to(1, 2)
    screen = render(state, 40, 10)
    assert screen.row_text(0).startswith(format_line_number(1) + "beta")
    assert screen.cursor == (LINE_NUMBER_WIDTH + 2, 0)


def test_cursor_hidden_when_scrolled_away():
    state = _state()
    state.viewport.scroll_offset = 2
    screen = render(state, 40, 10)
    assert screen.cursor is None


def test_status_and_message_rows():
    state = _state()
    screen = render(state, 60, 8)
    status_row = screen.cells[6]
    assert all(cell.bg is Theme().status_bar_bg for cell in status_row)
    assert screen.row_text(6) == status_text(state, 60)
    assert screen.row_text(7).startswith(HELP_MESSAGE)
    assert screen.cells[7][0].fg is Theme().message_bar


def test_empty_message_bar():
    state = _state()
    state.message.clear()
    screen = Screen(20, 1)
    render_message_bar(screen, state, Rect(0, 0, 20, 1))
    assert screen.row_text(0).strip() == ""


def test_command_palette_lists_and_highlights():
    state = _state()
    state.mode = EditorMode.COMMAND_PALETTE
    state.filtered_commands = list(state.command_registry.all_commands())
    state.command_input = "s"
    screen = render(state, 80, 24)

    top, left = _find(screen, "┌")
    assert EditorMode.COMMAND_PALETTE.dialog_title() in screen.row_text(top)
    assert f"> {state.command_input}" in screen.row_text(top + 1)
    assert screen.cursor == (left + 3 + len(state.command_input), top + 1)

    y, x = _find(screen, "Open File")
    assert y == top + 2
    assert screen.cells[y][x].bold
    assert screen.cells[y][x].fg is Theme().dialog_highlight
    assert not screen.cells[y + 1][x].bold
    assert screen.cells[y + 1][x].fg is Theme().dialog_fg
    assert screen.cells[y][x].bg is Theme().dialog_bg


def test_command_palette_shows_at_most_eight():
    state = _state()
    state.mode = EditorMode.COMMAND_PALETTE
    state.filtered_commands = [Command(f"c{i}", f"item{i:02d}") for i in range(12)]
    screen = render(state, 80, 30)
    shown = [y for y in range(screen.height) if "item" in screen.row_text(y)]
    assert len(shown) == PALETTE_VISIBLE_COMMANDS


def test_popup_fills_narrow_screen():
    state = _state()
    state.mode = EditorMode.COMMAND_PALETTE
    screen = render(state, 30, 20)
    top, left = _find(screen, "┌")
    assert left == 0
    assert screen.row_text(top).endswith("┐")


def test_input_dialog():
    state = _state()
    state.mode = EditorMode.SAVE_AS
    state.command_input = "out.txt"
    screen = render(state, 80, 24)
    top, left = _find(screen, "┌")
    assert EditorMode.SAVE_AS.dialog_title() in screen.row_text(top)
    assert screen.row_text(top + 1)[left + 1:].startswith("out.txt")
    assert screen.row_text(top + 2).lstrip().startswith("└")
    assert screen.cursor == (left + 1 + len("out.txt"), top + 1)