from kappa.buffer import TextBuffer
from kappa.cursor import (
    CursorPosition,
    move_down,
    move_left,
    move_line_end,
    move_line_start,
    move_right,
    move_up,
    page_down,
    page_up,
)

LINES = ["first line", "ab", "third one here"]


def make_buffer(lines=LINES):
    return TextBuffer("\n".join(lines))


def test_position_defaults_and_reset():
    pos = CursorPosition()
    assert pos == CursorPosition(0, 0)
    pos.move_to(4, 7)
    assert (pos.line, pos.column) == (4, 7)
    pos.reset()
    assert pos == CursorPosition()


def test_move_left_wraps_to_previous_line_end():
    cursor = CursorPosition(1, 0)
    move_left(cursor, make_buffer())
    assert cursor == CursorPosition(0, len(LINES[0]))


def test_move_left_at_origin_stays():
    cursor = CursorPosition()
    move_left(cursor, make_buffer())
    assert cursor == CursorPosition()


def test_move_right_wraps_to_next_line():
    cursor = CursorPosition(0, len(LINES[0]))
    move_right(cursor, make_buffer())
    assert cursor == CursorPosition(1, 0)


def test_move_right_at_end_of_last_line_stays():
    last = len(LINES) - 1
    cursor = CursorPosition(last, len(LINES[last]))
    move_right(cursor, make_buffer())
    assert cursor == CursorPosition(last, len(LINES[last]))


def test_left_then_right_is_identity():
    buf = make_buffer()
    cursor = CursorPosition(2, 3)
    move_left(cursor, buf)
    move_right(cursor, buf)
    assert cursor == CursorPosition(2, 3)


def test_move_up_clamps_column():
    cursor = CursorPosition(2, len(LINES[2]))
    move_up(cursor, make_buffer())
    assert cursor == CursorPosition(1, len(LINES[1]))


def test_move_down_clamps_and_stops_at_last_line():
    buf = make_buffer()
    cursor = CursorPosition(0, len(LINES[0]))
    move_down(cursor, buf)
    assert cursor == CursorPosition(1, len(LINES[1]))
    cursor.move_to(len(LINES) - 1, 0)
    move_down(cursor, buf)
    assert cursor.line == len(LINES) - 1


def test_line_start_and_end():
    buf = make_buffer()
    cursor = CursorPosition(2, 5)
    move_line_end(cursor, buf)
    assert cursor.column == len(LINES[2])
    move_line_start(cursor)
    assert cursor.column == 0


def test_page_up_saturates_at_top():
    buf = make_buffer([f"line {i}" for i in range(30)])
    cursor = CursorPosition(2, 0)
    page_up(cursor, buf, 100)
    assert cursor.line == 0


def test_page_size_one_does_not_move():
    buf = make_buffer([f"line {i}" for i in range(30)])
    cursor = CursorPosition(10, 0)
    page_up(cursor, buf, 1)
    page_down(cursor, buf, 1)
    assert cursor.line == 10


def test_page_down_moves_and_clamps():
    lines = [f"row {i}" for i in range(30)]
    buf = make_buffer(lines)
    page_size = 8
    cursor = CursorPosition(0, 0)
    page_down(cursor, buf, page_size)
    assert cursor.line == page_size - 1
    page_down(cursor, buf, 1000)
    assert cursor.line == len(lines) - 1


def test_page_down_clamps_column():
    buf = make_buffer(["a very long first line", "x"])
    cursor = CursorPosition(0, len("a very long first line"))
    page_down(cursor, buf, 5)
    assert cursor == CursorPosition(1, len("x"))