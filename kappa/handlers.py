"""Key handling for each editor mode."""

from __future__ import annotations

from collections.abc import Callable

from kappa import cursor as movement
from kappa.commands import filter_commands
from kappa.document import Document, load_from_file, save_document, save_document_as
from kappa.editing import backspace, delete, insert_char, insert_newline, insert_tab
from kappa.events import InputAction, KeyCode, KeyEvent, KeyEventKind
from kappa.state import EditorMode, EditorState

ReadEvent = Callable[[], object]

OPEN_PROMPT = "Enter file path to open:"
SAVE_AS_PROMPT = "Enter file path to save as:"
UNSAVED_WARNING = (
    "Unsaved changes! Press Ctrl+Q again to quit without saving, or Ctrl+S to save"
)
QUIT_CANCELED = "Quit canceled"
NEW_FILE_CREATED = "New file created"

_ARROWS = {
    KeyCode.LEFT: movement.move_left,
    KeyCode.RIGHT: movement.move_right,
    KeyCode.UP: movement.move_up,
    KeyCode.DOWN: movement.move_down,
}

_PAGES = {
    KeyCode.PAGE_UP: movement.page_up,
    KeyCode.PAGE_DOWN: movement.page_down,
}


def handle_event(
    event: object, state: EditorState, read_event: ReadEvent | None = None
) -> InputAction:
    """Dispatch an event to the handler for the current mode.

    ``read_event`` supplies the next event when a quit must be confirmed.
    """
    if not isinstance(event, KeyEvent) or event.kind is not KeyEventKind.PRESS:
        return InputAction.CONTINUE
    if state.mode is EditorMode.NORMAL:
        return handle_normal_mode(event, state, read_event)
    if state.mode is EditorMode.COMMAND_PALETTE:
        return handle_command_palette(event, state)
    return handle_dialog_mode(event, state)


def _prompt(state: EditorState, mode: EditorMode, text: str) -> None:
    state.mode = mode
    state.clear_command_input()
    state.message.set(text)


def _request_quit(state: EditorState, read_event: ReadEvent | None) -> InputAction:
    if not state.document.modified:
        return InputAction.QUIT
    state.message.set(UNSAVED_WARNING)
    confirm = read_event() if read_event is not None else None
    if not isinstance(confirm, KeyEvent) or confirm.kind is not KeyEventKind.PRESS:
        return InputAction.CONTINUE
    if confirm.is_ctrl("q"):
        return InputAction.QUIT
    if confirm.is_ctrl("s"):
        try:
            save_document(state.document)
        except OSError as exc:
            state.message.set(f"Save failed: {exc}")
            return InputAction.CONTINUE
        return InputAction.QUIT
    state.message.set(QUIT_CANCELED)
    return InputAction.CONTINUE


def _save(state: EditorState) -> InputAction:
    if state.document.file_path is None:
        _prompt(state, EditorMode.SAVE_AS, SAVE_AS_PROMPT)
        return InputAction.CONTINUE
    name = state.document.file_name()
    try:
        save_document(state.document)
    except OSError as exc:
        state.message.set(f"Save failed: {exc}")
        return InputAction.CONTINUE
    state.message.set(f"Saved: {name}")
    return InputAction.SAVE


def _edit(state: EditorState, code: KeyCode, char: str | None) -> None:
    buffer = state.document.edit_buffer()
    cursor = state.cursor
    if code is KeyCode.CHAR:
        insert_char(buffer, cursor, char)
        state.viewport.adjust_for_cursor(cursor.line)
    elif code is KeyCode.ENTER:
        insert_newline(buffer, cursor)
        state.viewport.adjust_for_cursor(cursor.line)
    elif code is KeyCode.BACKSPACE:
        backspace(buffer, cursor)
        state.viewport.adjust_for_cursor(cursor.line)
    elif code is KeyCode.DELETE:
        delete(buffer, cursor)
    elif code is KeyCode.TAB:
        insert_tab(buffer, cursor)
    state.message.clear()


_EDIT_KEYS = frozenset(
    {KeyCode.CHAR, KeyCode.ENTER, KeyCode.BACKSPACE, KeyCode.DELETE, KeyCode.TAB}
)


def handle_normal_mode(
    key: KeyEvent, state: EditorState, read_event: ReadEvent | None = None
) -> InputAction:
    """Editing, movement and the Ctrl shortcuts."""
    if key.is_ctrl("q"):
        return _request_quit(state, read_event)
    if key.is_ctrl("s"):
        return _save(state)
    if key.is_ctrl("p"):
        state.mode = EditorMode.COMMAND_PALETTE
        state.clear_command_input()
        state.filtered_commands = list(state.command_registry.all_commands())
        return InputAction.CONTINUE
    if key.is_ctrl("o"):
        _prompt(state, EditorMode.OPEN_FILE, OPEN_PROMPT)
        return InputAction.CONTINUE

    code = key.code
    buffer = state.document.buffer
    cursor = state.cursor
    if code in _EDIT_KEYS:
        _edit(state, code, key.char)
    elif code in _ARROWS:
        _ARROWS[code](cursor, buffer)
        state.viewport.adjust_for_cursor(cursor.line)
    elif code in _PAGES:
        _PAGES[code](cursor, buffer, state.viewport.height)
        state.viewport.adjust_for_cursor(cursor.line)
    elif code is KeyCode.HOME:
        movement.move_line_start(cursor)
    elif code is KeyCode.END:
        movement.move_line_end(cursor, buffer)
    return InputAction.CONTINUE


def _update_filtered_commands(state: EditorState) -> None:
    state.filtered_commands = filter_commands(
        state.command_registry.all_commands(), state.command_input
    )


def handle_command_palette(key: KeyEvent, state: EditorState) -> InputAction:
    """Type to filter commands; Enter runs the first match."""
    code = key.code
    if code is KeyCode.CHAR:
        state.push_command_input(key.char)
        _update_filtered_commands(state)
    elif code is KeyCode.BACKSPACE:
        state.pop_command_input()
        _update_filtered_commands(state)
    elif code is KeyCode.ENTER:
        if state.filtered_commands:
            execute_command(state, state.filtered_commands[0].id)
        state.mode = EditorMode.NORMAL
        state.clear_command_input()
    elif code is KeyCode.ESC:
        state.mode = EditorMode.NORMAL
        state.clear_command_input()
        state.message.clear()
    return InputAction.CONTINUE


def execute_command(state: EditorState, command_id: str) -> None:
    """Run a palette command; a failed save raises ``OSError``."""
    if command_id == "open_file":
        _prompt(state, EditorMode.OPEN_FILE, OPEN_PROMPT)
    elif command_id == "save":
        if state.document.file_path is None:
            _prompt(state, EditorMode.SAVE_AS, SAVE_AS_PROMPT)
        else:
            name = state.document.file_name()
            save_document(state.document)
            state.message.set(f"Saved: {name}")
    elif command_id == "save_as":
        _prompt(state, EditorMode.SAVE_AS, SAVE_AS_PROMPT)
    elif command_id == "new_file":
        state.replace_document(Document())
        state.message.set(NEW_FILE_CREATED)
    elif command_id == "close_file":
        state.replace_document(Document())


def _run_dialog(state: EditorState) -> None:
    path = state.command_input
    if path and state.mode is EditorMode.OPEN_FILE:
        try:
            document = load_from_file(path)
        except (OSError, UnicodeError) as exc:
            state.message.set(f"Error opening file: {exc}")
        else:
            state.replace_document(document)
            state.message.set(f"Opened: {path}")
    elif path and state.mode is EditorMode.SAVE_AS:
        try:
            save_document_as(state.document, path)
        except OSError as exc:
            state.message.set(f"Error saving file: {exc}")
        else:
            state.message.set(f"Saved as: {path}")
    state.mode = EditorMode.NORMAL
    state.clear_command_input()


def handle_dialog_mode(key: KeyEvent, state: EditorState) -> InputAction:
    """Path entry for the open and save-as dialogs."""
    code = key.code
    if code is KeyCode.CHAR:
        state.push_command_input(key.char)
    elif code is KeyCode.BACKSPACE:
        state.pop_command_input()
    elif code is KeyCode.ENTER:
        _run_dialog(state)
    elif code is KeyCode.ESC:
        state.mode = EditorMode.NORMAL
        state.clear_command_input()
        state.message.clear()
    return InputAction.CONTINUE