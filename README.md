# kappa

A small terminal text editor. It shows line numbers, a status bar and a
message line, and has a command palette for file operations. The
terminal front end is built on `curses`, so it runs where Python's
`curses` module is available (Linux, macOS and other POSIX systems).

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

Open a file:

```
kappa notes.txt
```

Or start with an empty, unnamed buffer:

```
kappa
```

Files are read and written as UTF-8, and their line endings are kept as
they are. If the named file cannot be read, `kappa` prints the error and
exits with status 1.

## Keys

| Key              | Action                                   |
|------------------|------------------------------------------|
| Ctrl+P           | Open the command palette                 |
| Ctrl+S           | Save (asks for a path if none is set)    |
| Ctrl+O           | Open a file                              |
| Ctrl+Q           | Quit (asks again if there are changes)   |
| Arrows           | Move the cursor                          |
| Home / End       | Start / end of line                      |
| PageUp / PageDown| Move by one screen                       |
| Enter            | Split the line                           |
| Backspace        | Delete before the cursor, joining lines  |
| Delete           | Delete under the cursor                  |
| Tab              | Insert four spaces                       |

When you quit with unsaved changes, press Ctrl+Q again to discard them,
Ctrl+S to save and quit, or any other key to stay in the editor. Saving
from that prompt needs the document to have a path already; otherwise
the message line reports that the save failed and the editor stays open.

In the Open File and Save As dialogs, type a path and press Enter, or
press Esc to cancel. Errors while opening or saving are shown on the
message line.

## Command palette

Type to filter the commands by name (case-insensitive); Enter runs the
first match and Esc closes the palette. The available commands are:

- Open File
- Save
- Save As
- New File
- Close File

New File and Close File both replace the current document with an empty,
unnamed one without asking about unsaved changes.

## Using it as a library

The editing core has no terminal dependencies:

```python
from kappa.buffer import TextBuffer
from kappa.cursor import CursorPosition, move_down
from kappa.editing import insert_char

buffer = TextBuffer("hello\nworld\n")
cursor = CursorPosition()
move_down(cursor, buffer)
insert_char(buffer, cursor, "!")
print(buffer.line(1))  # "!world\n"
```

The modules:

- `kappa.buffer` – `TextBuffer`, text addressed by character index and by line.
- `kappa.cursor` – `CursorPosition` and the movement functions
  (`move_left`, `move_right`, `move_up`, `move_down`, `move_line_start`,
  `move_line_end`, `page_up`, `page_down`).
- `kappa.editing` – `insert_char`, `insert_newline`, `insert_tab`,
  `backspace`, `delete`.
- `kappa.viewport` – `Viewport`, the scrolling window.
- `kappa.document` – `Document`, `load_from_file`, `save_document`,
  `save_document_as`.
- `kappa.commands` – `Command`, `CommandRegistry`, `filter_commands`.
- `kappa.events` – `KeyEvent`, `KeyCode`, `KeyEventKind`, `InputAction`.
- `kappa.state` – `EditorState`, `EditorMode`, `MessageState`.
- `kappa.handlers` – `handle_event` and the per-mode handlers.
- `kappa.render` – drawing into an in-memory `Screen`.
- `kappa.app` – the `curses` front end and `main`.

Key events can be fed straight to the handlers, and
`kappa.render.render(state, width, height)` draws an editor state to a
`Screen`, so the editor can be driven and inspected without a terminal:

```python
from kappa.events import KeyCode, KeyEvent
from kappa.handlers import handle_event
from kappa.render import render
from kappa.state import EditorState

state = EditorState()
handle_event(KeyEvent(KeyCode.CHAR, "a"), state)
screen = render(state, 40, 10)
print(screen.row_text(0))  # "   1 a" followed by spaces
print(screen.cursor)       # (6, 0)
```

## What it does not do

kappa is deliberately small. It has no undo or redo, no search or
go-to-line, no clipboard, no syntax highlighting, no line wrapping or
horizontal scrolling, and edits one document at a time.