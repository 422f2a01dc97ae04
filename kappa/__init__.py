"""A small terminal text editor: text buffer, cursor movement, editing, command palette and a curses front end."""

__version__ = "0.1.0"