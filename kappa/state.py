"""Editor state: document, cursor, viewport, mode and messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from kappa.commands import Command, CommandRegistry
from kappa.cursor import CursorPosition
from kappa.document import Document
from kappa.viewport import Viewport

HELP_MESSAGE = "Ctrl+P: Command Palette | Ctrl+S: Save | Ctrl+Q: Quit"
DEFAULT_VIEWPORT_HEIGHT = 20

_DIALOG_TITLES = {
    "COMMAND_PALETTE": "Command Palette",
    "OPEN_FILE": "Open File",
    "SAVE_AS": "Save As",
    "NORMAL": "",
}


class EditorMode(Enum):
    """The mode that decides how keys are interpreted."""

    NORMAL = auto()
    COMMAND_PALETTE = auto()
    OPEN_FILE = auto()
    SAVE_AS = auto()

    def is_dialog(self) -> bool:
        return self is not EditorMode.NORMAL

    def dialog_title(self) -> str:
        return _DIALOG_TITLES[self.name]


@dataclass
class MessageState:
    """The one-line message shown at the bottom of the screen."""

    text: str | None = None

    def set(self, text: str) -> None:
        self.text = text

    def clear(self) -> None:
        self.text = None

    def has_message(self) -> bool:
        return self.text is not None


class EditorState:
    """Everything the input handlers and the renderer share."""

    def __init__(self, document: Document | None = None) -> None:
        self.document = document if document is not None else Document()
        self.cursor = CursorPosition()
        self.viewport = Viewport(DEFAULT_VIEWPORT_HEIGHT)
        self.mode = EditorMode.NORMAL
        self.message = MessageState(HELP_MESSAGE)
        self.command_input = ""
        self.command_registry = CommandRegistry()
        self.filtered_commands: list[Command] = []

    def replace_document(self, document: Document) -> None:
        """Switch to another document, resetting cursor and scroll."""
        self.document = document
        self.cursor = CursorPosition()
        self.viewport = Viewport(self.viewport.height)

    def push_command_input(self, ch: str) -> None:
        self.command_input += ch

    def pop_command_input(self) -> None:
        self.command_input = self.command_input[:-1]

    def clear_command_input(self) -> None:
        self.command_input = ""