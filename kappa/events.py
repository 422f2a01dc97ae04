"""Keyboard events and the actions the input layer reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class InputAction(Enum):
    """What the main loop should do after an event was handled."""

    QUIT = auto()
    SAVE = auto()
    CONTINUE = auto()


class KeyCode(Enum):
    """The keys the editor distinguishes."""

    CHAR = auto()
    ENTER = auto()
    BACKSPACE = auto()
    DELETE = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    TAB = auto()
    ESC = auto()
    OTHER = auto()


class KeyEventKind(Enum):
    """Whether a key went down, repeated or came up."""

    PRESS = auto()
    REPEAT = auto()
    RELEASE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A single key event; ``char`` is set for ``KeyCode.CHAR`` only."""

    code: KeyCode
    char: str | None = None
    ctrl: bool = False
    kind: KeyEventKind = KeyEventKind.PRESS

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR and (self.char is None or len(self.char) != 1):
            raise ValueError("a character key needs exactly one character")

    def is_ctrl(self, ch: str) -> bool:
        """True when this is Ctrl held together with the character ``ch``."""
        return self.code is KeyCode.CHAR and self.ctrl and self.char == ch