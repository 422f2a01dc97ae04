"""Command palette entries and filtering."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """A palette command with a stable id and a display name."""

    id: str
    name: str


_DEFAULT_COMMANDS = (
    Command("open_file", "Open File"),
    Command("save", "Save"),
    Command("save_as", "Save As"),
    Command("new_file", "New File"),
    Command("close_file", "Close File"),
)


class CommandRegistry:
    """The fixed set of commands the palette offers."""

    def __init__(self) -> None:
        self._commands: tuple[Command, ...] = _DEFAULT_COMMANDS

    def all_commands(self) -> tuple[Command, ...]:
        return self._commands

    def find_by_id(self, id: str) -> Command | None:
        return next((cmd for cmd in self._commands if cmd.id == id), None)


def filter_commands(commands: Iterable[Command], query: str) -> list[Command]:
    """Commands whose name contains the query, case-insensitively."""
    if not query:
        return list(commands)
    needle = query.lower()
    return [cmd for cmd in commands if needle in cmd.name.lower()]