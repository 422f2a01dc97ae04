"""Documents and their persistence on disk."""

from __future__ import annotations

import os
from pathlib import Path

from kappa.buffer import TextBuffer

NO_NAME = "[No Name]"


class Document:
    """A text buffer with an optional file path and a modified flag."""

    def __init__(
        self,
        buffer: TextBuffer | None = None,
        file_path: str | os.PathLike[str] | None = None,
    ) -> None:
        self._buffer = buffer if buffer is not None else TextBuffer()
        self.file_path: Path | None = Path(file_path) if file_path is not None else None
        self._modified = False

    @property
    def buffer(self) -> TextBuffer:
        """The buffer, for reading."""
        return self._buffer

    @property
    def modified(self) -> bool:
        return self._modified

    def edit_buffer(self) -> TextBuffer:
        """Return the buffer for editing and mark the document modified."""
        self._modified = True
        return self._buffer

    def mark_saved(self) -> None:
        self._modified = False

    def mark_modified(self) -> None:
        self._modified = True

    def file_name(self) -> str:
        if self.file_path is None:
            return NO_NAME
        name = self.file_path.name
        if name in ("", ".."):
            return NO_NAME
        return name


def load_from_file(path: str | os.PathLike[str]) -> Document:
    """Read a UTF-8 file into a new, unmodified document."""
    with open(path, encoding="utf-8", newline="") as fh:
        content = fh.read()
    return Document(TextBuffer(content), Path(path))


def _write_buffer(buffer: TextBuffer, path: Path) -> None:
    with open(path, "w", encoding="utf-8", newline="") as fh:
        for chunk in buffer.chunks():
            fh.write(chunk)


def save_document(document: Document) -> None:
    """Write the document to its own path; raise if it has none."""
    if document.file_path is None:
        raise FileNotFoundError("No file path set")
    _write_buffer(document.buffer, document.file_path)
    document.mark_saved()


def save_document_as(document: Document, path: str | os.PathLike[str]) -> None:
    """Write the document to a new path and adopt that path."""
    target = Path(path)
    _write_buffer(document.buffer, target)
    document.file_path = target
    document.mark_saved()