"""Editor state: open files, the active file and its document.

``EditorManager`` is the host side of the status bar widgets. It keeps the
list of open files, tracks which one is selected, and publishes
``SELECTION_CHANGED`` / ``DOCUMENT_CHANGED`` on the event bus whenever
either moves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from statly.events.bus import Event, EventBus
from statly.events.types import (
    DOCUMENT_CHANGED,
    FILE_CLOSED,
    FILE_OPENED,
    SELECTION_CHANGED,
)
from statly.exceptions import EditorError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileHandle:
    """A file on disk. Size is read on access so saves are reflected."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def byte_size(self) -> int:
        try:
            return self.path.stat().st_size
        except OSError:
            return 0


@dataclass
class Document:
    """Decoded text of an open file.

    ``text`` always uses ``"\\n"`` separators; ``line_separator`` is the one
    the file was read with and is restored on save.
    """

    text: str = ""
    line_separator: str = "\n"

    @classmethod
    def from_source(cls, source: str) -> Document:
        """Build a document from file text with any mix of line endings."""
        if "\r\n" in source:
            separator = "\r\n"
        elif "\r" in source:
            separator = "\r"
        else:
            separator = "\n"
        text = source.replace("\r\n", "\n").replace("\r", "\n")
        return cls(text=text, line_separator=separator)

    def to_source(self) -> str:
        if self.line_separator == "\n":
            return self.text
        return self.text.replace("\n", self.line_separator)

    @property
    def char_length(self) -> int:
        return len(self.text)

    @property
    def line_count(self) -> int:
        if not self.text:
            return 0
        return self.text.count("\n") + 1


class EditorManager:
    """Open files and the current selection.

    Files that cannot be decoded with the configured encoding are still
    opened and selectable, but have no document.
    """

    def __init__(self, bus: EventBus | None = None, encoding: str = "utf-8") -> None:
        self.bus = bus or EventBus()
        self.encoding = encoding
        self._files: list[FileHandle] = []
        self._documents: dict[Path, Document | None] = {}
        self._selected: FileHandle | None = None

    @property
    def open_files(self) -> list[FileHandle]:
        return list(self._files)

    @property
    def selected_file(self) -> FileHandle | None:
        return self._selected

    @property
    def selected_document(self) -> Document | None:
        if self._selected is None:
            return None
        return self._documents.get(self._selected.path)

    def _find(self, path: Path) -> FileHandle | None:
        resolved = path.expanduser().resolve()
        for handle in self._files:
            if handle.path == resolved:
                return handle
        return None

    def _load_document(self, path: Path) -> Document | None:
        try:
            data = path.read_bytes()
        except OSError as e:
            raise EditorError(f"Cannot read {path}: {e}") from e
        try:
            return Document.from_source(data.decode(self.encoding))
        except UnicodeDecodeError:
            logger.info("Opened %s without a document: not %s text", path, self.encoding)
            return None

    def open(self, path: Path) -> FileHandle:
        """Open *path* (or re-select it if already open) and select it."""
        existing = self._find(path)
        if existing is not None:
            self._set_selected(existing)
            return existing

        resolved = path.expanduser().resolve()
        if not resolved.exists():
            raise EditorError(f"No such file: {path}")
        if not resolved.is_file():
            raise EditorError(f"Not a regular file: {path}")

        handle = FileHandle(resolved)
        self._documents[resolved] = self._load_document(resolved)
        self._files.append(handle)
        logger.debug("Opened %s", resolved)
        self.bus.emit(Event(event_type=FILE_OPENED, data={"path": str(resolved)}))
        self._set_selected(handle)
        return handle

    def select(self, path: Path) -> FileHandle:
        """Select an already open file."""
        handle = self._find(path)
        if handle is None:
            raise EditorError(f"File is not open: {path}")
        self._set_selected(handle)
        return handle

    def select_offset(self, offset: int) -> FileHandle | None:
        """Move the selection *offset* places through the open files, wrapping."""
        if not self._files:
            return None
        if self._selected is None:
            index = 0
        else:
            index = (self._files.index(self._selected) + offset) % len(self._files)
        handle = self._files[index]
        self._set_selected(handle)
        return handle

    def close(self, path: Path | None = None) -> None:
        """Close *path*, or the selected file when omitted.

        The previous open file becomes selected; closing the last file
        leaves nothing selected.
        """
        handle = self._selected if path is None else self._find(path)
        if handle is None:
            raise EditorError(f"File is not open: {path}" if path else "No file is selected")

        index = self._files.index(handle)
        self._files.remove(handle)
        self._documents.pop(handle.path, None)
        self.bus.emit(Event(event_type=FILE_CLOSED, data={"path": str(handle.path)}))

        if handle == self._selected:
            replacement = self._files[max(index - 1, 0)] if self._files else None
            self._set_selected(replacement)

    def edit(self, text: str) -> None:
        """Replace the text of the selected document."""
        document = self.selected_document
        if document is None:
            raise EditorError("No editable document is selected")
        if document.text == text:
            return
        document.text = text
        self.bus.emit(Event(
            event_type=DOCUMENT_CHANGED,
            data={"path": str(self._selected.path)},
        ))

    def save(self) -> None:
        """Write the selected document back to disk."""
        handle = self._selected
        document = self.selected_document
        if handle is None or document is None:
            raise EditorError("No editable document is selected")
        try:
            handle.path.write_bytes(document.to_source().encode(self.encoding))
        except OSError as e:
            raise EditorError(f"Cannot write {handle.path}: {e}") from e
        logger.info("Saved %s (%d bytes)", handle.path, handle.byte_size)
        self.bus.emit(Event(
            event_type=DOCUMENT_CHANGED,
            data={"path": str(handle.path), "saved": True},
        ))

    def _set_selected(self, handle: FileHandle | None) -> None:
        if handle == self._selected:
            return
        previous = self._selected
        self._selected = handle
        self.bus.emit(Event(
            event_type=SELECTION_CHANGED,
            data={
                "old_path": str(previous.path) if previous else None,
                "new_path": str(handle.path) if handle else None,
            },
        ))
