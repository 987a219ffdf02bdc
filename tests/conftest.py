"""Shared test fixtures for Statly."""

from __future__ import annotations

from pathlib import Path

import pytest

from statly.editor import EditorManager
from statly.events.bus import EventBus


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def editor(bus: EventBus) -> EditorManager:
    return EditorManager(bus)


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """A 500 byte text file: ten lines of 49 characters plus newline."""
    path = tmp_path / "notes.txt"
    path.write_text(("x" * 49 + "\n") * 10, encoding="utf-8")
    return path


@pytest.fixture
def binary_file(tmp_path: Path) -> Path:
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\xff\xfe\x00\x81" * 512)
    return path
