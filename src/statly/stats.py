"""File snapshot and the status line formatter."""

from __future__ import annotations

from dataclasses import dataclass

from statly.editor import Document, FileHandle

# Unit letters for 1024**1 .. 1024**6; larger sizes stay in exabytes.
SIZE_UNITS = "KMGTPE"


@dataclass(frozen=True)
class FileSnapshot:
    """Numbers shown for one file at one moment."""

    byte_size: int
    char_length: int = 0
    line_count: int = 0

    @classmethod
    def capture(cls, file: FileHandle, document: Document | None) -> FileSnapshot:
        if document is None:
            return cls(byte_size=file.byte_size)
        return cls(
            byte_size=file.byte_size,
            char_length=document.char_length,
            line_count=document.line_count,
        )

    def render(self) -> str:
        return f"{self.char_length}:{self.line_count} / {human_size(self.byte_size)}"


def human_size(byte_size: int) -> str:
    """Format a byte count as ``"512 B"``, ``"1.5 KB"``, ``"3.0 MB"``..."""
    if byte_size < 1024:
        return f"{byte_size} B"
    # floor(log1024(byte_size)) without float rounding at exact powers
    exp = (byte_size.bit_length() - 1) // 10
    exp = min(max(exp, 1), len(SIZE_UNITS))
    return f"{byte_size / 1024 ** exp:.1f} {SIZE_UNITS[exp - 1]}B"
