from __future__ import annotations

"""
Directory Tree Data Models.

Provides the entry, lineage, render target and outcome types shared by the
renderer, the output coordinator and the CLI.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, TextIO, Tuple

# Ancestor chain: one flag per level, True when that ancestor was the last sibling.
Lineage = Tuple[bool, ...]

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryEntry:
    """
    A single filesystem node as seen by one directory listing.

    Attributes:
        name: Base name of the entry.
        path: Full path used to descend into directories.
        is_dir: Whether the entry is (or resolves to) a directory.
        is_hidden: Whether the name carries the hidden marker.
    """
    name: str
    path: str
    is_dir: bool
    is_hidden: bool


class OutputMode(Enum):
    """Destination(s) for a render pass."""
    CONSOLE_ONLY = "console"
    FILE_ONLY = "file"
    BOTH = "both"

    @property
    def writes_console(self) -> bool:
        return self in (OutputMode.CONSOLE_ONLY, OutputMode.BOTH)

    @property
    def writes_file(self) -> bool:
        return self in (OutputMode.FILE_ONLY, OutputMode.BOTH)

# -----------------------------------------------------------------------------
# RENDER TARGETS
# -----------------------------------------------------------------------------

class RenderTarget(Protocol):
    """Anything that accepts rendered lines in order."""

    def write_line(self, line: str) -> None:
        ...


class StreamTarget:
    """Render target backed by a text stream (console or open file)."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def write_line(self, line: str) -> None:
        self._stream.write(line + "\n")


class ListTarget:
    """Render target collecting lines in memory."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)

# -----------------------------------------------------------------------------
# EXECUTION RESULT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RenderOutcome:
    """
    Result of a coordinated render across one or two destinations.

    Attributes:
        mode: Destination selection used for the run.
        output_file: Path of the tree file, when a file was requested.
        console_lines: Lines printed to the console (root line included).
        file_lines: Lines written to the file (0 when writing failed).
        file_error: Cause of a file open/write failure, if any.
        interrupted: Whether waiting for the file task was interrupted.
    """
    mode: OutputMode
    output_file: Optional[str] = None
    console_lines: int = 0
    file_lines: int = 0
    file_error: Optional[str] = None
    interrupted: bool = False

    @property
    def ok(self) -> bool:
        return self.file_error is None and not self.interrupted
