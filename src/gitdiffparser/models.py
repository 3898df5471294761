"""Structured diff documents produced by the aggregator."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# Mode recorded for the side of a diff where the file does not exist.
ZERO_MODE = "0000000"


class LineAction(str, Enum):
    """Kind of change a single hunk line represents."""

    ADD = "+"
    DELETE = "-"
    CONTEXT = " "


@dataclass
class Endpoint:
    """One side (before or after) of a file diff."""

    file_path: str
    mode: Optional[str] = None
    blob: Optional[str] = None
    has_trailing_newline: bool = True


@dataclass
class LineRange:
    """Start line and line count of one side of a hunk."""

    start: int
    count: int


@dataclass
class ChunkLine:
    """A single line inside a hunk with its position on both sides."""

    from_line_number: int
    to_line_number: int
    content: str
    action: LineAction


@dataclass
class ChunkDiff:
    """A hunk: declared ranges for both sides and its lines."""

    from_range: LineRange
    to_range: LineRange
    lines: List[ChunkLine] = field(default_factory=list)

    @property
    def added(self) -> int:
        """Number of added lines."""
        return sum(1 for line in self.lines if line.action is LineAction.ADD)

    @property
    def deleted(self) -> int:
        """Number of deleted lines."""
        return sum(1 for line in self.lines if line.action is LineAction.DELETE)


@dataclass
class FileDiffDocument:
    """All changes recorded for one file in a diff."""

    from_endpoint: Endpoint
    to_endpoint: Endpoint
    is_binary: bool = False
    chunks: List[ChunkDiff] = field(default_factory=list)

    # Rename data
    is_rename: bool = False
    similarity_index: Optional[int] = None

    @property
    def is_new_file(self) -> bool:
        """True when the file did not exist before the change."""
        return self.from_endpoint.mode == ZERO_MODE

    @property
    def is_deleted_file(self) -> bool:
        """True when the file no longer exists after the change."""
        return self.to_endpoint.mode == ZERO_MODE
