"""Typed events emitted by the tokenizer, one per classified diff line."""

import dataclasses
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional

from .models import LineAction


class State(str, Enum):
    """Grammar states of the unified diff tokenizer."""

    START_OF_FILE = "start_of_file"
    FILE_DIFF_HEADER = "file_diff_header"
    OLD_MODE = "old_mode"
    NEW_MODE = "new_mode"
    NEW_FILE_MODE = "new_file_mode"
    DELETED_FILE_MODE = "deleted_file_mode"
    RENAME_HEADER = "rename_header"
    RENAME_FROM = "rename_from"
    RENAME_TO = "rename_to"
    INDEX_HEADER = "index_header"
    BINARY = "binary"
    A_FILE_HEADER = "a_file_header"
    B_FILE_HEADER = "b_file_header"
    CHUNK_HEADER = "chunk_header"
    LINE_DIFF = "line_diff"
    NO_NEWLINE = "no_newline"


@dataclass(frozen=True)
class DiffEvent:
    """Base class for a classified line.

    Subclasses declare the fields captured by their grammar production and
    set ``state`` to the tag they represent.
    """

    state: ClassVar[State]

    raw_line: str

    @classmethod
    def from_match(cls, match: re.Match, raw_line: str) -> "DiffEvent":
        """Build the event from a successful pattern match."""
        return cls(raw_line=raw_line, **match.groupdict())

    @property
    def fields(self) -> Dict[str, Any]:
        """Captured fields by name, excluding the raw line."""
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if f.name != "raw_line"
        }


@dataclass(frozen=True)
class FileDiffHeaderEvent(DiffEvent):
    state: ClassVar[State] = State.FILE_DIFF_HEADER

    from_file: str
    to_file: str


@dataclass(frozen=True)
class OldModeEvent(DiffEvent):
    state: ClassVar[State] = State.OLD_MODE

    mode: str


@dataclass(frozen=True)
class NewModeEvent(DiffEvent):
    state: ClassVar[State] = State.NEW_MODE

    mode: str


@dataclass(frozen=True)
class NewFileModeEvent(DiffEvent):
    state: ClassVar[State] = State.NEW_FILE_MODE

    mode: str


@dataclass(frozen=True)
class DeletedFileModeEvent(DiffEvent):
    state: ClassVar[State] = State.DELETED_FILE_MODE

    mode: str


@dataclass(frozen=True)
class RenameHeaderEvent(DiffEvent):
    state: ClassVar[State] = State.RENAME_HEADER

    rate: int

    @classmethod
    def from_match(cls, match: re.Match, raw_line: str) -> "RenameHeaderEvent":
        return cls(raw_line=raw_line, rate=int(match.group("rate")))


@dataclass(frozen=True)
class RenameFromEvent(DiffEvent):
    state: ClassVar[State] = State.RENAME_FROM

    from_file: str


@dataclass(frozen=True)
class RenameToEvent(DiffEvent):
    state: ClassVar[State] = State.RENAME_TO

    to_file: str


@dataclass(frozen=True)
class IndexHeaderEvent(DiffEvent):
    state: ClassVar[State] = State.INDEX_HEADER

    from_blob: str
    to_blob: str
    mode: Optional[str] = None


@dataclass(frozen=True)
class BinaryEvent(DiffEvent):
    state: ClassVar[State] = State.BINARY

    from_file: str
    to_file: str


@dataclass(frozen=True)
class AFileHeaderEvent(DiffEvent):
    """``--- a/<path>`` line; ``file`` is None for ``/dev/null``."""

    state: ClassVar[State] = State.A_FILE_HEADER

    file: Optional[str] = None


@dataclass(frozen=True)
class BFileHeaderEvent(DiffEvent):
    """``+++ b/<path>`` line; ``file`` is None for ``/dev/null``."""

    state: ClassVar[State] = State.B_FILE_HEADER

    file: Optional[str] = None


@dataclass(frozen=True)
class ChunkHeaderEvent(DiffEvent):
    """Hunk header with omitted counts and start already defaulted."""

    state: ClassVar[State] = State.CHUNK_HEADER

    from_start: int
    from_count: int
    to_start: int
    to_count: int
    trailer: str = ""

    @classmethod
    def from_match(cls, match: re.Match, raw_line: str) -> "ChunkHeaderEvent":
        groups = match.groupdict()
        from_start = int(groups["from_start"])
        # A missing new-side start mirrors the old-side start
        to_start = int(groups["to_start"]) if groups["to_start"] is not None else from_start
        return cls(
            raw_line=raw_line,
            from_start=from_start,
            from_count=int(groups["from_count"] or 1),
            to_start=to_start,
            to_count=int(groups["to_count"] or 1),
            trailer=groups["trailer"],
        )


@dataclass(frozen=True)
class LineDiffEvent(DiffEvent):
    state: ClassVar[State] = State.LINE_DIFF

    action: LineAction
    content: str

    @classmethod
    def from_match(cls, match: re.Match, raw_line: str) -> "LineDiffEvent":
        return cls(
            raw_line=raw_line,
            action=LineAction(match.group("action")),
            content=match.group("content"),
        )


@dataclass(frozen=True)
class NoNewlineEvent(DiffEvent):
    state: ClassVar[State] = State.NO_NEWLINE
