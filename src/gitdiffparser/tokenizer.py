"""Context-sensitive line tokenizer for unified diffs.

The grammar is a finite-state machine: each production names the state it
produces, the states it may follow, and the pattern a line must match. The
table is compiled once at import time and shared by every tokenizer.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Tuple, Type

from .errors import GrammarViolationError
from .events import (
    AFileHeaderEvent,
    BFileHeaderEvent,
    BinaryEvent,
    ChunkHeaderEvent,
    DeletedFileModeEvent,
    DiffEvent,
    FileDiffHeaderEvent,
    IndexHeaderEvent,
    LineDiffEvent,
    NewFileModeEvent,
    NewModeEvent,
    NoNewlineEvent,
    OldModeEvent,
    RenameFromEvent,
    RenameHeaderEvent,
    RenameToEvent,
    State,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Production:
    """A single grammar rule."""

    state: State
    previous: FrozenSet[State]
    pattern: re.Pattern
    event_type: Type[DiffEvent]
    description: str


_HEADER_STATES = frozenset(
    {
        State.RENAME_TO,
        State.FILE_DIFF_HEADER,
        State.NEW_MODE,
        State.NEW_FILE_MODE,
        State.DELETED_FILE_MODE,
    }
)

# Order matters: for a given previous state the first matching production wins.
GRAMMAR: Tuple[Production, ...] = (
    Production(
        State.FILE_DIFF_HEADER,
        frozenset(
            {
                State.START_OF_FILE,
                State.NEW_MODE,
                State.LINE_DIFF,
                State.NO_NEWLINE,
                State.INDEX_HEADER,
                State.BINARY,
                State.RENAME_TO,
            }
        ),
        re.compile(r"^diff --git a/(?P<from_file>.*?)\s* b/(?P<to_file>.*?)\s*$"),
        FileDiffHeaderEvent,
        "file diff header",
    ),
    Production(
        State.OLD_MODE,
        frozenset({State.FILE_DIFF_HEADER}),
        re.compile(r"^old mode (?P<mode>\d+)$"),
        OldModeEvent,
        "old mode header",
    ),
    Production(
        State.NEW_MODE,
        frozenset({State.OLD_MODE}),
        re.compile(r"^new mode (?P<mode>\d+)$"),
        NewModeEvent,
        "new mode header",
    ),
    Production(
        State.NEW_FILE_MODE,
        frozenset({State.FILE_DIFF_HEADER}),
        re.compile(r"^new file mode (?P<mode>\d+)$"),
        NewFileModeEvent,
        "new file mode header",
    ),
    Production(
        State.DELETED_FILE_MODE,
        frozenset({State.FILE_DIFF_HEADER}),
        re.compile(r"^deleted file mode (?P<mode>\d+)$"),
        DeletedFileModeEvent,
        "deleted file mode header",
    ),
    Production(
        State.RENAME_HEADER,
        _HEADER_STATES,
        re.compile(r"^similarity index (?P<rate>\d+)%?$"),
        RenameHeaderEvent,
        "similarity index header",
    ),
    Production(
        State.RENAME_FROM,
        frozenset({State.RENAME_HEADER}),
        re.compile(r"^rename from (?P<from_file>.+)$"),
        RenameFromEvent,
        "rename from header",
    ),
    Production(
        State.RENAME_TO,
        frozenset({State.RENAME_FROM}),
        re.compile(r"^rename to (?P<to_file>.+)$"),
        RenameToEvent,
        "rename to header",
    ),
    Production(
        State.INDEX_HEADER,
        _HEADER_STATES,
        re.compile(r"^index (?P<from_blob>.*?)\.\.(?P<to_blob>.*?)(?: (?P<mode>\d+))?$"),
        IndexHeaderEvent,
        "index header",
    ),
    Production(
        State.BINARY,
        frozenset({State.INDEX_HEADER}),
        re.compile(r"^Binary files (?P<from_file>.*) and (?P<to_file>.*) differ$"),
        BinaryEvent,
        "binary files notice",
    ),
    Production(
        State.A_FILE_HEADER,
        frozenset({State.INDEX_HEADER}),
        re.compile(r"^--- (?:/dev/null|a/(?P<file>.*?)\s*)$"),
        AFileHeaderEvent,
        "--- file header",
    ),
    Production(
        State.B_FILE_HEADER,
        frozenset({State.A_FILE_HEADER}),
        re.compile(r"^\+\+\+ (?:/dev/null|b/(?P<file>.*?)\s*)$"),
        BFileHeaderEvent,
        "+++ file header",
    ),
    Production(
        State.CHUNK_HEADER,
        frozenset({State.B_FILE_HEADER, State.LINE_DIFF, State.NO_NEWLINE}),
        re.compile(
            r"^@@ -(?P<from_start>\d+)(?:,(?P<from_count>\d+))? "
            r"\+(?P<to_start>\d+)?(?:,(?P<to_count>\d+))? @@(?P<trailer>.*)$"
        ),
        ChunkHeaderEvent,
        "chunk header",
    ),
    Production(
        State.LINE_DIFF,
        frozenset({State.CHUNK_HEADER, State.LINE_DIFF, State.NO_NEWLINE}),
        re.compile(r"^(?P<action>[-+ ])(?P<content>.*)$"),
        LineDiffEvent,
        "line diff",
    ),
    Production(
        State.NO_NEWLINE,
        frozenset({State.CHUNK_HEADER, State.LINE_DIFF}),
        re.compile(r"^\\ No newline at end of file$"),
        NoNewlineEvent,
        "no newline marker",
    ),
)


def _build_transitions() -> Dict[State, Tuple[Production, ...]]:
    transitions: Dict[State, Tuple[Production, ...]] = {}
    for state in State:
        transitions[state] = tuple(p for p in GRAMMAR if state in p.previous)
    return transitions


TRANSITIONS: Dict[State, Tuple[Production, ...]] = _build_transitions()


def allowed_after(state: State) -> Tuple[Production, ...]:
    """Return the productions that may follow ``state``, in priority order."""
    return TRANSITIONS[state]


def expected_description(state: State) -> str:
    """Human-readable description of what may follow ``state``."""
    names = [p.description for p in TRANSITIONS[state]]
    if not names:
        return f"nothing may follow {state.value}"
    return "expected " + " or ".join(names)


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


class DiffTokenizer:
    """Classifies raw diff lines into typed events."""

    def classify(self, line: str, previous: State) -> DiffEvent:
        """Classify one line given the previously produced state.

        Raises:
            GrammarViolationError: If no production allowed after ``previous``
                matches. The line number is reported as 0; ``tokenize``
                reports the real position.
        """
        for production in TRANSITIONS[previous]:
            match = production.pattern.match(line)
            if match:
                return production.event_type.from_match(match, line)
        raise GrammarViolationError(0, line, expected_description(previous))

    def tokenize(self, lines: Iterable[str]) -> List[DiffEvent]:
        """Classify every line, failing on the first unclassifiable one.

        Either every line is classified or ``GrammarViolationError`` is
        raised; a partial event list is never returned. The error carries the
        offending line as it was passed in, terminator included.
        """
        events: List[DiffEvent] = []
        state = State.START_OF_FILE

        for index, raw in enumerate(lines, start=1):
            line = _strip_terminator(raw)
            try:
                event = self.classify(line, state)
            except GrammarViolationError as exc:
                logger.debug(
                    "Tokenization failed",
                    extra={"line_number": index, "previous_state": state.value},
                )
                raise GrammarViolationError(index, raw, exc.expected) from None
            events.append(event)
            state = event.state

        logger.debug("Tokenized diff into %s events", len(events))
        return events


_default_tokenizer = DiffTokenizer()


def tokenize(lines: Iterable[str]) -> List[DiffEvent]:
    """Tokenize lines with the shared tokenizer."""
    return _default_tokenizer.tokenize(lines)
