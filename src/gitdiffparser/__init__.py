"""gitdiffparser.

Parses unified diff text, as produced by ``git diff``, into structured file
and hunk documents with per-line numbering.
"""

__version__ = "1.0.0"

from .aggregator import DiffAggregator, aggregate
from .errors import (
    ConsistencyViolationError,
    GitDiffParserError,
    GrammarViolationError,
    InputTooLargeError,
    PathMismatchError,
    TooManyNoNewlineMarkersError,
    UnexpectedEventError,
)
from .events import DiffEvent, State
from .models import (
    ZERO_MODE,
    ChunkDiff,
    ChunkLine,
    Endpoint,
    FileDiffDocument,
    LineAction,
    LineRange,
)
from .parser import DiffParser, parse_lines, parse_text
from .tokenizer import DiffTokenizer, tokenize

__all__ = [
    "ZERO_MODE",
    "ChunkDiff",
    "ChunkLine",
    "ConsistencyViolationError",
    "DiffAggregator",
    "DiffEvent",
    "DiffParser",
    "DiffTokenizer",
    "Endpoint",
    "FileDiffDocument",
    "GitDiffParserError",
    "GrammarViolationError",
    "InputTooLargeError",
    "LineAction",
    "LineRange",
    "PathMismatchError",
    "State",
    "TooManyNoNewlineMarkersError",
    "UnexpectedEventError",
    "aggregate",
    "parse_lines",
    "parse_text",
    "tokenize",
]
