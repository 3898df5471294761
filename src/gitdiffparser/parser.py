"""Tokenize-then-aggregate pipeline."""

import logging
from typing import Iterable, List

from .aggregator import DiffAggregator
from .config import ParseConfig
from .errors import InputTooLargeError
from .models import FileDiffDocument
from .tokenizer import DiffTokenizer

logger = logging.getLogger(__name__)


def check_input_size(text: str, config: ParseConfig) -> None:
    """Raise InputTooLargeError if ``text`` exceeds the configured byte cap."""
    size = len(text.encode(config.encoding, errors="replace"))
    if size > config.max_input_bytes:
        logger.debug(
            "Diff input over size cap",
            extra={"size_bytes": size, "limit_bytes": config.max_input_bytes},
        )
        raise InputTooLargeError(size, config.max_input_bytes)


def split_lines(text: str) -> List[str]:
    """Split diff text on ``\\n`` or ``\\r\\n``.

    The empty tail after a final newline is dropped. Other line separators
    recognised by ``str.splitlines`` are hunk content, not line breaks.
    """
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class DiffParser:
    """Parses unified diff text into FileDiffDocument objects."""

    def __init__(self):
        """Initialize parser stages."""
        self.tokenizer = DiffTokenizer()

    def parse_lines(self, lines: Iterable[str]) -> List[FileDiffDocument]:
        """Parse an ordered sequence of diff lines.

        Tokenization completes before aggregation starts, so a grammar error
        anywhere in the input yields no documents at all.
        """
        events = self.tokenizer.tokenize(lines)
        documents = DiffAggregator().aggregate(events)
        logger.debug(
            "Parsed diff",
            extra={"events": len(events), "documents": len(documents)},
        )
        return documents

    def parse_text(self, text: str) -> List[FileDiffDocument]:
        """Parse a whole diff held in a string."""
        return self.parse_lines(split_lines(text))


def parse_lines(lines: Iterable[str]) -> List[FileDiffDocument]:
    """Parse diff lines into documents."""
    return DiffParser().parse_lines(lines)


def parse_text(text: str) -> List[FileDiffDocument]:
    """Parse diff text into documents."""
    return DiffParser().parse_text(text)
