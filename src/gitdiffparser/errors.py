"""Error definitions and handling for gitdiffparser."""

from typing import Any, Dict, Optional


class GitDiffParserError(Exception):
    """Base exception for gitdiffparser errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with code, message, and optional details."""
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class GrammarViolationError(GitDiffParserError):
    """A line matched no production allowed after the previous state."""

    def __init__(self, line_number: int, line: str, expected: str):
        super().__init__(
            code="GRAMMAR_VIOLATION",
            message=f"Line {line_number}: {expected}, got {line!r}",
            details={"line_number": line_number, "line": line, "expected": expected},
        )
        self.line_number = line_number
        self.line = line
        self.expected = expected


class ConsistencyViolationError(GitDiffParserError):
    """Aggregated state disagrees with an incoming event."""


class PathMismatchError(ConsistencyViolationError):
    """A header line references a different path than the file diff header."""

    def __init__(self, header: str, expected_path: str, actual_path: str):
        super().__init__(
            code="PATH_MISMATCH",
            message=f"{header} references {actual_path!r}, "
            f"but the file diff header declared {expected_path!r}",
            details={
                "header": header,
                "expected_path": expected_path,
                "actual_path": actual_path,
            },
        )


class TooManyNoNewlineMarkersError(ConsistencyViolationError):
    """More than two no-newline markers were seen for one file."""

    def __init__(self, path: str, count: int):
        super().__init__(
            code="NO_NEWLINE_LIMIT",
            message=f"File {path!r} has {count} no-newline markers, at most 2 allowed",
            details={"path": path, "count": count},
        )


class UnexpectedEventError(GitDiffParserError):
    """An event reached the aggregator where it cannot be handled."""

    def __init__(self, state: str, position: int, reason: str):
        super().__init__(
            code="UNEXPECTED_EVENT",
            message=f"Unexpected {state} event at position {position}: {reason}",
            details={"state": state, "position": position, "reason": reason},
        )


class InputTooLargeError(GitDiffParserError):
    """Diff input exceeds the configured size limit."""

    def __init__(self, size_bytes: int, limit_bytes: int):
        super().__init__(
            code="INPUT_TOO_LARGE",
            message=f"Diff input is {size_bytes} bytes, limit is {limit_bytes}",
            details={"size_bytes": size_bytes, "limit_bytes": limit_bytes},
        )
