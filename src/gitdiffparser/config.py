"""Configuration management for gitdiffparser."""

import codecs
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ParseConfig:
    """Configuration for reading and parsing diff input."""

    # Text decoding for diff files
    encoding: str = "utf-8"

    # Input size cap (in bytes)
    max_input_bytes: int = 8_000_000  # 8 MB

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_input_bytes <= 0:
            raise ValueError("max_input_bytes must be positive")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {self.encoding}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for output."""
        return {
            "encoding": self.encoding,
            "max_input_bytes": self.max_input_bytes,
        }
