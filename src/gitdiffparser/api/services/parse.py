"""Service layer for gitdiffparser API."""

import logging
from typing import Any, Dict, Optional

from ...config import ParseConfig
from ...errors import GitDiffParserError
from ...parser import DiffParser, check_input_size, split_lines
from ...serialize import DocumentSerializer
from ...settings import get_parse_config

logger = logging.getLogger(__name__)


class ParseService:
    """Service class that wraps the parsing pipeline in response envelopes."""

    def __init__(self, config: Optional[ParseConfig] = None):
        """Initialize with configuration, defaulting to environment settings."""
        self.config = config or get_parse_config()
        self.serializer = DocumentSerializer()

    def parse_diff_request(self, diff_text: str) -> Dict[str, Any]:
        """Parse diff text and return a success or error envelope."""
        logger.info("Processing parse request", extra={"chars": len(diff_text)})

        try:
            check_input_size(diff_text, self.config)
            documents = DiffParser().parse_text(diff_text)
            payload = self.serializer.serialize_documents(documents)

            logger.info(
                "Parse request succeeded",
                extra={"files": payload["file_count"], "checksum": payload["checksum"]},
            )
            return self.serializer.create_success_envelope(payload)

        except GitDiffParserError as exc:
            logger.warning("Diff rejected", extra={"code": exc.code})
            return self.serializer.create_error_envelope(exc.code, exc.message, exc.details)

    def tokenize_request(self, diff_text: str) -> Dict[str, Any]:
        """Tokenize diff text and return the event list in an envelope."""
        logger.info("Processing tokenize request", extra={"chars": len(diff_text)})

        try:
            check_input_size(diff_text, self.config)
            events = DiffParser().tokenizer.tokenize(split_lines(diff_text))
            return self.serializer.create_success_envelope(
                {"events": self.serializer.serialize_events(events), "event_count": len(events)}
            )

        except GitDiffParserError as exc:
            logger.warning("Diff rejected", extra={"code": exc.code})
            return self.serializer.create_error_envelope(exc.code, exc.message, exc.details)
