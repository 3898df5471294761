"""Deterministic serialization for gitdiffparser."""

import hashlib
import json
import logging
from enum import Enum
from typing import Any, Dict, List, Sequence

from .events import DiffEvent
from .models import ChunkDiff, Endpoint, FileDiffDocument

logger = logging.getLogger(__name__)


class DocumentSerializer:
    """Converts parsed documents and events to JSON-ready structures.

    File order is the order files appear in the diff and is never re-sorted.
    """

    def serialize_documents(self, documents: Sequence[FileDiffDocument]) -> Dict[str, Any]:
        """Serialize documents into a payload with a content checksum."""
        logger.debug("Serializing documents", extra={"documents": len(documents)})

        payload: Dict[str, Any] = {
            "files": [self._serialize_document(document) for document in documents],
            "file_count": len(documents),
        }
        payload["checksum"] = self._compute_checksum(payload)

        logger.debug("Serialization finished", extra={"checksum": payload["checksum"]})
        return payload

    def serialize_events(self, events: Sequence[DiffEvent]) -> List[Dict[str, Any]]:
        """Serialize tokenizer events in stream order."""
        return [
            {
                "state": event.state.value,
                "fields": {
                    name: value.name.lower() if isinstance(value, Enum) else value
                    for name, value in event.fields.items()
                },
                "raw_line": event.raw_line,
            }
            for event in events
        ]

    def _serialize_document(self, document: FileDiffDocument) -> Dict[str, Any]:
        """Serialize a single file diff to dictionary."""
        document_data = {
            "from": self._serialize_endpoint(document.from_endpoint),
            "to": self._serialize_endpoint(document.to_endpoint),
            "is_binary": document.is_binary,
            "chunks": [self._serialize_chunk(chunk) for chunk in document.chunks],
        }

        if document.is_rename:
            document_data["is_rename"] = True
            document_data["similarity_index"] = document.similarity_index

        return document_data

    def _serialize_endpoint(self, endpoint: Endpoint) -> Dict[str, Any]:
        return {
            "file": endpoint.file_path,
            "mode": endpoint.mode,
            "blob": endpoint.blob,
            "has_trailing_newline": endpoint.has_trailing_newline,
        }

    def _serialize_chunk(self, chunk: ChunkDiff) -> Dict[str, Any]:
        return {
            "from": {"start": chunk.from_range.start, "count": chunk.from_range.count},
            "to": {"start": chunk.to_range.start, "count": chunk.to_range.count},
            "added": chunk.added,
            "deleted": chunk.deleted,
            "lines": [
                {
                    "from_line_number": line.from_line_number,
                    "to_line_number": line.to_line_number,
                    "content": line.content,
                    "action": line.action.name.lower(),
                }
                for line in chunk.lines
            ],
        }

    def _compute_checksum(self, payload: Dict[str, Any]) -> str:
        """Compute SHA-256 checksum of the payload, ignoring any checksum key."""
        payload_copy = {key: value for key, value in payload.items() if key != "checksum"}
        checksum = hashlib.sha256(self._to_deterministic_json_bytes(payload_copy)).hexdigest()
        logger.debug("Computed payload checksum", extra={"checksum": checksum})
        return checksum

    def _to_deterministic_json_bytes(self, obj: Any) -> bytes:
        """Convert object to deterministic JSON bytes."""
        json_str = json.dumps(
            obj,
            ensure_ascii=False,
            sort_keys=True,
            separators=(",", ":"),
            indent=None,
        )
        return json_str.encode("utf-8", errors="replace")

    def to_json_string(self, payload: Dict[str, Any]) -> str:
        """Convert payload to pretty-printed JSON string."""
        return json.dumps(payload, ensure_ascii=False, sort_keys=True, indent=2)

    def create_success_envelope(self, payload: Any) -> Dict[str, Any]:
        """Create success envelope around payload."""
        return {"ok": True, "data": payload}

    def create_error_envelope(
        self, error_code: str, error_message: str, details: Dict[str, Any] = None
    ) -> Dict[str, Any]:
        """Create error envelope."""
        logger.debug("Creating error envelope", extra={"code": error_code})
        error_data = {
            "code": error_code,
            "message": error_message,
        }
        if details:
            error_data["details"] = details

        return {"ok": False, "error": error_data}
