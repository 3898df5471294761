"""Fold tokenizer events into file diff documents."""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from .errors import PathMismatchError, TooManyNoNewlineMarkersError, UnexpectedEventError
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
from .models import (
    ZERO_MODE,
    ChunkDiff,
    ChunkLine,
    Endpoint,
    FileDiffDocument,
    LineAction,
    LineRange,
)

logger = logging.getLogger(__name__)

MAX_NO_NEWLINE_MARKERS = 2


class DiffAggregator:
    """Builds FileDiffDocument objects from an ordered event sequence.

    The working set (current document, current chunk, line counters) lives on
    the instance and is reset at the start of every ``aggregate`` call.
    """

    def __init__(self):
        """Initialize aggregator and its dispatch table."""
        self._handlers: Dict[State, Callable[[DiffEvent], None]] = {
            State.FILE_DIFF_HEADER: self._on_file_diff_header,
            State.OLD_MODE: self._on_old_mode,
            State.NEW_MODE: self._on_new_mode,
            State.NEW_FILE_MODE: self._on_new_file_mode,
            State.DELETED_FILE_MODE: self._on_deleted_file_mode,
            State.RENAME_HEADER: self._on_rename_header,
            State.RENAME_FROM: self._on_rename_from,
            State.RENAME_TO: self._on_rename_to,
            State.INDEX_HEADER: self._on_index_header,
            State.BINARY: self._on_binary,
            State.A_FILE_HEADER: self._on_a_file_header,
            State.B_FILE_HEADER: self._on_b_file_header,
            State.CHUNK_HEADER: self._on_chunk_header,
            State.LINE_DIFF: self._on_line_diff,
            State.NO_NEWLINE: self._on_no_newline,
        }
        self._reset()

    def _reset(self) -> None:
        self._documents: List[FileDiffDocument] = []
        self._document: Optional[FileDiffDocument] = None
        self._chunk: Optional[ChunkDiff] = None
        self._from_line = 0
        self._to_line = 0
        self._no_newline_count = 0
        self._position = 0
        self._state = State.START_OF_FILE

    def aggregate(self, events: Iterable[DiffEvent]) -> List[FileDiffDocument]:
        """Fold ``events`` into an ordered list of documents.

        Raises:
            PathMismatchError: A header path disagrees with the file header.
            TooManyNoNewlineMarkersError: A file has a third no-newline marker.
            UnexpectedEventError: An event has no handler or arrives before
                the document or chunk it belongs to.
        """
        self._reset()
        try:
            for position, event in enumerate(events):
                if not isinstance(event, DiffEvent):
                    raise UnexpectedEventError(
                        type(event).__name__, position, "not a diff event"
                    )
                state = event.state
                handler = self._handlers.get(state)
                if handler is None:
                    raise UnexpectedEventError(
                        state.value, position, "no handler for this event"
                    )
                self._position = position
                self._state = state
                handler(event)

            if self._document is not None:
                self._documents.append(self._document)
            documents = self._documents
        finally:
            self._reset()

        logger.debug("Aggregated %s file diff documents", len(documents))
        return documents

    def _unexpected(self, reason: str) -> UnexpectedEventError:
        return UnexpectedEventError(self._state.value, self._position, reason)

    def _require_document(self) -> FileDiffDocument:
        if self._document is None:
            raise self._unexpected("no file diff header seen yet")
        return self._document

    def _require_chunk(self) -> ChunkDiff:
        if self._chunk is None:
            raise self._unexpected("no chunk header seen yet")
        return self._chunk

    def _check_path(self, header: str, recorded: str, captured: Optional[str]) -> None:
        if captured is not None and captured != recorded:
            logger.debug(
                "Header path mismatch",
                extra={"header": header, "expected": recorded, "actual": captured},
            )
            raise PathMismatchError(header, recorded, captured)

    def _on_file_diff_header(self, event: FileDiffHeaderEvent) -> None:
        if self._document is not None:
            self._documents.append(self._document)

        self._document = FileDiffDocument(
            from_endpoint=Endpoint(file_path=event.from_file),
            to_endpoint=Endpoint(file_path=event.to_file),
        )
        self._chunk = None
        self._no_newline_count = 0

    def _on_new_file_mode(self, event: NewFileModeEvent) -> None:
        document = self._require_document()
        document.from_endpoint.mode = ZERO_MODE
        document.to_endpoint.mode = event.mode

    def _on_old_mode(self, event: OldModeEvent) -> None:
        self._require_document().from_endpoint.mode = event.mode

    def _on_new_mode(self, event: NewModeEvent) -> None:
        self._require_document().to_endpoint.mode = event.mode

    def _on_deleted_file_mode(self, event: DeletedFileModeEvent) -> None:
        document = self._require_document()
        document.from_endpoint.mode = event.mode
        document.to_endpoint.mode = ZERO_MODE

    def _on_rename_header(self, event: RenameHeaderEvent) -> None:
        document = self._require_document()
        document.is_rename = True
        document.similarity_index = event.rate

    def _on_rename_from(self, event: RenameFromEvent) -> None:
        document = self._require_document()
        self._check_path("rename from", document.from_endpoint.file_path, event.from_file)

    def _on_rename_to(self, event: RenameToEvent) -> None:
        document = self._require_document()
        self._check_path("rename to", document.to_endpoint.file_path, event.to_file)

    def _on_a_file_header(self, event: AFileHeaderEvent) -> None:
        document = self._require_document()
        self._check_path("--- header", document.from_endpoint.file_path, event.file)

    def _on_b_file_header(self, event: BFileHeaderEvent) -> None:
        document = self._require_document()
        self._check_path("+++ header", document.to_endpoint.file_path, event.file)

    def _on_index_header(self, event: IndexHeaderEvent) -> None:
        document = self._require_document()
        document.from_endpoint.blob = event.from_blob
        document.to_endpoint.blob = event.to_blob

        # Unchanged mode is only reported on the index line
        if event.mode is not None:
            document.from_endpoint.mode = event.mode
            document.to_endpoint.mode = event.mode

    def _on_binary(self, event: BinaryEvent) -> None:
        self._require_document().is_binary = True

    def _on_chunk_header(self, event: ChunkHeaderEvent) -> None:
        document = self._require_document()
        self._chunk = ChunkDiff(
            from_range=LineRange(start=event.from_start, count=event.from_count),
            to_range=LineRange(start=event.to_start, count=event.to_count),
        )
        document.chunks.append(self._chunk)
        self._from_line = event.from_start
        self._to_line = event.to_start

    def _on_line_diff(self, event: LineDiffEvent) -> None:
        document = self._require_document()
        chunk = self._require_chunk()

        chunk.lines.append(
            ChunkLine(
                from_line_number=self._from_line,
                to_line_number=self._to_line,
                content=event.content,
                action=event.action,
            )
        )

        if event.action in (LineAction.CONTEXT, LineAction.DELETE):
            self._from_line += 1
        if event.action in (LineAction.CONTEXT, LineAction.ADD):
            self._to_line += 1

        # A marker followed by more content resets both sides, not just "to"
        if self._no_newline_count > 0:
            document.from_endpoint.has_trailing_newline = True
            document.to_endpoint.has_trailing_newline = True

    def _on_no_newline(self, event: NoNewlineEvent) -> None:
        document = self._require_document()
        self._require_chunk()

        self._no_newline_count += 1
        if self._no_newline_count > MAX_NO_NEWLINE_MARKERS:
            raise TooManyNoNewlineMarkersError(
                document.to_endpoint.file_path, self._no_newline_count
            )
        document.to_endpoint.has_trailing_newline = False


def aggregate(events: Iterable[DiffEvent]) -> List[FileDiffDocument]:
    """Aggregate events with a fresh aggregator."""
    return DiffAggregator().aggregate(events)
