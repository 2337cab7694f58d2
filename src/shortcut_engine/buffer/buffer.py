"""In-memory reference implementation of the ``BufferView`` capability."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Iterable, Optional, Sequence, Tuple

from shortcut_engine.runtime import telemetry
from shortcut_engine.runtime.settings import EngineSettings

from .document import BufferDocument
from .state import Position, Range
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_position, ensure_range
from .view import BufferValidationError


class Buffer:
    """Text plus a selection set, mutated through batched transactions."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        selections: Optional[Iterable[Range]] = None,
        settings: Optional[EngineSettings] = None,
        history: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.settings = settings or EngineSettings()
        self.history = history or UndoTimeline()
        self._selections: Tuple[Range, ...] = tuple(
            selections or (Range.cursor(Position(0, 0)),)
        )
        self._transaction: Optional[Transaction] = None

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        name: str = "default",
        selections: Optional[Iterable[Range]] = None,
        settings: Optional[EngineSettings] = None,
    ) -> "Buffer":
        document = BufferDocument.from_text(text)
        ranges = None
        if selections is not None:
            ranges = [ensure_range(document, item) for item in selections]
        return cls(name=name, document=document, selections=ranges, settings=settings)

    # -- BufferView capability -------------------------------------------

    def line_count(self) -> int:
        return self.document.line_count

    def get_line(self, line: int) -> str:
        ensure_position(self.document, Position(line, 0))
        return self.document.get_line(line)

    def get_value(self) -> str:
        return self.document.text

    def get_range(self, start: Position, end: Position) -> str:
        start = ensure_position(self.document, start)
        end = ensure_position(self.document, end)
        if end < start:
            start, end = end, start
        text = self.document.text
        return text[self.document.offset_of(start) : self.document.offset_of(end)]

    def replace_range(
        self, text: str, start: Position, end: Optional[Position] = None
    ) -> None:
        end = start if end is None else end
        start = ensure_position(self.document, start)
        end = ensure_position(self.document, end)
        if end < start:
            start, end = end, start
        with self.batch("replace_range"):
            self.document = self.document.splice(start, end, text)

    def pos_to_offset(self, position: Position) -> int:
        return self.document.offset_of(ensure_position(self.document, position))

    def offset_to_pos(self, offset: int) -> Position:
        return self.document.position_at(offset)

    def list_selections(self) -> list[Range]:
        return list(self._selections)

    def set_selections(self, ranges: Sequence[Range]) -> None:
        if not ranges:
            raise BufferValidationError("A buffer needs at least one selection")
        validated = tuple(ensure_range(self.document, item) for item in ranges)
        with self.batch("set_selections"):
            self._selections = validated

    def batch(self, label: str) -> ContextManager["Transaction"]:
        if self._transaction is not None:
            return _JoinedTransaction(self._transaction)
        return Transaction(self, label)

    # -- history ----------------------------------------------------------

    def undo(self) -> bool:
        """Restore the state before the latest committed batch."""

        entry = self.history.undo()
        if entry is None:
            return False
        self.document = BufferDocument(
            lines=BufferDocument.from_text(entry.before_text).lines,
            version=self.document.version + 1,
        )
        self._selections = entry.selections_before
        return True


class Transaction(AbstractContextManager["Transaction"]):
    """Outermost batch on a buffer; records one history entry on success.

    A failing block restores the document and selections captured on entry,
    so partial edits are never observable.
    """

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._before_document: BufferDocument = buffer.document
        self._before_selections: Tuple[Range, ...] = buffer._selections

    def __enter__(self) -> "Transaction":
        self._before_document = self.buffer.document
        self._before_selections = self.buffer._selections
        self.buffer._transaction = self
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.buffer._transaction = None
        before = self._before_document
        if exc_type is None:
            self.buffer.history.push(
                UndoEntry(
                    label=self.label,
                    before_text=before.text,
                    selections_before=self._before_selections,
                )
            )
        else:
            self.buffer.document = before
            self.buffer._selections = self._before_selections
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


class _JoinedTransaction(AbstractContextManager[Transaction]):
    """Nested ``batch`` call folded into the already open transaction."""

    def __init__(self, outer: Transaction) -> None:
        self.outer = outer

    def __enter__(self) -> Transaction:
        return self.outer

    def __exit__(self, exc_type, exc, tb) -> bool:
        return False


__all__ = ["Buffer", "Transaction"]
