"""Boundary types describing the host buffer capability the engine consumes."""

from __future__ import annotations

from typing import ContextManager, Optional, Protocol, Sequence

from shortcut_engine.runtime.settings import EngineSettings

from .state import Position, Range


class BufferView(Protocol):
    """Everything an action or the orchestrator may ask of a host buffer.

    Hosts wrap their own editor widget in an object satisfying this protocol;
    :class:`shortcut_engine.buffer.Buffer` is the in-memory reference.
    """

    settings: EngineSettings

    def line_count(self) -> int:
        ...

    def get_line(self, line: int) -> str:
        ...

    def get_value(self) -> str:
        ...

    def get_range(self, start: Position, end: Position) -> str:
        ...

    def replace_range(
        self, text: str, start: Position, end: Optional[Position] = None
    ) -> None:
        """Replace ``[start, end)`` (an insertion when ``end`` is omitted)."""
        ...

    def pos_to_offset(self, position: Position) -> int:
        ...

    def offset_to_pos(self, offset: int) -> Position:
        ...

    def list_selections(self) -> list[Range]:
        ...

    def set_selections(self, ranges: Sequence[Range]) -> None:
        ...

    def batch(self, label: str) -> ContextManager[object]:
        """Group every mutation made inside the block into one undo step."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a caller hands the buffer an out-of-bounds position."""

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position


__all__ = ["BufferView", "BufferValidationError"]
