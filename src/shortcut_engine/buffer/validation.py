"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import BufferDocument
from .state import Position, Range
from .view import BufferValidationError


def ensure_position(document: BufferDocument, position: Position) -> Position:
    if position.line < 0 or position.line >= document.line_count:
        raise BufferValidationError("Line out of range", position=position)
    line = document.get_line(position.line)
    if position.ch < 0 or position.ch > len(line):
        raise BufferValidationError("Column out of range", position=position)
    return position


def ensure_range(document: BufferDocument, selection: Range) -> Range:
    ensure_position(document, selection.anchor)
    ensure_position(document, selection.head)
    return selection


def clamp_position(document: BufferDocument, line: int, ch: int) -> Position:
    line = max(0, min(line, document.line_count - 1))
    ch = max(0, min(ch, len(document.get_line(line))))
    return Position(line, ch)
