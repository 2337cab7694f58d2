"""Actions that derive extra cursors from existing selections."""

from __future__ import annotations

from typing import Literal

from shortcut_engine.buffer import BufferView, Position, Range

from .base import EditResult, last_line, line_end

CursorPlacement = Literal["head", "line_ends"]


def add_cursors_to_selection_ends(
    view: BufferView, selection: Range, placement: CursorPlacement = "head"
) -> EditResult:
    """Add collapsed cursors derived from a non-empty selection.

    ``"head"`` keeps the selection and adds a cursor at its head;
    ``"line_ends"`` replaces it with a cursor at the end of every spanned
    line, the last one sitting at the selection's end.
    """

    if selection.empty:
        return EditResult.move(selection)
    if placement == "head":
        return EditResult.move(selection, Range.cursor(selection.head))
    if placement == "line_ends":
        start, end = selection.from_, selection.to
        cursors = [Range.cursor(line_end(view, line)) for line in range(start.line, end.line)]
        cursors.append(Range.cursor(end))
        return EditResult.move(*cursors)
    raise ValueError(f"Unknown cursor placement '{placement}'")


def _adjacent_cursor(view: BufferView, selection: Range, line: int) -> EditResult:
    ch = min(selection.head.ch, len(view.get_line(line)))
    return EditResult.move(Range.cursor(Position(line, ch)), selection)


def insert_cursor_above(view: BufferView, selection: Range) -> EditResult:
    if selection.head.line == 0:
        return EditResult.move(selection)
    return _adjacent_cursor(view, selection, selection.head.line - 1)


def insert_cursor_below(view: BufferView, selection: Range) -> EditResult:
    if selection.head.line >= last_line(view):
        return EditResult.move(selection)
    return _adjacent_cursor(view, selection, selection.head.line + 1)


__all__ = [
    "CursorPlacement",
    "add_cursors_to_selection_ends",
    "insert_cursor_above",
    "insert_cursor_below",
]
