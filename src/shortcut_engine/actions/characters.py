"""Deletions running from the cursor to a line boundary."""

from __future__ import annotations

from shortcut_engine.buffer import BufferView, Position, Range

from .base import EditResult, TextEdit, last_line, line_end


def delete_to_start_of_line(view: BufferView, selection: Range) -> EditResult:
    head = selection.head
    if head.ch > 0:
        start = Position(head.line, 0)
    elif head.line > 0:
        start = line_end(view, head.line - 1)
    else:
        return EditResult.move(selection)
    return EditResult.change(TextEdit.delete(start, head), Range.cursor(start))


def delete_to_end_of_line(view: BufferView, selection: Range) -> EditResult:
    head = selection.head
    end = line_end(view, head.line)
    if head.ch == end.ch:
        if head.line >= last_line(view):
            return EditResult.move(selection)
        end = Position(head.line + 1, 0)
    return EditResult.change(TextEdit.delete(head, end), Range.cursor(head))


__all__ = ["delete_to_start_of_line", "delete_to_end_of_line"]
