"""Whole-line actions: insert, delete, join and duplicate."""

from __future__ import annotations

from typing import Literal

from shortcut_engine.buffer import BufferView, Position, Range

from .base import (
    EditResult,
    TextEdit,
    last_line,
    leading_whitespace,
    line_end,
    spanned_lines,
)
from .lists import InsertDirection, match_list_item, strip_join_marker

CopyDirection = Literal["up", "down"]


def _list_prefix(view: BufferView, line: int, direction: InsertDirection) -> str:
    if not view.settings.auto_insert_list_prefix:
        return ""
    if direction == "above" and (line == 0 or not view.get_line(line - 1).strip()):
        return ""
    context = match_list_item(view.get_line(line))
    if context is None or context.is_empty:
        return ""
    return context.continuation(direction)


def insert_line_above(view: BufferView, selection: Range) -> EditResult:
    line = selection.from_.line
    prefix = leading_whitespace(view.get_line(line)) + _list_prefix(view, line, "above")
    edit = TextEdit.insert(Position(line, 0), prefix + "\n")
    return EditResult.change(edit, Range.cursor(Position(line, len(prefix))))


def insert_line_below(view: BufferView, selection: Range) -> EditResult:
    line = selection.to.line
    prefix = leading_whitespace(view.get_line(line)) + _list_prefix(view, line, "below")
    edit = TextEdit.insert(line_end(view, line), "\n" + prefix)
    return EditResult.change(edit, Range.cursor(Position(line + 1, len(prefix))))


def delete_selected_lines(view: BufferView, selection: Range) -> EditResult:
    first, last = spanned_lines(selection)
    final = last_line(view)
    if last < final:
        edit = TextEdit.delete(Position(first, 0), Position(last + 1, 0))
        return EditResult.change(edit, Range.cursor(Position(first, 0)))
    if first > 0:
        edit = TextEdit.delete(line_end(view, first - 1), line_end(view, last))
        return EditResult.change(edit, Range.cursor(Position(first - 1, 0)))
    edit = TextEdit.delete(Position(0, 0), line_end(view, last))
    return EditResult.change(edit, Range.cursor(Position(0, 0)))


def join_lines(view: BufferView, selection: Range) -> EditResult:
    line = selection.head.line
    join_point = line_end(view, line)
    if line >= last_line(view):
        return EditResult.move(Range.cursor(join_point))

    current = view.get_line(line)
    following = strip_join_marker(view.get_line(line + 1).lstrip())
    separator = ""
    if following and current and not current[-1].isspace():
        separator = " "
    edit = TextEdit(join_point, line_end(view, line + 1), separator + following)
    return EditResult.change(edit, Range.cursor(join_point))


def copy_line(
    view: BufferView, selection: Range, direction: CopyDirection = "down"
) -> EditResult:
    if direction not in ("up", "down"):
        raise ValueError(f"Unknown copy direction '{direction}'")
    first, last = spanned_lines(selection)
    block = "\n".join(view.get_line(line) for line in range(first, last + 1))
    edit = TextEdit.insert(line_end(view, last), "\n" + block)
    if direction == "up":
        return EditResult.change(edit, selection)
    shift = last - first + 1
    moved = Range(
        Position(selection.anchor.line + shift, selection.anchor.ch),
        Position(selection.head.line + shift, selection.head.ch),
    )
    return EditResult.change(edit, moved)


__all__ = [
    "CopyDirection",
    "copy_line",
    "delete_selected_lines",
    "insert_line_above",
    "insert_line_below",
    "join_lines",
]
