"""Per-selection navigation and line selection."""

from __future__ import annotations

import re
from typing import Literal

from shortcut_engine.buffer import BufferView, Position, Range

from .base import EditResult, last_line, line_end, spanned_lines

Boundary = Literal["start", "end"]
LineTarget = Literal["prev", "next", "first", "last", "top", "bottom"]
CharDirection = Literal["forward", "backward"]
HeadingDirection = Literal["next", "prev"]

_HEADING = re.compile(r"^#{1,6}(?: |$)")


def select_line(view: BufferView, selection: Range) -> EditResult:
    first, last = spanned_lines(selection)
    if last < last_line(view):
        end = Position(last + 1, 0)
    else:
        end = line_end(view, last)
    return EditResult.move(Range(Position(first, 0), end))


def go_to_line_boundary(
    view: BufferView, selection: Range, boundary: Boundary = "start"
) -> EditResult:
    line = selection.head.line
    if boundary == "start":
        return EditResult.move(Range.cursor(Position(line, 0)))
    if boundary == "end":
        return EditResult.move(Range.cursor(line_end(view, line)))
    raise ValueError(f"Unknown line boundary '{boundary}'")


def navigate_line(
    view: BufferView, selection: Range, target: LineTarget = "next"
) -> EditResult:
    line = selection.head.line
    if target == "prev":
        line = max(0, line - 1)
    elif target == "next":
        line = min(last_line(view), line + 1)
    elif target in ("first", "top"):
        line = 0
    elif target in ("last", "bottom"):
        line = last_line(view)
    else:
        raise ValueError(f"Unknown line target '{target}'")
    ch = min(selection.head.ch, len(view.get_line(line)))
    return EditResult.move(Range.cursor(Position(line, ch)))


def move_cursor(
    view: BufferView, selection: Range, direction: CharDirection = "forward"
) -> EditResult:
    head = selection.head
    if direction == "backward":
        if head.ch > 0:
            target = head.with_ch(head.ch - 1)
        elif head.line > 0:
            target = line_end(view, head.line - 1)
        else:
            target = head
    elif direction == "forward":
        if head.ch < len(view.get_line(head.line)):
            target = head.with_ch(head.ch + 1)
        elif head.line < last_line(view):
            target = Position(head.line + 1, 0)
        else:
            target = head
    else:
        raise ValueError(f"Unknown cursor direction '{direction}'")
    return EditResult.move(Range.cursor(target))


def go_to_heading(
    view: BufferView, selection: Range, direction: HeadingDirection = "next"
) -> EditResult:
    """Jump to the start of the next/previous markdown ATX heading."""

    line = selection.head.line
    if direction == "next":
        candidates = range(line + 1, view.line_count())
    elif direction == "prev":
        candidates = range(line - 1, -1, -1)
    else:
        raise ValueError(f"Unknown heading direction '{direction}'")
    for candidate in candidates:
        if _HEADING.match(view.get_line(candidate)):
            return EditResult.move(Range.cursor(Position(candidate, 0)))
    return EditResult.move(selection)


__all__ = [
    "Boundary",
    "CharDirection",
    "HeadingDirection",
    "LineTarget",
    "go_to_heading",
    "go_to_line_boundary",
    "move_cursor",
    "navigate_line",
    "select_line",
]
