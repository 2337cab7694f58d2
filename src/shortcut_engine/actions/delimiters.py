"""Expand a selection to the innermost enclosing bracket or quote pair.

Brackets are matched over the whole document with one balance counter per
bracket type: scanning left, a closer raises its type's depth and an opener
either lowers it or, at depth zero, is the enclosing opener; scanning right
mirrors that. The pair only counts when both ends are of the same type, so
``(lorem]`` never matches.

Quotes are matched on the selection's line only. A quote kind encloses the
cursor when an odd number of that kind precedes it and one follows it, which
rules out nested quotes of the same kind.
"""

from __future__ import annotations

from typing import Optional, Tuple

from shortcut_engine.buffer import BufferView, Range

from .base import EditResult

BRACKETS = {"(": ")", "[": "]", "{": "}"}
QUOTES = ("'", '"', "`")

_OPENER_OF = {closer: opener for opener, closer in BRACKETS.items()}

Span = Tuple[int, int]


def _scan_left(text: str, offset: int) -> Optional[Tuple[int, str]]:
    depth = dict.fromkeys(BRACKETS, 0)
    for index in range(offset - 1, -1, -1):
        char = text[index]
        if char in _OPENER_OF:
            depth[_OPENER_OF[char]] += 1
        elif char in BRACKETS:
            if depth[char] == 0:
                return index, char
            depth[char] -= 1
    return None


def _scan_right(text: str, offset: int) -> Optional[Tuple[int, str]]:
    depth = dict.fromkeys(BRACKETS, 0)
    for index in range(offset, len(text)):
        char = text[index]
        if char in BRACKETS:
            depth[char] += 1
        elif char in _OPENER_OF:
            opener = _OPENER_OF[char]
            if depth[opener] == 0:
                return index, opener
            depth[opener] -= 1
    return None


def bracket_span(view: BufferView, selection: Range) -> Optional[Span]:
    """Document offsets of the enclosing bracket pair, or ``None``."""

    text = view.get_value()
    left = _scan_left(text, view.pos_to_offset(selection.from_))
    if left is None:
        return None
    right = _scan_right(text, view.pos_to_offset(selection.to))
    if right is None or right[1] != left[1]:
        return None
    return left[0], right[0]


def quote_span(view: BufferView, selection: Range) -> Optional[Span]:
    """Document offsets of the innermost enclosing quote pair, or ``None``."""

    start, end = selection.from_, selection.to
    if start.line != end.line:
        return None
    text = view.get_line(start.line)
    best: Optional[Span] = None
    for quote in QUOTES:
        if text.count(quote, 0, start.ch) % 2 == 0:
            continue
        close_at = text.find(quote, end.ch)
        if close_at < 0:
            continue
        open_at = text.rfind(quote, 0, start.ch)
        if best is None or open_at > best[0]:
            best = (open_at, close_at)
    if best is None:
        return None
    line_offset = view.pos_to_offset(start.with_ch(0))
    return line_offset + best[0], line_offset + best[1]


def _select_inside(view: BufferView, selection: Range, span: Optional[Span]) -> EditResult:
    if span is None:
        return EditResult.move(selection)
    open_at, close_at = span
    return EditResult.move(
        Range(view.offset_to_pos(open_at + 1), view.offset_to_pos(close_at))
    )


def expand_selection_to_brackets(view: BufferView, selection: Range) -> EditResult:
    return _select_inside(view, selection, bracket_span(view, selection))


def expand_selection_to_quotes(view: BufferView, selection: Range) -> EditResult:
    return _select_inside(view, selection, quote_span(view, selection))


def expand_selection_to_quotes_or_brackets(
    view: BufferView, selection: Range
) -> EditResult:
    candidates = [
        span
        for span in (bracket_span(view, selection), quote_span(view, selection))
        if span is not None
    ]
    if not candidates:
        return EditResult.move(selection)
    innermost = max(candidates, key=lambda span: (span[0], -span[1]))
    return _select_inside(view, selection, innermost)


__all__ = [
    "BRACKETS",
    "QUOTES",
    "bracket_span",
    "expand_selection_to_brackets",
    "expand_selection_to_quotes",
    "expand_selection_to_quotes_or_brackets",
    "quote_span",
]
