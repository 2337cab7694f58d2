"""Edit/result types and the capability wrapper every action is exposed as."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Tuple

from shortcut_engine.buffer import BufferView, Position, Range

_WORD_CHAR = re.compile(r"\w")


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace ``[start, end)`` with ``text``."""

    start: Position
    end: Position
    text: str = ""

    @classmethod
    def insert(cls, at: Position, text: str) -> "TextEdit":
        return cls(at, at, text)

    @classmethod
    def delete(cls, start: Position, end: Position) -> "TextEdit":
        return cls(start, end, "")

    def delta(self) -> "EditDelta":
        pieces = self.text.split("\n")
        removed_lines = self.end.line - self.start.line
        if len(pieces) == 1:
            new_end = Position(self.start.line, self.start.ch + len(pieces[0]))
        else:
            new_end = Position(self.start.line + len(pieces) - 1, len(pieces[-1]))
        return EditDelta(
            start=self.start,
            end=self.end,
            new_end=new_end,
            lines=len(pieces) - 1 - removed_lines,
        )


@dataclass(frozen=True, slots=True)
class EditDelta:
    """Net effect of one applied edit, used to remap unvisited positions.

    ``lines`` is the line-count delta; ``column_shift`` applies to positions
    on the line where the replaced span ended.
    """

    start: Position
    end: Position
    new_end: Position
    lines: int

    @property
    def column_shift(self) -> int:
        return self.new_end.ch - self.end.ch

    def map_position(self, position: Position) -> Position:
        if position < self.start:
            return position
        if position < self.end:
            return self.start
        if position.line == self.end.line:
            return Position(self.new_end.line, position.ch + self.column_shift)
        return Position(position.line + self.lines, position.ch)

    def map_range(self, selection: Range) -> Range:
        return Range(self.map_position(selection.anchor), self.map_position(selection.head))


@dataclass(frozen=True, slots=True)
class EditResult:
    """Outcome of one action on one selection.

    ``selections`` are expressed in coordinates *after* ``edit`` is applied.
    """

    selections: Tuple[Range, ...]
    edit: Optional[TextEdit] = None

    @classmethod
    def move(cls, *selections: Range) -> "EditResult":
        return cls(selections=tuple(selections))

    @classmethod
    def change(cls, edit: TextEdit, *selections: Range) -> "EditResult":
        return cls(selections=tuple(selections), edit=edit)


ActionHandler = Callable[..., EditResult]


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named per-selection action: ``apply(view, selection, argument)``."""

    id: str
    handler: ActionHandler
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def apply(
        self, view: BufferView, selection: Range, argument: Any = None
    ) -> EditResult:
        if argument is None:
            return self.handler(view, selection)
        return self.handler(view, selection, argument)


# -- shared text helpers -------------------------------------------------


def line_end(view: BufferView, line: int) -> Position:
    return Position(line, len(view.get_line(line)))


def last_line(view: BufferView) -> int:
    return view.line_count() - 1


def leading_whitespace(text: str) -> str:
    return text[: len(text) - len(text.lstrip())]


def spanned_lines(selection: Range) -> Tuple[int, int]:
    """First and last line a selection covers.

    A non-empty selection ending at column 0 does not cover that last line.
    """

    start, end = selection.from_, selection.to
    if not selection.empty and end.ch == 0 and end.line > start.line:
        return start.line, end.line - 1
    return start.line, end.line


def word_range_at(view: BufferView, position: Position) -> Optional[Range]:
    """Maximal run of word characters touching ``position`` on its line."""

    text = view.get_line(position.line)
    start = end = position.ch
    while start > 0 and _WORD_CHAR.match(text[start - 1]):
        start -= 1
    while end < len(text) and _WORD_CHAR.match(text[end]):
        end += 1
    if start == end:
        return None
    return Range(Position(position.line, start), Position(position.line, end))


__all__ = [
    "ActionHandler",
    "ActionRef",
    "EditDelta",
    "EditResult",
    "TextEdit",
    "last_line",
    "leading_whitespace",
    "line_end",
    "spanned_lines",
    "word_range_at",
]
