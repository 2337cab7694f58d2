"""Positions and selection ranges shared by every engine layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based ``(line, ch)`` location; ordering follows document order."""

    line: int
    ch: int

    def with_ch(self, ch: int) -> "Position":
        return Position(self.line, ch)


@dataclass(frozen=True, slots=True)
class Range:
    """Selection between ``anchor`` and the active end ``head``."""

    anchor: Position
    head: Position

    @classmethod
    def cursor(cls, position: Position) -> "Range":
        return cls(position, position)

    @classmethod
    def between(cls, line: int, ch: int, head_line: int, head_ch: int) -> "Range":
        return cls(Position(line, ch), Position(head_line, head_ch))

    @property
    def from_(self) -> Position:
        return min(self.anchor, self.head)

    @property
    def to(self) -> Position:
        return max(self.anchor, self.head)

    @property
    def empty(self) -> bool:
        return self.anchor == self.head

    @property
    def reversed(self) -> bool:
        return self.head < self.anchor

    def oriented(self, start: Position, end: Position) -> "Range":
        """Return ``start..end`` keeping this range's direction."""

        if self.reversed:
            return Range(end, start)
        return Range(start, end)


__all__ = ["Position", "Range"]
