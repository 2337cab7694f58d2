"""Line storage backing the reference buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .state import Position


@dataclass(frozen=True, slots=True)
class BufferDocument:
    """Immutable list-of-lines text model.

    Lines never store their newline; the document text is the lines joined by
    ``"\\n"``. An empty document still owns one empty line so that
    ``Position(0, 0)`` is always valid.
    """

    lines: Tuple[str, ...] = field(default_factory=lambda: ("",))
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(lines=tuple(text.split("\n")))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def get_line(self, index: int) -> str:
        return self.lines[index]

    def offset_of(self, position: Position) -> int:
        offset = sum(len(line) + 1 for line in self.lines[: position.line])
        return offset + position.ch

    def position_at(self, offset: int) -> Position:
        offset = max(0, offset)
        running = 0
        for row, line in enumerate(self.lines):
            if offset <= running + len(line):
                return Position(row, offset - running)
            running += len(line) + 1
        last = len(self.lines) - 1
        return Position(last, len(self.lines[last]))

    def splice(self, start: Position, end: Position, text: str) -> "BufferDocument":
        """Return a new document with ``[start, end)`` replaced by ``text``."""

        head = self.lines[start.line][: start.ch]
        tail = self.lines[end.line][end.ch :]
        middle = tuple((head + text + tail).split("\n"))
        lines = self.lines[: start.line] + middle + self.lines[end.line + 1 :]
        return BufferDocument(lines=lines, version=self.version + 1)


__all__ = ["BufferDocument"]
