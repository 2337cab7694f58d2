"""Linear history of committed batches for the reference buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .state import Range


@dataclass(frozen=True, slots=True)
class UndoEntry:
    label: str
    before_text: str
    selections_before: Tuple[Range, ...]


class UndoTimeline:
    """One entry per committed batch; undo pops the latest."""

    def __init__(self) -> None:
        self._entries: List[UndoEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, entry: UndoEntry) -> None:
        self._entries.append(entry)

    def latest(self) -> Optional[UndoEntry]:
        if not self._entries:
            return None
        return self._entries[-1]

    def undo(self) -> Optional[UndoEntry]:
        if not self._entries:
            return None
        return self._entries.pop()
