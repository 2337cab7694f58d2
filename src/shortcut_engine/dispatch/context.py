"""Selection-change bookkeeping threaded through command dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from shortcut_engine.buffer import Range

MODIFIER_KEYS = frozenset({"Alt", "AltGraph", "CapsLock", "Control", "Fn", "Meta", "Shift"})


@dataclass(slots=True)
class SelectionContext:
    """Tracks who changed the selection last.

    Hosts call :meth:`note_selection_change` from their keydown/click hooks;
    engine commands that set selections themselves call
    :meth:`mark_programmatic` first so the resulting host notification is not
    mistaken for a user edit.
    """

    is_manual_selection: bool = False
    is_programmatic_change: bool = False
    last_occurrence: Optional[Range] = None

    def note_selection_change(self, key: Optional[str] = None) -> None:
        if key is not None and key in MODIFIER_KEYS:
            return
        if not self.is_programmatic_change:
            self.is_manual_selection = True
            self.last_occurrence = None
        self.is_programmatic_change = False

    def mark_programmatic(self) -> None:
        self.is_programmatic_change = True

    def record_occurrence(self, selection: Range) -> None:
        self.last_occurrence = selection

    def clear_manual(self) -> None:
        self.is_manual_selection = False
        self.last_occurrence = None


__all__ = ["MODIFIER_KEYS", "SelectionContext"]
