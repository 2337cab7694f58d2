"""Whole-set handlers that select the word or text occurrences under cursors."""

from __future__ import annotations

import re
from typing import Any, Iterable, Iterator, List, Optional, Sequence

from shortcut_engine.buffer import BufferView, Range
from shortcut_engine.dispatch.context import SelectionContext

from .base import word_range_at


def _pattern(text: str, *, whole_word: bool) -> re.Pattern[str]:
    escaped = re.escape(text)
    if whole_word:
        return re.compile(rf"(?<!\w){escaped}(?!\w)")
    return re.compile(escaped)


def _to_range(view: BufferView, start: int, end: int) -> Range:
    return Range(view.offset_to_pos(start), view.offset_to_pos(end))


def iter_occurrences(
    view: BufferView, text: str, *, whole_word: bool = False
) -> Iterator[Range]:
    """Non-overlapping occurrences of ``text`` in document order."""

    if not text:
        return
    for match in _pattern(text, whole_word=whole_word).finditer(view.get_value()):
        yield _to_range(view, match.start(), match.end())


def find_next_occurrence(
    view: BufferView,
    text: str,
    after: Range,
    *,
    whole_word: bool = False,
    skip: Iterable[Range] = (),
) -> Optional[Range]:
    """First occurrence starting at or after ``after.to``, wrapping around."""

    if not text:
        return None
    document = view.get_value()
    start_offset = view.pos_to_offset(after.to)
    taken = {(view.pos_to_offset(item.from_), view.pos_to_offset(item.to)) for item in skip}
    matches = [
        (match.start(), match.end())
        for match in _pattern(text, whole_word=whole_word).finditer(document)
    ]
    ordered = [m for m in matches if m[0] >= start_offset] + [
        m for m in matches if m[0] < start_offset
    ]
    for span in ordered:
        if span not in taken:
            return _to_range(view, *span)
    return None


def _texts(view: BufferView, selections: Sequence[Range]) -> List[str]:
    return [view.get_range(item.from_, item.to) for item in selections]


def select_word_or_next_occurrence(
    view: BufferView,
    selections: Sequence[Range],
    argument: Any = None,
    context: Optional[SelectionContext] = None,
) -> List[Range]:
    """Expand cursors to words, or add the next occurrence of the selection.

    Occurrences must be whole words unless the user made the selection by
    hand, in which case matches inside longer words count too.
    """

    del argument
    context = context if context is not None else SelectionContext()
    manual = context.is_manual_selection
    context.mark_programmatic()

    texts = _texts(view, selections)
    search = texts[-1]
    if search and all(text == search for text in texts):
        anchor = selections[-1]
        if not manual and context.last_occurrence in selections:
            anchor = context.last_occurrence  # type: ignore[assignment]
        match = find_next_occurrence(
            view, search, anchor, whole_word=not manual, skip=selections
        )
        if match is None:
            return list(selections)
        context.record_occurrence(match)
        return [*selections, match]

    if all(text == search for text in texts):
        kept, targets = [], list(selections)
    else:
        kept, targets = list(selections[:-1]), list(selections[-1:])
    expanded = [word_range_at(view, item.head) or item for item in targets]
    context.clear_manual()
    return kept + expanded


def select_all_occurrences(
    view: BufferView,
    selections: Sequence[Range],
    argument: Any = None,
    context: Optional[SelectionContext] = None,
) -> List[Range]:
    del argument
    if context is not None:
        context.mark_programmatic()
    last = selections[-1]
    if last.empty:
        word = word_range_at(view, last.head)
        if word is None:
            return list(selections)
        last = word
    found = list(iter_occurrences(view, view.get_range(last.from_, last.to)))
    return found or list(selections)


__all__ = [
    "find_next_occurrence",
    "iter_occurrences",
    "select_all_occurrences",
    "select_word_or_next_occurrence",
]
