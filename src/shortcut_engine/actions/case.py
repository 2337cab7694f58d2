"""Case transforms for a selection or the word under the cursor."""

from __future__ import annotations

import re
from typing import Literal

from shortcut_engine.buffer import BufferView, Range

from .base import EditResult, TextEdit, word_range_at

Case = Literal["upper", "lower", "title", "next"]

_TOKEN = re.compile(r"\S+")


def to_title_case(text: str) -> str:
    return _TOKEN.sub(lambda match: match[0][:1].upper() + match[0][1:].lower(), text)


def classify_case(text: str) -> str:
    """Return ``"upper"``, ``"lower"``, ``"title"`` or ``"other"``."""

    upper, lower = text.upper(), text.lower()
    if text == upper and text != lower:
        return "upper"
    if text == lower and text != upper:
        return "lower"
    if text == to_title_case(text) and text != lower:
        return "title"
    return "other"


# UPPER -> lower -> Title -> UPPER; unrecognised text enters at UPPER.
_NEXT_CASE = {"upper": "lower", "lower": "title", "title": "upper", "other": "upper"}


def apply_case(text: str, case: Case) -> str:
    if case == "next":
        case = _NEXT_CASE[classify_case(text)]  # type: ignore[assignment]
    if case == "upper":
        return text.upper()
    if case == "lower":
        return text.lower()
    if case == "title":
        return to_title_case(text)
    raise ValueError(f"Unknown case '{case}'")


def transform_case(view: BufferView, selection: Range, case: Case = "upper") -> EditResult:
    if case not in ("upper", "lower", "title", "next"):
        raise ValueError(f"Unknown case '{case}'")
    target = selection
    if selection.empty:
        word = word_range_at(view, selection.head)
        if word is None:
            return EditResult.move(selection)
        target = word

    start, end = target.from_, target.to
    original = view.get_range(start, end)
    replacement = apply_case(original, case)
    if replacement == original:
        return EditResult.move(selection)

    edit = TextEdit(start, end, replacement)
    new_end = edit.delta().new_end
    if selection.empty:
        return EditResult.change(edit, Range.cursor(min(selection.head, new_end)))
    return EditResult.change(edit, selection.oriented(start, new_end))


__all__ = ["Case", "apply_case", "classify_case", "to_title_case", "transform_case"]
