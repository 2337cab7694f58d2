"""Markdown list-item recognition used for list continuation and joins."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, Optional

InsertDirection = Literal["above", "below"]

_LIST_ITEM = re.compile(
    r"^(?P<indent>\s*)"
    r"(?:(?P<bullet>[-*+])(?: \[(?P<check>[ xX])\])?|(?P<number>\d+)\.|(?P<quote>>))"
    r"(?= |$)"
)

# Markers removed from the joined line; ordered numbers and anything else stay.
JOIN_MARKER = re.compile(r"^(?:[-*+](?: \[[ xX]\])?|>)(?: +|$)")


@dataclass(frozen=True, slots=True)
class ListContext:
    indent: str
    marker: str
    checked: Optional[bool] = None
    number: Optional[int] = None
    body: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.body.strip()

    @property
    def is_ordered(self) -> bool:
        return self.number is not None

    def continuation(self, direction: InsertDirection) -> str:
        """Prefix (without indentation) for a new sibling item.

        Checkboxes always restart unchecked. Ordered items reuse the current
        number above and take the next number below; later items keep their
        numbers.
        """

        if self.number is not None:
            number = self.number if direction == "above" else self.number + 1
            return f"{number}. "
        if self.checked is not None:
            return f"{self.marker} [ ] "
        return f"{self.marker} "


def match_list_item(text: str) -> Optional[ListContext]:
    match = _LIST_ITEM.match(text)
    if match is None:
        return None
    check = match.group("check")
    number = match.group("number")
    return ListContext(
        indent=match.group("indent"),
        marker=match.group("bullet") or match.group("quote") or f"{number}.",
        checked=None if check is None else check != " ",
        number=int(number) if number is not None else None,
        body=text[match.end() :].lstrip(" "),
    )


def strip_join_marker(text: str) -> str:
    return JOIN_MARKER.sub("", text, count=1)


__all__ = [
    "InsertDirection",
    "JOIN_MARKER",
    "ListContext",
    "match_list_item",
    "strip_join_marker",
]
