"""Per-selection editing actions and the whole-set occurrence handlers."""

from .base import ActionRef, EditDelta, EditResult, TextEdit
from .lines import (
    copy_line,
    delete_selected_lines,
    insert_line_above,
    insert_line_below,
    join_lines,
)
from .characters import delete_to_end_of_line, delete_to_start_of_line
from .selection import (
    go_to_heading,
    go_to_line_boundary,
    move_cursor,
    navigate_line,
    select_line,
)
from .delimiters import (
    expand_selection_to_brackets,
    expand_selection_to_quotes,
    expand_selection_to_quotes_or_brackets,
)
from .case import transform_case
from .cursors import add_cursors_to_selection_ends, insert_cursor_above, insert_cursor_below
from .occurrences import select_all_occurrences, select_word_or_next_occurrence

__all__ = [
    "ActionRef",
    "EditDelta",
    "EditResult",
    "TextEdit",
    "insert_line_above",
    "insert_line_below",
    "delete_selected_lines",
    "join_lines",
    "copy_line",
    "delete_to_start_of_line",
    "delete_to_end_of_line",
    "select_line",
    "go_to_line_boundary",
    "navigate_line",
    "move_cursor",
    "go_to_heading",
    "expand_selection_to_brackets",
    "expand_selection_to_quotes",
    "expand_selection_to_quotes_or_brackets",
    "transform_case",
    "add_cursors_to_selection_ends",
    "insert_cursor_above",
    "insert_cursor_below",
    "select_word_or_next_occurrence",
    "select_all_occurrences",
]
