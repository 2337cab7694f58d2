"""Built-in command catalogue exposed to hosts."""

from __future__ import annotations

from typing import Iterable, Sequence

from shortcut_engine.actions import case as case_actions
from shortcut_engine.actions import characters as char_actions
from shortcut_engine.actions import cursors as cursor_actions
from shortcut_engine.actions import delimiters as delimiter_actions
from shortcut_engine.actions import lines as line_actions
from shortcut_engine.actions import occurrences as occurrence_actions
from shortcut_engine.actions import selection as selection_actions
from shortcut_engine.actions.base import ActionRef

from .models import CommandSpec
from .registry import CommandRegistry

DEFAULT_ACTIONS: dict[str, ActionRef] = {
    action.id: action
    for action in (
        ActionRef(
            id="lines.insert_above",
            handler=line_actions.insert_line_above,
            description="Insert a line above, continuing lists",
        ),
        ActionRef(
            id="lines.insert_below",
            handler=line_actions.insert_line_below,
            description="Insert a line below, continuing lists",
        ),
        ActionRef(
            id="lines.delete",
            handler=line_actions.delete_selected_lines,
            description="Delete every spanned line",
        ),
        ActionRef(
            id="lines.join",
            handler=line_actions.join_lines,
            description="Join the next line onto this one",
        ),
        ActionRef(
            id="lines.copy",
            handler=line_actions.copy_line,
            description="Copy the spanned lines up or down",
        ),
        ActionRef(
            id="chars.delete_to_start",
            handler=char_actions.delete_to_start_of_line,
            description="Delete to start of line",
        ),
        ActionRef(
            id="chars.delete_to_end",
            handler=char_actions.delete_to_end_of_line,
            description="Delete to end of line",
        ),
        ActionRef(
            id="selection.select_line",
            handler=selection_actions.select_line,
            description="Select whole lines",
        ),
        ActionRef(
            id="selection.line_boundary",
            handler=selection_actions.go_to_line_boundary,
            description="Move to a line boundary",
        ),
        ActionRef(
            id="selection.navigate_line",
            handler=selection_actions.navigate_line,
            description="Move to another line",
        ),
        ActionRef(
            id="selection.move_cursor",
            handler=selection_actions.move_cursor,
            description="Move one character",
        ),
        ActionRef(
            id="selection.heading",
            handler=selection_actions.go_to_heading,
            description="Move to a markdown heading",
        ),
        ActionRef(
            id="case.transform",
            handler=case_actions.transform_case,
            description="Change letter case",
        ),
        ActionRef(
            id="delimiters.brackets",
            handler=delimiter_actions.expand_selection_to_brackets,
            description="Select inside the enclosing brackets",
        ),
        ActionRef(
            id="delimiters.quotes",
            handler=delimiter_actions.expand_selection_to_quotes,
            description="Select inside the enclosing quotes",
        ),
        ActionRef(
            id="delimiters.quotes_or_brackets",
            handler=delimiter_actions.expand_selection_to_quotes_or_brackets,
            description="Select inside the innermost quotes or brackets",
        ),
        ActionRef(
            id="cursors.selection_ends",
            handler=cursor_actions.add_cursors_to_selection_ends,
            description="Add cursors at selection ends",
        ),
        ActionRef(
            id="cursors.insert_above",
            handler=cursor_actions.insert_cursor_above,
            description="Add a cursor on the line above",
        ),
        ActionRef(
            id="cursors.insert_below",
            handler=cursor_actions.insert_cursor_below,
            description="Add a cursor on the line below",
        ),
    )
}


def _command(command_id: str, name: str, action_id: str, **options: object) -> CommandSpec:
    return CommandSpec(id=command_id, name=name, action=DEFAULT_ACTIONS[action_id], **options)


DEFAULT_COMMANDS: tuple[CommandSpec, ...] = (
    _command("insertLineAbove", "Insert line above", "lines.insert_above"),
    _command(
        "insertLineBelow",
        "Insert line below",
        "lines.insert_below",
        strategy="line_group",
    ),
    _command("deleteLine", "Delete line", "lines.delete"),
    _command("deleteToStartOfLine", "Delete to start of line", "chars.delete_to_start"),
    _command("deleteToEndOfLine", "Delete to end of line", "chars.delete_to_end"),
    _command("joinLines", "Join lines", "lines.join", repeat_same_line_actions=False),
    _command("duplicateLine", "Duplicate line", "lines.copy", argument="down"),
    _command("copyLineUp", "Copy line up", "lines.copy", argument="up"),
    _command("copyLineDown", "Copy line down", "lines.copy", argument="down"),
    CommandSpec(
        id="selectWordOrNextOccurrence",
        name="Select word or next occurrence",
        handler=occurrence_actions.select_word_or_next_occurrence,
        strategy="selection_set",
    ),
    CommandSpec(
        id="selectAllOccurrences",
        name="Select all occurrences",
        handler=occurrence_actions.select_all_occurrences,
        strategy="selection_set",
    ),
    _command("selectLine", "Select line", "selection.select_line"),
    _command(
        "addCursorsToSelectionEnds",
        "Add cursors to selection ends",
        "cursors.selection_ends",
    ),
    _command("goToLineStart", "Go to start of line", "selection.line_boundary", argument="start"),
    _command("goToLineEnd", "Go to end of line", "selection.line_boundary", argument="end"),
    _command("goToNextLine", "Go to next line", "selection.navigate_line", argument="next"),
    _command("goToPrevLine", "Go to previous line", "selection.navigate_line", argument="prev"),
    _command("goToFirstLine", "Go to first line", "selection.navigate_line", argument="first"),
    _command("goToLastLine", "Go to last line", "selection.navigate_line", argument="last"),
    _command("goToNextChar", "Move cursor forward", "selection.move_cursor", argument="forward"),
    _command("goToPrevChar", "Move cursor backward", "selection.move_cursor", argument="backward"),
    _command("transformToUppercase", "Transform selection to uppercase", "case.transform", argument="upper"),
    _command("transformToLowercase", "Transform selection to lowercase", "case.transform", argument="lower"),
    _command("transformToTitlecase", "Transform selection to title case", "case.transform", argument="title"),
    _command("toggleCase", "Toggle case of selection", "case.transform", argument="next"),
    _command("expandSelectionToBrackets", "Expand selection to brackets", "delimiters.brackets"),
    _command("expandSelectionToQuotes", "Expand selection to quotes", "delimiters.quotes"),
    _command(
        "expandSelectionToQuotesOrBrackets",
        "Expand selection to quotes or brackets",
        "delimiters.quotes_or_brackets",
    ),
    _command("insertCursorAbove", "Insert cursor above", "cursors.insert_above"),
    _command("insertCursorBelow", "Insert cursor below", "cursors.insert_below"),
    _command("goToNextHeading", "Go to next heading", "selection.heading", argument="next"),
    _command("goToPrevHeading", "Go to previous heading", "selection.heading", argument="prev"),
)


def load_default_commands(
    registry: CommandRegistry,
    *,
    replace: bool = False,
    extra_commands: Iterable[CommandSpec] | None = None,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
) -> None:
    """Register the built-in commands, optionally filtered by id."""

    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    for command in DEFAULT_COMMANDS:
        if include_set is not None and command.id not in include_set:
            continue
        if command.id in exclude_set:
            continue
        registry.register(command, replace=replace)

    if extra_commands:
        for command in extra_commands:
            registry.register(command, replace=replace)


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_COMMANDS", "load_default_commands"]
