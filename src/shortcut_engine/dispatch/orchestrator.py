"""Drive one action across every selection inside a single buffer batch."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from shortcut_engine.actions.base import ActionRef, EditResult, TextEdit
from shortcut_engine.buffer import BufferView, Position, Range
from shortcut_engine.runtime import telemetry

from .context import SelectionContext

WholeSetHandler = Callable[
    [BufferView, Sequence[Range], Any, Optional[SelectionContext]], List[Range]
]


class SelectionStrategy(Protocol):
    """Computes the new selection set for one invocation.

    Strategies apply their edits to ``view`` themselves; the caller has
    already opened the batch and normalises whatever ranges come back.
    """

    def run(
        self,
        view: BufferView,
        selections: Sequence[Range],
        action: Optional[ActionRef],
        argument: Any,
        context: SelectionContext,
    ) -> List[Range]:
        ...


def _apply_edit(view: BufferView, edit: TextEdit) -> None:
    view.replace_range(edit.text, edit.start, edit.end)


def _shift_lines(selection: Range, lines: int) -> Range:
    if not lines:
        return selection
    return Range(
        Position(selection.anchor.line + lines, selection.anchor.ch),
        Position(selection.head.line + lines, selection.head.ch),
    )


def _require_action(action: Optional[ActionRef]) -> ActionRef:
    if action is None:
        raise TypeError("This strategy needs a per-selection action")
    return action


def _swallowed(edit: TextEdit, selection: Range) -> bool:
    """True when both ends of ``selection`` lay inside the replaced span."""

    if edit.start == edit.end:
        return False
    return all(edit.start <= point < edit.end for point in (selection.anchor, selection.head))


class PerSelectionStrategy:
    """Apply the action to each selection top to bottom.

    After every edit the not-yet-visited selections, and the results produced
    so far, are remapped through the edit's delta. A pending selection the
    edit swallowed, or one that now coincides with a produced result, is
    merged away rather than acted on twice. With
    ``repeat_same_line_actions=False`` a selection whose (remapped) line was
    already targeted in this pass is skipped.
    """

    def __init__(self, *, repeat_same_line_actions: bool = True) -> None:
        self.repeat_same_line_actions = repeat_same_line_actions

    def run(
        self,
        view: BufferView,
        selections: Sequence[Range],
        action: Optional[ActionRef],
        argument: Any,
        context: SelectionContext,
    ) -> List[Range]:
        del context
        action = _require_action(action)
        pending: List[Optional[Range]] = list(selections)
        results: List[Range] = []
        targeted: set[int] = set()
        for index in range(len(pending)):
            selection = pending[index]
            if selection is None:
                continue
            line = selection.head.line
            if not self.repeat_same_line_actions:
                if line in targeted:
                    continue
                targeted.add(line)

            outcome = action.apply(view, selection, argument)
            if outcome.edit is None:
                results.extend(outcome.selections)
                continue

            _apply_edit(view, outcome.edit)
            delta = outcome.edit.delta()
            results = [delta.map_range(item) for item in results]
            results.extend(outcome.selections)
            for later in range(index + 1, len(pending)):
                item = pending[later]
                if item is None:
                    continue
                if _swallowed(outcome.edit, item):
                    pending[later] = None
                    continue
                mapped = delta.map_range(item)
                pending[later] = None if mapped in results else mapped
        return results


class LineGroupStrategy:
    """Edit each distinct line once, however many cursors sit on it.

    Selections are grouped by the line the action targets, the line of their
    lower end; the first selection of a group stands for it. All edits are
    computed against the untouched
    document, applied bottom-up, and each group's result is shifted by the
    line delta of the groups above. Only valid for actions whose edit stays
    at or after the start of the grouped line.
    """

    def run(
        self,
        view: BufferView,
        selections: Sequence[Range],
        action: Optional[ActionRef],
        argument: Any,
        context: SelectionContext,
    ) -> List[Range]:
        del context
        action = _require_action(action)
        groups: Dict[int, Range] = {}
        for selection in selections:
            groups.setdefault(selection.to.line, selection)

        outcomes: List[EditResult] = [
            action.apply(view, groups[line], argument) for line in sorted(groups)
        ]
        for outcome in reversed(outcomes):
            if outcome.edit is not None:
                _apply_edit(view, outcome.edit)

        results: List[Range] = []
        shift = 0
        for outcome in outcomes:
            for item in outcome.selections:
                results.append(_shift_lines(item, shift))
            if outcome.edit is not None:
                shift += outcome.edit.delta().lines
        return results


class SelectionSetStrategy:
    """Hand the whole selection set to a handler that returns the new set."""

    def __init__(self, handler: WholeSetHandler) -> None:
        self.handler = handler

    def run(
        self,
        view: BufferView,
        selections: Sequence[Range],
        action: Optional[ActionRef],
        argument: Any,
        context: SelectionContext,
    ) -> List[Range]:
        del action
        return self.handler(view, selections, argument, context)


def normalize_selections(ranges: Sequence[Range]) -> List[Range]:
    """Sort by lower end and merge overlapping or identical ranges.

    Ranges that merely touch stay separate, so a cursor sitting on the
    boundary of a selection survives.
    """

    merged: List[Range] = []
    for item in sorted(ranges, key=lambda value: (value.from_, value.to)):
        if merged:
            previous = merged[-1]
            if item.from_ == previous.from_ and item.to == previous.to:
                continue
            if item.from_ < previous.to:
                merged[-1] = previous.oriented(previous.from_, max(previous.to, item.to))
                continue
        merged.append(item)
    return merged


def with_multiple_selections(
    view: BufferView,
    action: Optional[ActionRef] = None,
    *,
    argument: Any = None,
    repeat_same_line_actions: bool = True,
    strategy: Optional[SelectionStrategy] = None,
    context: Optional[SelectionContext] = None,
    label: Optional[str] = None,
) -> List[Range]:
    """Run ``action`` over every selection of ``view`` as one batch.

    Returns the committed selection set.
    """

    if strategy is None:
        strategy = PerSelectionStrategy(repeat_same_line_actions=repeat_same_line_actions)
    context = context if context is not None else SelectionContext()
    name = label or (action.id if action is not None else type(strategy).__name__)

    with telemetry.span(
        f"dispatch::{name}",
        component="dispatch",
        metadata={"strategy": type(strategy).__name__},
    ) as handle:
        with view.batch(name):
            selections = normalize_selections(view.list_selections())
            handle.add_metadata("selections", len(selections))
            results = strategy.run(view, selections, action, argument, context)
            final = normalize_selections(results)
            if len(final) < len(results):
                telemetry.record_event(
                    "selection.merged",
                    level="debug",
                    data={"action": name, "before": len(results), "after": len(final)},
                )
            view.set_selections(final)
        handle.add_metadata("result_selections", len(final))
    return final


__all__ = [
    "LineGroupStrategy",
    "PerSelectionStrategy",
    "SelectionSetStrategy",
    "SelectionStrategy",
    "WholeSetHandler",
    "normalize_selections",
    "with_multiple_selections",
]
