"""Dataclasses describing editor commands and how they are orchestrated."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, Mapping

from shortcut_engine.actions.base import ActionRef
from shortcut_engine.dispatch import (
    LineGroupStrategy,
    PerSelectionStrategy,
    SelectionSetStrategy,
    SelectionStrategy,
    WholeSetHandler,
)

StrategyKind = Literal["per_selection", "line_group", "selection_set"]


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Binds a host command id to an action and its orchestration options.

    ``per_selection`` and ``line_group`` commands need ``action``;
    ``selection_set`` commands need ``handler``.
    """

    id: str
    name: str
    action: ActionRef | None = None
    handler: WholeSetHandler | None = None
    argument: Any = None
    repeat_same_line_actions: bool = True
    strategy: StrategyKind = "per_selection"
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("command id cannot be empty")
        if not self.name:
            raise ValueError(f"Command '{self.id}' needs a display name")
        if self.strategy == "selection_set":
            if self.handler is None:
                raise ValueError(f"Command '{self.id}' needs a whole-set handler")
        elif self.strategy in ("per_selection", "line_group"):
            if self.action is None:
                raise ValueError(f"Command '{self.id}' needs an action")
        else:
            raise ValueError(f"Unknown strategy '{self.strategy}'")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def label(self) -> str:
        return self.action.id if self.action is not None else self.id

    def build_strategy(self) -> SelectionStrategy:
        if self.strategy == "line_group":
            return LineGroupStrategy()
        if self.handler is not None and self.strategy == "selection_set":
            return SelectionSetStrategy(self.handler)
        return PerSelectionStrategy(repeat_same_line_actions=self.repeat_same_line_actions)


__all__ = ["CommandSpec", "StrategyKind"]
