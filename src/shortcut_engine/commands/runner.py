"""Entry point hosts call once per command invocation."""

from __future__ import annotations

from typing import List, Optional

from shortcut_engine.buffer import BufferView, Range
from shortcut_engine.dispatch import SelectionContext, with_multiple_selections
from shortcut_engine.runtime.telemetry import record_event

from .defaults import load_default_commands
from .registry import CommandRegistry

_default_registry: Optional[CommandRegistry] = None


def default_registry() -> CommandRegistry:
    """Process-wide registry seeded with the built-in commands."""

    global _default_registry
    if _default_registry is None:
        registry = CommandRegistry()
        load_default_commands(registry)
        _default_registry = registry
    return _default_registry


def run_command(
    command_id: str,
    view: BufferView,
    *,
    registry: Optional[CommandRegistry] = None,
    context: Optional[SelectionContext] = None,
) -> List[Range]:
    """Run one registered command over every selection of ``view``."""

    command = (registry or default_registry()).get(command_id)
    record_event(
        "command.run",
        level="debug",
        data={"command": command.id, "strategy": command.strategy},
    )
    return with_multiple_selections(
        view,
        command.action,
        argument=command.argument,
        strategy=command.build_strategy(),
        context=context,
        label=command.id,
    )


__all__ = ["default_registry", "run_command"]
