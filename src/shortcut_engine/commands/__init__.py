"""Command catalogue: ids, registry, defaults and the host entry point."""

from .models import CommandSpec, StrategyKind
from .registry import CommandConflictError, CommandRegistry, RegistryStats
from .defaults import DEFAULT_ACTIONS, DEFAULT_COMMANDS, load_default_commands
from .runner import default_registry, run_command

__all__ = [
    "CommandSpec",
    "StrategyKind",
    "CommandRegistry",
    "CommandConflictError",
    "RegistryStats",
    "DEFAULT_ACTIONS",
    "DEFAULT_COMMANDS",
    "load_default_commands",
    "default_registry",
    "run_command",
]
