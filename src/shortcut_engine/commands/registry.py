"""Command registry mapping host command ids to command specs."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterator, Optional

from shortcut_engine.runtime.telemetry import span

from .models import CommandSpec


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    command_count: int
    strategies: tuple[str, ...]


class CommandConflictError(RuntimeError):
    """Raised when a command id is registered twice."""

    def __init__(self, command: CommandSpec, existing: CommandSpec):
        super().__init__(
            f"Command '{command.id}' is already registered as '{existing.name}'"
        )
        self.command = command
        self.existing = existing


class CommandRegistry:
    """Owns the command specs a host can invoke."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, CommandSpec] = {}
        self._logger_name = logger_name
        self._revision = 0

    def __contains__(self, command_id: object) -> bool:
        return command_id in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def revision(self) -> int:
        return self._revision

    def get(self, command_id: str) -> CommandSpec:
        try:
            return self._commands[command_id]
        except KeyError as exc:
            raise KeyError(f"Command '{command_id}' is not registered") from exc

    def register(self, command: CommandSpec, *, replace: bool = False) -> CommandSpec:
        with span(
            "commands::register",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command.id},
        ) as handle:
            existing = self._commands.get(command.id)
            if existing is not None and not replace:
                handle.add_metadata("conflict", existing.name)
                raise CommandConflictError(command, existing)
            self._commands[command.id] = command
            self._touch()
            return command

    def unregister(self, command_id: str) -> Optional[CommandSpec]:
        with span(
            "commands::unregister",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command_id},
        ):
            command = self._commands.pop(command_id, None)
            if command is not None:
                self._touch()
            return command

    def update(self, command_id: str, **changes: object) -> CommandSpec:
        with span(
            "commands::update",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command_id},
        ) as handle:
            if command_id not in self._commands:
                handle.fail("missing_command")
                raise KeyError(f"Command '{command_id}' not found")
            if changes.get("id", command_id) != command_id:
                raise ValueError("Command ids cannot be changed in place")
            updated = replace(self._commands[command_id], **changes)
            self._commands[command_id] = updated
            self._touch()
            return updated

    def iter_commands(self, strategy: Optional[str] = None) -> Iterator[CommandSpec]:
        for command in self._commands.values():
            if strategy is None or command.strategy == strategy:
                yield command

    def stats(self) -> RegistryStats:
        return RegistryStats(
            command_count=len(self._commands),
            strategies=tuple(sorted({command.strategy for command in self._commands.values()})),
        )

    def _touch(self) -> None:
        self._revision += 1


__all__ = ["CommandConflictError", "CommandRegistry", "RegistryStats"]
