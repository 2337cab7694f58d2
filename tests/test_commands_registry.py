from __future__ import annotations

from typing import Any, Dict, List

import pytest

from shortcut_engine.actions import ActionRef, EditResult
from shortcut_engine.buffer import Buffer, Position, Range
from shortcut_engine.commands import (
    DEFAULT_COMMANDS,
    CommandConflictError,
    CommandRegistry,
    CommandSpec,
    load_default_commands,
    run_command,
)
from shortcut_engine.commands import runner
from shortcut_engine.dispatch import LineGroupStrategy, PerSelectionStrategy, SelectionSetStrategy

EXPECTED_IDS = {
    "insertLineAbove",
    "insertLineBelow",
    "deleteLine",
    "deleteToStartOfLine",
    "deleteToEndOfLine",
    "joinLines",
    "duplicateLine",
    "copyLineUp",
    "copyLineDown",
    "selectWordOrNextOccurrence",
    "selectAllOccurrences",
    "selectLine",
    "addCursorsToSelectionEnds",
    "goToLineStart",
    "goToLineEnd",
    "goToNextLine",
    "goToPrevLine",
    "goToFirstLine",
    "goToLastLine",
    "goToNextChar",
    "goToPrevChar",
    "transformToUppercase",
    "transformToLowercase",
    "transformToTitlecase",
    "toggleCase",
    "expandSelectionToBrackets",
    "expandSelectionToQuotes",
    "expandSelectionToQuotesOrBrackets",
    "insertCursorAbove",
    "insertCursorBelow",
    "goToNextHeading",
    "goToPrevHeading",
}


def make_action(action_id: str = "test.noop") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda view, selection: EditResult.move(selection))


def make_command(command_id: str = "test.command", name: str = "Test") -> CommandSpec:
    return CommandSpec(id=command_id, name=name, action=make_action())


def test_default_catalogue_covers_every_command() -> None:
    registry = CommandRegistry()
    load_default_commands(registry)

    assert {command.id for command in registry.iter_commands()} == EXPECTED_IDS
    assert len(registry) == len(DEFAULT_COMMANDS)
    assert registry.stats().strategies == ("line_group", "per_selection", "selection_set")


def test_default_strategies_match_command_needs() -> None:
    registry = CommandRegistry()
    load_default_commands(registry)

    join = registry.get("joinLines")
    assert join.repeat_same_line_actions is False
    assert isinstance(join.build_strategy(), PerSelectionStrategy)
    assert not join.build_strategy().repeat_same_line_actions
    assert isinstance(registry.get("insertLineBelow").build_strategy(), LineGroupStrategy)
    assert isinstance(
        registry.get("selectAllOccurrences").build_strategy(), SelectionSetStrategy
    )
    assert registry.get("copyLineUp").argument == "up"


def test_load_default_commands_filters() -> None:
    registry = CommandRegistry()
    load_default_commands(
        registry,
        include=["joinLines", "selectLine", "deleteLine"],
        exclude=["deleteLine"],
        extra_commands=[make_command()],
    )

    assert sorted(command.id for command in registry.iter_commands()) == [
        "joinLines",
        "selectLine",
        "test.command",
    ]
    assert [command.id for command in registry.iter_commands("selection_set")] == []


def test_duplicate_registration_conflicts() -> None:
    registry = CommandRegistry()
    registry.register(make_command())

    with pytest.raises(CommandConflictError) as excinfo:
        registry.register(make_command(name="Other"))

    assert excinfo.value.existing.name == "Test"
    replaced = registry.register(make_command(name="Other"), replace=True)
    assert registry.get("test.command") is replaced


def test_unknown_command_raises_readable_key_error() -> None:
    registry = CommandRegistry()

    with pytest.raises(KeyError, match="missing.command"):
        registry.get("missing.command")
    with pytest.raises(KeyError):
        run_command("missing.command", Buffer.from_text("x"), registry=registry)


def test_update_and_unregister_bump_revision() -> None:
    registry = CommandRegistry()
    registry.register(make_command())
    start = registry.revision()

    updated = registry.update("test.command", name="Renamed")
    removed = registry.unregister("test.command")

    assert updated.name == "Renamed"
    assert removed is updated
    assert registry.unregister("test.command") is None
    assert registry.revision() == start + 2
    with pytest.raises(KeyError):
        registry.update("test.command", name="Again")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"id": "", "name": "Empty"},
        {"id": "x", "name": ""},
        {"id": "x", "name": "No action"},
        {"id": "x", "name": "No handler", "strategy": "selection_set"},
        {"id": "x", "name": "Bad", "action": make_action(), "strategy": "diagonal"},
    ],
)
def test_invalid_command_specs(kwargs: Dict[str, Any]) -> None:
    with pytest.raises(ValueError):
        CommandSpec(**kwargs)


def test_run_command_uses_registry_and_records_event(monkeypatch: pytest.MonkeyPatch) -> None:
    events: List[str] = []
    monkeypatch.setattr(runner, "record_event", lambda name, **kwargs: events.append(name))
    registry = CommandRegistry()
    seen: List[str] = []

    def handler(view: Any, selection: Range, argument: str) -> EditResult:
        seen.append(argument)
        return EditResult.move(selection)

    registry.register(
        CommandSpec(
            id="test.echo",
            name="Echo",
            action=ActionRef(id="test.echo", handler=handler),
            argument="payload",
        )
    )
    buffer = Buffer.from_text("ab", selections=[Range.cursor(Position(0, 1))])

    result = run_command("test.echo", buffer, registry=registry)

    assert result == [Range.cursor(Position(0, 1))]
    assert seen == ["payload"]
    assert events == ["command.run"]
    assert buffer.history.latest().label == "test.echo"


def test_default_registry_is_shared() -> None:
    assert runner.default_registry() is runner.default_registry()
    assert "joinLines" in runner.default_registry()


def test_selection_set_command_builds_strategy_around_its_handler() -> None:
    def handler(view: Any, selections: Any, argument: Any, context: Any) -> List[Range]:
        return list(selections)

    command = CommandSpec(id="test.whole", name="Whole", handler=handler, strategy="selection_set")

    strategy = command.build_strategy()

    assert isinstance(strategy, SelectionSetStrategy)
    assert strategy.handler is handler
    assert command.label == "test.whole"
