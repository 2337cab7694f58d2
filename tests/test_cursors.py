import pytest

from shortcut_engine.actions.cursors import add_cursors_to_selection_ends
from shortcut_engine.buffer import Buffer, Position, Range
from shortcut_engine.commands import run_command

SAMPLE_DOC = "lorem ipsum\ndolor sit\namet"


def make_cursor(line: int, ch: int) -> Range:
    return Range.cursor(Position(line, ch))


def make_buffer(text: str, *selections: Range) -> Buffer:
    return Buffer.from_text(text, selections=selections)


@pytest.mark.parametrize(
    ("text", "start", "expected"),
    [
        (SAMPLE_DOC, make_cursor(1, 0), [make_cursor(0, 0), make_cursor(1, 0)]),
        ("aaa\nbbbbbb", make_cursor(1, 5), [make_cursor(0, 3), make_cursor(1, 5)]),
        (SAMPLE_DOC, make_cursor(0, 3), [make_cursor(0, 3)]),
    ],
)
def test_insert_cursor_above(text: str, start: Range, expected: list) -> None:
    buffer = make_buffer(text, start)

    run_command("insertCursorAbove", buffer)

    assert buffer.get_value() == text
    assert buffer.list_selections() == expected


@pytest.mark.parametrize(
    ("text", "start", "expected"),
    [
        (SAMPLE_DOC, make_cursor(1, 0), [make_cursor(1, 0), make_cursor(2, 0)]),
        ("aaaaaa\nbbb", make_cursor(0, 5), [make_cursor(0, 5), make_cursor(1, 3)]),
        (SAMPLE_DOC, make_cursor(2, 3), [make_cursor(2, 3)]),
    ],
)
def test_insert_cursor_below(text: str, start: Range, expected: list) -> None:
    buffer = make_buffer(text, start)

    run_command("insertCursorBelow", buffer)

    assert buffer.list_selections() == expected


def test_insert_cursor_above_twice_stacks_cursors() -> None:
    buffer = make_buffer(SAMPLE_DOC, make_cursor(2, 2))

    run_command("insertCursorAbove", buffer)
    run_command("insertCursorAbove", buffer)

    assert buffer.list_selections() == [
        make_cursor(0, 2),
        make_cursor(1, 2),
        make_cursor(2, 2),
    ]


def test_add_cursors_ignores_collapsed_selection() -> None:
    buffer = make_buffer(SAMPLE_DOC, make_cursor(1, 0))

    run_command("addCursorsToSelectionEnds", buffer)

    assert buffer.get_value() == SAMPLE_DOC
    assert buffer.list_selections() == [make_cursor(1, 0)]


def test_add_cursor_at_selection_head() -> None:
    selection = Range(Position(0, 2), Position(1, 4))
    buffer = make_buffer(SAMPLE_DOC, selection)

    run_command("addCursorsToSelectionEnds", buffer)

    assert buffer.list_selections() == [selection, make_cursor(1, 4)]


def test_add_cursors_to_line_ends() -> None:
    buffer = make_buffer(SAMPLE_DOC)
    selection = Range(Position(0, 2), Position(2, 1))

    result = add_cursors_to_selection_ends(buffer, selection, "line_ends")

    assert result.edit is None
    assert result.selections == (
        make_cursor(0, 11),
        make_cursor(1, 9),
        make_cursor(2, 1),
    )


def test_unknown_placement_raises() -> None:
    buffer = make_buffer(SAMPLE_DOC)

    with pytest.raises(ValueError):
        add_cursors_to_selection_ends(buffer, Range.between(0, 0, 0, 3), "corners")
