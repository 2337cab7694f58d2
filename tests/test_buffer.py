import pytest

from shortcut_engine.buffer import (
    Buffer,
    BufferDocument,
    BufferValidationError,
    Position,
    Range,
    clamp_position,
)


def make_buffer(text: str = "lorem ipsum\ndolor sit\namet", *selections: Range) -> Buffer:
    return Buffer.from_text(text, selections=selections or None)


def test_from_text_splits_lines_without_newlines() -> None:
    buffer = make_buffer()

    assert buffer.line_count() == 3
    assert buffer.get_line(1) == "dolor sit"
    assert buffer.get_value() == "lorem ipsum\ndolor sit\namet"
    assert buffer.list_selections() == [Range.cursor(Position(0, 0))]
    assert len(buffer.history) == 0


def test_empty_document_has_one_line() -> None:
    document = BufferDocument.from_text("")

    assert document.line_count == 1
    assert document.get_line(0) == ""


def test_offsets_round_trip_across_lines() -> None:
    buffer = make_buffer()

    assert buffer.pos_to_offset(Position(1, 3)) == 15
    assert buffer.offset_to_pos(15) == Position(1, 3)
    assert buffer.offset_to_pos(12) == Position(1, 0)
    assert buffer.offset_to_pos(999) == Position(2, 4)


def test_get_range_orders_its_ends() -> None:
    buffer = make_buffer()

    assert buffer.get_range(Position(0, 6), Position(1, 5)) == "ipsum\ndolor"
    assert buffer.get_range(Position(1, 5), Position(0, 6)) == "ipsum\ndolor"


def test_replace_range_outside_batch_records_history() -> None:
    buffer = make_buffer()

    buffer.replace_range("LOREM", Position(0, 0), Position(0, 5))

    assert buffer.get_line(0) == "LOREM ipsum"
    assert len(buffer.history) == 1
    assert buffer.history.latest().label == "replace_range"
    assert buffer.undo() is True
    assert buffer.get_value() == "lorem ipsum\ndolor sit\namet"


def test_nested_batches_record_one_entry() -> None:
    buffer = make_buffer()

    with buffer.batch("outer"):
        buffer.replace_range("X", Position(0, 0))
        buffer.replace_range("Y", Position(1, 0))
        buffer.set_selections([Range.cursor(Position(1, 1))])

    assert buffer.get_value() == "Xlorem ipsum\nYdolor sit\namet"
    assert len(buffer.history) == 1
    entry = buffer.history.latest()
    assert entry.label == "outer"
    assert entry.before_text == "lorem ipsum\ndolor sit\namet"
    assert entry.selections_before == (Range.cursor(Position(0, 0)),)


def test_failed_batch_rolls_back() -> None:
    buffer = make_buffer("aaa\nbbb", Range.cursor(Position(1, 1)))

    with pytest.raises(RuntimeError, match="boom"):
        with buffer.batch("broken"):
            buffer.replace_range("zzz", Position(0, 0), Position(0, 3))
            buffer.set_selections([Range.cursor(Position(0, 0))])
            raise RuntimeError("boom")

    assert buffer.get_value() == "aaa\nbbb"
    assert buffer.list_selections() == [Range.cursor(Position(1, 1))]
    assert len(buffer.history) == 0


def test_out_of_range_positions_raise_validation_error() -> None:
    buffer = make_buffer()

    with pytest.raises(BufferValidationError) as excinfo:
        buffer.replace_range("x", Position(1, 42))

    assert excinfo.value.position == Position(1, 42)
    with pytest.raises(BufferValidationError):
        buffer.get_line(7)
    with pytest.raises(BufferValidationError):
        Buffer.from_text("ab", selections=[Range.cursor(Position(0, 5))])


def test_set_selections_requires_one_range() -> None:
    buffer = make_buffer()

    with pytest.raises(BufferValidationError):
        buffer.set_selections([])


def test_undo_steps_back_one_batch_at_a_time() -> None:
    buffer = make_buffer("aaa", Range.cursor(Position(0, 0)))

    with buffer.batch("first"):
        buffer.replace_range("X", Position(0, 0))
        buffer.set_selections([Range.cursor(Position(0, 1))])
    buffer.replace_range("Y", Position(0, 4))

    assert buffer.undo() is True
    assert buffer.get_value() == "Xaaa"
    assert buffer.list_selections() == [Range.cursor(Position(0, 1))]
    assert buffer.history.latest().label == "first"
    assert buffer.undo() is True
    assert buffer.get_value() == "aaa"
    assert buffer.list_selections() == [Range.cursor(Position(0, 0))]
    assert len(buffer.history) == 0


def test_undo_without_history_is_noop() -> None:
    buffer = make_buffer()

    assert buffer.undo() is False
    assert buffer.get_value() == "lorem ipsum\ndolor sit\namet"


def test_clamp_position_limits_line_and_column() -> None:
    document = BufferDocument.from_text("ab\ncdef")

    assert clamp_position(document, 5, 9) == Position(1, 4)
    assert clamp_position(document, -1, -3) == Position(0, 0)


def test_range_helpers() -> None:
    selection = Range(Position(2, 1), Position(0, 4))

    assert selection.from_ == Position(0, 4)
    assert selection.to == Position(2, 1)
    assert selection.reversed
    assert not selection.empty
    assert selection.oriented(Position(0, 0), Position(3, 0)) == Range(
        Position(3, 0), Position(0, 0)
    )
