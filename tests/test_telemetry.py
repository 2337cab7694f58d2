from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Tuple

import pytest

from shortcut_engine.buffer import Buffer, Position, Range
from shortcut_engine.runtime import telemetry


class RecordingLogger:
    def __init__(self) -> None:
        self.context: Dict[str, str] = {}
        self.records: List[Tuple[str, str, Dict[str, str]]] = []
        self.profiled: List[str] = []
        self.components: List[str] = []

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        self.profiled.append(name)
        yield

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        self.components.append(name)
        yield

    def _record(self, level: str, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.records.append((level, message, dict(pairs)))

    def info_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self._record("info", message, pairs)

    def debug_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self._record("debug", message, pairs)

    def error_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self._record("error", message, pairs)


@pytest.fixture
def recording_logger(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    logger = RecordingLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: logger)
    return logger


def test_record_event_emits_structured_pairs(recording_logger: RecordingLogger) -> None:
    telemetry.record_event("command.run", level="debug", data={"command": "joinLines"})

    assert recording_logger.records == [
        ("debug", "event::command.run", {"event": "command.run", "command": "joinLines"})
    ]


def test_span_pushes_context_and_tracks_component(recording_logger: RecordingLogger) -> None:
    with telemetry.span("dispatch::test", component="dispatch", metadata={"count": 2}) as handle:
        assert recording_logger.context == {"count": "2"}
        handle.add_metadata("result", [1, 2])

    assert recording_logger.context == {}
    assert recording_logger.profiled == ["dispatch::test"]
    assert recording_logger.components == ["dispatch"]
    assert handle.metadata == {"count": "2", "result": "[1, 2]"}


def test_span_reports_failure_and_reraises(recording_logger: RecordingLogger) -> None:
    with pytest.raises(ValueError):
        with telemetry.span("buffer::broken", component=True):
            raise ValueError("bad input")

    level, message, payload = recording_logger.records[-1]
    assert (level, message) == ("error", "span::fail")
    assert payload["reason"] == "bad input"
    assert payload["component"] == "buffer::broken"


def test_buffer_batches_open_spans(recording_logger: RecordingLogger) -> None:
    buffer = Buffer.from_text("ab")

    with buffer.batch("rename"):
        buffer.replace_range("c", Position(0, 2))
        buffer.set_selections([Range.cursor(Position(0, 3))])

    assert recording_logger.profiled == ["buffer::rename"]


def test_unknown_level_is_rejected(recording_logger: RecordingLogger) -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("oops", level="shout")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")
