from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from log_stack.domain import LogEntry, MessageBuffer
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_log_entry_copies_fields() -> None:
    fields = {"id": 1}
    entry = LogEntry("info", "hello", fields)
    fields["id"] = 2
    assert entry.fields == {"id": 1}


def test_log_entry_is_frozen() -> None:
    entry = LogEntry("info", "hello")
    with pytest.raises(FrozenInstanceError):
        entry.message = "changed"  # type: ignore[misc]


def test_log_entry_keeps_opaque_level_and_message() -> None:
    level = object()
    payload = {"structured": True}
    entry = LogEntry(level, payload)
    assert entry.level is level
    assert entry.message is payload
    assert entry.fields == {}


def test_buffer_drains_in_fifo_order() -> None:
    buffer = MessageBuffer()
    buffer.extend(LogEntry("info", f"message-{index}") for index in range(5))

    drained = [entry.message for entry in buffer.drain()]

    assert drained == [f"message-{index}" for index in range(5)]
    assert len(buffer) == 0


def test_buffer_drain_removes_entry_before_yielding() -> None:
    buffer = MessageBuffer()
    buffer.extend([LogEntry("info", "a"), LogEntry("info", "b"), LogEntry("info", "c")])

    iterator = buffer.drain()
    first = next(iterator)

    assert first.message == "a"
    assert [entry.message for entry in buffer] == ["b", "c"]


def test_buffer_drain_includes_entries_appended_while_draining() -> None:
    buffer = MessageBuffer()
    buffer.append(LogEntry("info", "a"))
    seen = []
    for entry in buffer.drain():
        seen.append(entry.message)
        if entry.message == "a":
            buffer.append(LogEntry("info", "late"))
    assert seen == ["a", "late"]


def test_buffer_snapshot_is_a_copy() -> None:
    buffer = MessageBuffer()
    buffer.append(LogEntry("info", "a"))
    snapshot = buffer.snapshot()
    snapshot.clear()
    assert len(buffer) == 1


def test_buffer_clear_reports_discarded_count() -> None:
    buffer = MessageBuffer()
    buffer.extend([LogEntry("info", "a"), LogEntry("info", "b")])
    assert buffer.clear() == 2
    assert buffer.clear() == 0
    assert not buffer
