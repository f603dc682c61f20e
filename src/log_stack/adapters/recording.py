"""In-memory target useful for tests and inspection."""

from __future__ import annotations

from typing import Any, Mapping

from log_stack.application.ports.target import LogTargetPort
from log_stack.domain.entry import LogEntry


class RecordingTarget(LogTargetPort):
    """Collect forwarded entries in a list.

    Examples
    --------
    >>> target = RecordingTarget()
    >>> target.log("info", "hello", {"id": 1})
    >>> target.as_tuples()
    [('info', 'hello', {'id': 1})]
    """

    def __init__(self) -> None:
        self.entries: list[LogEntry] = []

    def log(self, level: Any, message: Any, fields: Mapping[str, Any]) -> None:
        self.entries.append(LogEntry(level, message, fields))

    def as_tuples(self) -> list[tuple[Any, Any, dict[str, Any]]]:
        return [entry.as_tuple() for entry in self.entries]

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)


__all__ = ["RecordingTarget"]
