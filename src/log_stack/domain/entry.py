"""Domain value object describing one buffered log message.

Purpose
-------
Provide an immutable representation of a log call captured by the stack so
the buffer and dispatcher only ever handle plain data.

Contents
--------
* :class:`LogEntry` dataclass with helper methods.

System Role
-----------
Sits in the domain layer. ``level`` and ``message`` are opaque: the stack
neither validates nor interprets them, it only hands them to the target.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(slots=True, frozen=True)
class LogEntry:
    """Immutable log entry waiting in a :class:`MessageBuffer`.

    Attributes
    ----------
    level:
        Caller-defined severity label (string, int, enum, ...).
    message:
        Caller-defined payload, usually a string.
    fields:
        Shallow copy of the extra fields, defaults already merged in.

    Examples
    --------
    >>> entry = LogEntry("warn", "disk low", {"id": 1})
    >>> entry.as_tuple()
    ('warn', 'disk low', {'id': 1})
    """

    level: Any
    message: Any
    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", dict(self.fields))

    def as_tuple(self) -> tuple[Any, Any, dict[str, Any]]:
        """Return ``(level, message, fields)`` with a fresh ``fields`` copy."""

        return self.level, self.message, dict(self.fields)


__all__ = ["LogEntry"]
