"""Target ports describing where thrown entries are delivered.

Purpose
-------
Define the two shapes a dispatch target may take so the dispatcher can depend
on narrow protocols instead of concrete logging libraries.

Contents
--------
* :class:`LogSink` - callable ``(level, message, fields)``.
* :class:`LogTargetPort` - object exposing ``log(level, message, fields)``.

System Role
-----------
Adapters in :mod:`log_stack.adapters` implement :class:`LogTargetPort`; any
plain function matching :class:`LogSink` works as well.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class LogSink(Protocol):
    """Callable receiving one entry per invocation."""

    def __call__(self, level: Any, message: Any, fields: Mapping[str, Any]) -> Any: ...


@runtime_checkable
class LogTargetPort(Protocol):
    """Logger-like object receiving one entry per ``log`` call."""

    def log(self, level: Any, message: Any, fields: Mapping[str, Any]) -> Any:
        """Forward a single entry to the backend."""


__all__ = ["LogSink", "LogTargetPort"]
