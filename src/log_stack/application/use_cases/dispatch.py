"""Use case draining a buffer into a dispatch target.

Purpose
-------
Turn whatever the caller passed as a target into an explicit variant once,
then forward buffered entries to it in arrival order.

Contents
--------
* :class:`CallableTarget` / :class:`LoggerTarget` - resolved target variants.
* :func:`resolve_target` - classify a raw target or raise
  :class:`~log_stack.errors.InvalidTarget`.
* :func:`drain_into` - forward every buffered entry to a resolved target.

System Role
-----------
Invoked by :meth:`log_stack.LogStack.throw` between the ``before`` and
``after`` hooks. Each entry is removed from the buffer before it is
forwarded: when the target raises, that entry is gone while the remaining
ones stay queued for a later ``throw`` or ``flush``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Union

from log_stack.domain import MessageBuffer
from log_stack.errors import InvalidTarget

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class CallableTarget:
    """Target invoked directly as ``sink(level, message, fields)``."""

    sink: Callable[..., Any]
    kind = "callable"

    def forward(self, level: Any, message: Any, fields: dict[str, Any]) -> None:
        self.sink(level, message, fields)


@dataclass(slots=True, frozen=True)
class LoggerTarget:
    """Target invoked as ``obj.log(level, message, fields)``."""

    obj: Any
    kind = "logger"

    def forward(self, level: Any, message: Any, fields: dict[str, Any]) -> None:
        self.obj.log(level, message, fields)


ResolvedTarget = Union[CallableTarget, LoggerTarget]


def resolve_target(target: Any) -> ResolvedTarget:
    """Classify ``target`` as a callable sink or a logger object.

    Callables win over objects that also expose ``log``.

    Raises
    ------
    InvalidTarget
        When ``target`` is ``None`` or matches neither shape.

    Examples
    --------
    >>> resolve_target(print).kind
    'callable'
    >>> resolve_target(None)
    Traceback (most recent call last):
    ...
    log_stack.errors.InvalidTarget: Logging target must be callable or expose a callable 'log' attribute, got NoneType
    """
    if isinstance(target, (CallableTarget, LoggerTarget)):
        return target
    if callable(target):
        return CallableTarget(target)
    if callable(getattr(target, "log", None)):
        return LoggerTarget(target)
    raise InvalidTarget(
        f"Logging target must be callable or expose a callable 'log' attribute, got {type(target).__name__}"
    )


def drain_into(buffer: MessageBuffer, target: ResolvedTarget) -> int:
    """Forward every entry of ``buffer`` to ``target`` and return the count.

    Exceptions raised by the target propagate immediately; entries not yet
    drained remain in ``buffer``.
    """
    sent = 0
    for entry in buffer.drain():
        target.forward(entry.level, entry.message, dict(entry.fields))
        sent += 1
    logger.debug("Dispatched %d buffered entries to %s target", sent, target.kind)
    return sent


__all__ = ["CallableTarget", "LoggerTarget", "ResolvedTarget", "drain_into", "resolve_target"]
