"""Deferred log buffer that wires the domain objects and dispatch use case.

Purpose
-------
Expose :class:`LogStack`, the object host code uses to collect log entries
during a unit of work and later throw them to a logging backend or flush
them unseen.

Contents
--------
* :class:`LogStack` - ``log``/``set``/``hook``/``throw``/``flush`` plus the
  :meth:`LogStack.session` context manager.

System Role
-----------
Single composition point owning one :class:`MessageBuffer`, one
:class:`DefaultRegistry` and one :class:`HookRegistry`. Instances are meant
for a single owner; wrap them in a lock when sharing across threads.

Lifecycle::

    IDLE --log()--> ACTIVE                      (fires init)
    ACTIVE --throw()--> before, drain, after, cleanup --> IDLE
    ACTIVE --flush()--> cleanup --> IDLE
    IDLE --throw()--> IDLE                      (empty buffer, no hooks)
    IDLE --flush()--> cleanup --> IDLE
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Literal, Mapping

from .application.use_cases.dispatch import drain_into, resolve_target
from .domain import DefaultRegistry, HookCallback, HookName, HookRegistry, LogEntry, MessageBuffer

if TYPE_CHECKING:
    from .config import StackConfig

logger = logging.getLogger(__name__)

Outcome = Literal["throw", "flush"]
_OUTCOMES = ("throw", "flush")
_MISSING: Any = object()


def _pairs(name: Any, value: Any, named: Mapping[str, Any], *, what: str) -> Iterable[tuple[Any, Any]]:
    """Normalise ``(name, value)``, ``(mapping,)`` and keyword call styles."""
    if name is None:
        if value is not _MISSING:
            raise TypeError(f"{what}() got a value without a name")
        return list(named.items())
    if isinstance(name, Mapping):
        if value is not _MISSING:
            raise TypeError(f"{what}() takes a mapping or a name/value pair, not both")
        return [*name.items(), *named.items()]
    if value is _MISSING:
        raise TypeError(f"{what}() missing value for {name!r}")
    return [(name, value), *named.items()]


class LogStack:
    """Cache log messages and throw them to a target later.

    Parameters
    ----------
    target:
        Default destination for :meth:`throw`: a callable
        ``(level, message, fields)`` or an object with a ``log`` method of the
        same signature. May be omitted when every :meth:`throw` call passes
        its own target.
    **defaults:
        Initial default fields, see :meth:`set`.

    Examples
    --------
    >>> received = []
    >>> stack = LogStack(lambda level, message, fields: received.append((level, message, fields)), id=1)
    >>> stack.log("warn", "disk low")
    >>> stack.log("error", "disk full", id=7)
    >>> stack.throw()
    >>> received
    [('warn', 'disk low', {'id': 1}), ('error', 'disk full', {'id': 7})]
    """

    def __init__(self, target: Any = None, /, **defaults: Any) -> None:
        self._target = target
        self._buffer = MessageBuffer()
        self._defaults = DefaultRegistry(defaults)
        self._hooks = HookRegistry()
        self._initialized = False

    @classmethod
    def from_config(cls, config: StackConfig) -> LogStack:
        """Build a stack from a :class:`~log_stack.config.StackConfig`."""

        from .config import build_stack

        return build_stack(config, factory=cls)

    @property
    def target(self) -> Any:
        """Return the target given at construction (``None`` when omitted)."""
        return self._target

    @property
    def initialized(self) -> bool:
        """Return ``True`` once ``log`` has run since the last throw or flush."""
        return self._initialized

    @property
    def defaults(self) -> Mapping[str, Any]:
        """Return a read-only view of the raw default values."""
        return self._defaults.view()

    @property
    def hooks(self) -> Mapping[str, tuple[HookCallback, ...]]:
        return self._hooks.as_mapping()

    @property
    def pending(self) -> list[LogEntry]:
        """Return a snapshot of buffered entries, oldest first."""
        return self._buffer.snapshot()

    def __len__(self) -> int:
        return len(self._buffer)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pending={len(self._buffer)}, initialized={self._initialized})"

    def set(self, name: Any = None, value: Any = _MISSING, /, **values: Any) -> None:
        """Set or override default fields for later :meth:`log` calls.

        Accepts ``set("id", 7)``, ``set({"id": 7})`` or ``set(id=7)``.
        Callables are invoked as ``value(level, message)`` on every ``log``
        call; anything else is used as is. Entries already buffered keep the
        values they were logged with.
        """
        self._defaults.update(dict(_pairs(name, value, values, what="set")))

    def unset(self, *names: str) -> None:
        """Remove default fields; unknown names are ignored."""
        self._defaults.remove(*names)

    def hook(self, name: Any = None, callback: Any = _MISSING, /, **callbacks: Any) -> None:
        """Register lifecycle callbacks.

        Accepts ``hook("init", fn)``, ``hook({"init": fn})`` or
        ``hook(init=fn)``. Callbacks registered under the same name run in
        registration order and receive this stack as their only argument.
        Recognised names are listed in :class:`~log_stack.domain.HookName`;
        other names are stored but never fired.

        Raises
        ------
        InvalidHook
            When a callback is not callable. Nothing from the call is
            registered in that case.
        """
        self._hooks.register(_pairs(name, callback, callbacks, what="hook"))

    def log(self, level: Any, message: Any, fields: Mapping[str, Any] | None = None, /, **extra_fields: Any) -> None:
        """Buffer one entry.

        ``fields`` and ``extra_fields`` are merged (keywords win) and then
        completed with every default they do not set explicitly. The first
        call after a reset fires the ``init`` hook before anything else.
        """
        if not self._initialized:
            self._hooks.fire(HookName.INIT, self)
            self._initialized = True
        supplied = {**(fields or {}), **extra_fields}
        merged = self._defaults.resolve(level, message, supplied)
        self._buffer.append(LogEntry(level, message, merged))

    def throw(self, target: Any = None, /) -> None:
        """Send all buffered entries to ``target`` or the constructor target.

        Does nothing, hooks included, while the buffer is empty. Otherwise
        fires ``before``, forwards entries oldest first, fires ``after`` and
        ``cleanup`` and resets the session. ``target`` is used for this call
        only.

        Raises
        ------
        InvalidTarget
            When entries are pending and the effective target is neither
            callable nor has a ``log`` method.
        """
        if not self._buffer:
            return
        resolved = resolve_target(target if target is not None else self._target)
        self._hooks.fire(HookName.BEFORE, self)
        drain_into(self._buffer, resolved)
        self._hooks.fire(HookName.AFTER, self)
        self._reset()

    def flush(self) -> None:
        """Discard all buffered entries, fire ``cleanup`` and reset the session."""
        discarded = self._buffer.clear()
        logger.debug("Flushed %d buffered entries", discarded)
        self._reset()

    def _reset(self) -> None:
        self._hooks.fire(HookName.CLEANUP, self)
        self._initialized = False

    @contextmanager
    def session(
        self,
        *,
        on_success: Outcome = "throw",
        on_error: Outcome = "throw",
        target: Any = None,
    ) -> Iterator[LogStack]:
        """Scope a unit of work and throw or flush depending on how it ends.

        Examples
        --------
        >>> from log_stack.adapters import RecordingTarget
        >>> recorder = RecordingTarget()
        >>> stack = LogStack(recorder)
        >>> with stack.session(on_success="flush", on_error="throw"):
        ...     stack.log("debug", "only shown when the block fails")
        >>> len(recorder)
        0
        """
        for keyword, outcome in (("on_success", on_success), ("on_error", on_error)):
            if outcome not in _OUTCOMES:
                raise ValueError(f"{keyword} must be 'throw' or 'flush', got {outcome!r}")
        try:
            yield self
        except Exception:
            self._finish(on_error, target)
            raise
        self._finish(on_success, target)

    def _finish(self, outcome: Outcome, target: Any) -> None:
        if outcome == "flush":
            self.flush()
        else:
            self.throw(target)


__all__ = ["LogStack", "Outcome"]
