"""Per-stack registry of lifecycle callbacks.

Purpose
-------
Store callbacks by hook name and fire them in registration order when the
stack reaches the matching lifecycle transition.

Contents
--------
* :class:`HookName` - the four events the stack fires.
* :class:`HookRegistry` - name -> ordered callback list.

System Role
-----------
``init`` fires on the first ``log`` of a session, ``before``/``after`` wrap
the drain inside ``throw``, and ``cleanup`` ends every non-empty throw and
every flush. Callbacks receive the owning stack as their only argument.
Names outside :class:`HookName` are stored but never fired.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, Mapping

from log_stack.errors import InvalidHook

HookCallback = Callable[[Any], Any]


class HookName(str, Enum):
    """Lifecycle events fired by :class:`log_stack.LogStack`."""

    INIT = "init"
    BEFORE = "before"
    AFTER = "after"
    CLEANUP = "cleanup"


def _normalise(name: str | HookName) -> str:
    return name.value if isinstance(name, HookName) else str(name)


class HookRegistry:
    """Ordered callback lists keyed by hook name."""

    def __init__(self) -> None:
        self._callbacks: dict[str, list[HookCallback]] = {}

    def register(self, callbacks: Iterable[tuple[str | HookName, HookCallback]]) -> None:
        """Append every ``(name, callback)`` pair.

        All callbacks are validated first so a rejected call registers none
        of its pairs.

        Raises
        ------
        InvalidHook
            When any callback is not callable.
        """
        pairs = [(_normalise(name), callback) for name, callback in callbacks]
        for name, callback in pairs:
            if not callable(callback):
                raise InvalidHook(f"Hook for {name!r} must be callable, got {type(callback).__name__}")
        for name, callback in pairs:
            self._callbacks.setdefault(name, []).append(callback)

    def fire(self, name: str | HookName, stack: Any) -> None:
        """Invoke the callbacks registered under ``name`` with ``stack``.

        The list is copied first, so callbacks registered while firing only
        run on the next occurrence. Exceptions propagate and skip the
        remaining callbacks.
        """
        for callback in list(self._callbacks.get(_normalise(name), ())):
            callback(stack)

    def callbacks(self, name: str | HookName) -> tuple[HookCallback, ...]:
        """Return the callbacks registered under ``name`` in order."""

        return tuple(self._callbacks.get(_normalise(name), ()))

    def names(self) -> tuple[str, ...]:
        """Return every name that has at least one callback."""
        return tuple(self._callbacks)

    def as_mapping(self) -> Mapping[str, tuple[HookCallback, ...]]:
        return {name: tuple(callbacks) for name, callbacks in self._callbacks.items()}


__all__ = ["HookCallback", "HookName", "HookRegistry"]
