"""Declarative construction of :class:`~log_stack.LogStack` instances.

Purpose
-------
Capture a stack's target, defaults and hooks in one immutable value so
applications can define it once (for example per request type) and build
fresh stacks from it.

Contents
--------
* :class:`StackConfig` - frozen configuration dataclass.
* :func:`build_stack` - composition helper used by :meth:`LogStack.from_config`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Mapping, Sequence

if TYPE_CHECKING:
    from .log_stack import LogStack


@dataclass(slots=True, frozen=True)
class StackConfig:
    """Immutable recipe for a :class:`~log_stack.LogStack`.

    Attributes
    ----------
    target:
        Default dispatch target, or ``None``.
    defaults:
        Field name -> constant or ``(level, message)`` callable.
    hooks:
        Hook name -> callbacks, registered in sequence order.
    """

    target: Any = None
    defaults: Mapping[str, Any] = field(default_factory=dict)
    hooks: Mapping[str, Sequence[Callable[[Any], Any]]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "defaults", dict(self.defaults))
        object.__setattr__(self, "hooks", {name: tuple(callbacks) for name, callbacks in self.hooks.items()})

    def with_defaults(self, **defaults: Any) -> StackConfig:
        """Return a copy with ``defaults`` merged over the current ones."""

        return StackConfig(target=self.target, defaults={**self.defaults, **defaults}, hooks=self.hooks)


def build_stack(config: StackConfig, *, factory: Callable[..., LogStack] | None = None) -> LogStack:
    """Create a stack from ``config``.

    Raises
    ------
    InvalidHook
        When a configured hook callback is not callable.

    Examples
    --------
    >>> stack = build_stack(StackConfig(defaults={"app": "billing"}))
    >>> dict(stack.defaults)
    {'app': 'billing'}
    """
    if factory is None:
        from .log_stack import LogStack

        factory = LogStack
    stack = factory(config.target)
    stack.set(config.defaults)
    for name, callbacks in config.hooks.items():
        for callback in callbacks:
            stack.hook(name, callback)
    return stack


__all__ = ["StackConfig", "build_stack"]
