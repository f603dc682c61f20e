"""Exception taxonomy raised by the log stack.

Purpose
-------
Give callers one base class to catch while keeping the two configuration
mistakes (bad target, bad hook) distinguishable.

Contents
--------
* :class:`LogStackError` - common base class.
* :class:`InvalidTarget` - raised by :meth:`LogStack.throw`.
* :class:`InvalidHook` - raised by :meth:`LogStack.hook`.

System Role
-----------
Both concrete errors also derive from :class:`TypeError` because they signal
an argument of the wrong shape. Failures inside caller-supplied code (targets,
hooks, computed defaults) are never wrapped in these types; they propagate as
raised.
"""

from __future__ import annotations


class LogStackError(Exception):
    """Base class for errors raised by :mod:`log_stack` itself."""


class InvalidTarget(LogStackError, TypeError):
    """The dispatch target is neither callable nor exposes a ``log`` method."""


class InvalidHook(LogStackError, TypeError):
    """A hook callback is not callable."""


__all__ = ["InvalidHook", "InvalidTarget", "LogStackError"]
