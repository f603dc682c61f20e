"""Public package surface of :mod:`log_stack`.

Collect log entries in memory during a unit of work, then throw them to a
logging target or flush them, depending on how the work ended::

    stack = LogStack(target, request_id=lambda level, message: current_request_id())
    stack.log("info", "starting import")
    ...
    stack.throw()   # or stack.flush()
"""

from __future__ import annotations

from .adapters import RecordingTarget, RichConsoleTarget, StdlibLoggingTarget
from .application.ports import LogSink, LogTargetPort
from .config import StackConfig, build_stack
from .domain import Computed, Constant, HookName, LogEntry
from .errors import InvalidHook, InvalidTarget, LogStackError
from .log_stack import LogStack

__all__ = [
    "Computed",
    "Constant",
    "HookName",
    "InvalidHook",
    "InvalidTarget",
    "LogEntry",
    "LogSink",
    "LogStack",
    "LogStackError",
    "LogTargetPort",
    "RecordingTarget",
    "RichConsoleTarget",
    "StackConfig",
    "StdlibLoggingTarget",
    "build_stack",
]
