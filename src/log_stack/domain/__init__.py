"""Domain entities and value objects used by the log stack."""

from __future__ import annotations

from .buffer import MessageBuffer
from .defaults import Computed, Constant, DefaultRegistry, DefaultValue, as_default
from .entry import LogEntry
from .hooks import HookCallback, HookName, HookRegistry

__all__ = [
    "Computed",
    "Constant",
    "DefaultRegistry",
    "DefaultValue",
    "HookCallback",
    "HookName",
    "HookRegistry",
    "LogEntry",
    "MessageBuffer",
    "as_default",
]
