"""Concrete dispatch targets bundled with the package."""

from __future__ import annotations

from .recording import RecordingTarget
from .rich_console import RichConsoleTarget
from .stdlib import StdlibLoggingTarget, coerce_level, safe_extra

__all__ = ["RecordingTarget", "RichConsoleTarget", "StdlibLoggingTarget", "coerce_level", "safe_extra"]
