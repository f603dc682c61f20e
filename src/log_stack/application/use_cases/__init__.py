"""Use cases orchestrating buffered entries."""

from __future__ import annotations

from .dispatch import CallableTarget, LoggerTarget, ResolvedTarget, drain_into, resolve_target

__all__ = ["CallableTarget", "LoggerTarget", "ResolvedTarget", "drain_into", "resolve_target"]
