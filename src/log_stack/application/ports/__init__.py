"""Protocols the application layer depends on."""

from __future__ import annotations

from .target import LogSink, LogTargetPort

__all__ = ["LogSink", "LogTargetPort"]
