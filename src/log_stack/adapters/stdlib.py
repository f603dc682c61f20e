"""Target forwarding thrown entries to a :mod:`logging` logger.

Purpose
-------
Replay buffered entries through the standard library so existing handlers,
formatters and filters see them as ordinary records.

Contents
--------
* :func:`coerce_level` - map an opaque level label to a logging constant.
* :func:`safe_extra` - rename fields clashing with record attributes.
* :class:`StdlibLoggingTarget` - :class:`LogTargetPort` implementation.

System Role
-----------
The stack treats levels as opaque; this adapter is the only place that
interprets them. Unknown labels fall back to ``WARNING`` so nothing is lost
silently. Field names that collide with :class:`logging.LogRecord` attributes
are prefixed with ``field_`` so a replay never aborts half way.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from log_stack.application.ports.target import LogTargetPort

_LEVEL_ALIASES = {
    "WARN": logging.WARNING,
    "FATAL": logging.CRITICAL,
    "ALERT": logging.CRITICAL,
    "EMERGENCY": logging.CRITICAL,
    "NOTICE": logging.INFO,
    "TRACE": logging.DEBUG,
}


def coerce_level(level: Any, *, fallback: int = logging.WARNING) -> int:
    """Return the :mod:`logging` level number for ``level``.

    Examples
    --------
    >>> coerce_level("error")
    40
    >>> coerce_level(15)
    15
    >>> coerce_level("verbose")
    30
    """
    if isinstance(level, bool):
        return fallback
    if isinstance(level, int):
        return level
    name = getattr(level, "name", level)
    if not isinstance(name, str):
        return fallback
    normalized = name.strip().upper()
    if normalized in _LEVEL_ALIASES:
        return _LEVEL_ALIASES[normalized]
    resolved = logging.getLevelName(normalized)
    return resolved if isinstance(resolved, int) else fallback


_RESERVED_ATTRS = frozenset(logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__) | {"message", "asctime"}

# Frames between the logger call and the code calling ``LogStack.throw``:
# this adapter, ``LoggerTarget.forward``, ``drain_into`` and ``throw``.
_THROW_STACKLEVEL = 5


def safe_extra(fields: Mapping[str, Any], *, prefix: str = "field_") -> dict[str, Any]:
    """Return ``fields`` usable as ``extra=``, prefixing names reserved by :class:`logging.LogRecord`.

    Examples
    --------
    >>> safe_extra({"name": "db1", "module": "billing", "invoice": 7})
    {'field_name': 'db1', 'field_module': 'billing', 'invoice': 7}
    """
    return {(prefix + key if key in _RESERVED_ATTRS else key): value for key, value in fields.items()}


class StdlibLoggingTarget(LogTargetPort):
    """Forward entries to ``logger`` with the fields passed as ``extra``."""

    def __init__(
        self,
        logger: logging.Logger | str,
        *,
        fallback_level: int = logging.WARNING,
        stacklevel: int = _THROW_STACKLEVEL,
    ) -> None:
        self._logger = logging.getLogger(logger) if isinstance(logger, str) else logger
        self._fallback_level = fallback_level
        self._stacklevel = stacklevel

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def log(self, level: Any, message: Any, fields: Mapping[str, Any]) -> None:
        """Emit one record attributed to the code that called ``throw``."""
        self._logger.log(
            coerce_level(level, fallback=self._fallback_level),
            "%s",
            message,
            extra=safe_extra(fields),
            stacklevel=self._stacklevel,
        )


__all__ = ["StdlibLoggingTarget", "coerce_level", "safe_extra"]
