"""Rich-powered console target implementing :class:`LogTargetPort`.

Purpose
-------
Print thrown entries to a terminal with per-level colours, mainly for
scripts, demos and local debugging.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleTarget` - the adapter used by the ``demo`` CLI command.

System Role
-----------
Levels are matched by their lowercase name (``str(level)`` or ``level.name``);
unknown levels print without style.
"""

from __future__ import annotations

from typing import Any, Mapping

from rich.console import Console

from log_stack.application.ports.target import LogTargetPort


_STYLE_MAP: Mapping[str, str] = {
    "trace": "dim",
    "debug": "dim",
    "info": "cyan",
    "notice": "cyan",
    "warn": "yellow",
    "warning": "yellow",
    "error": "red",
    "critical": "bold red",
    "fatal": "bold red",
}

#: Default Rich styles keyed by lowercase level name.


def _level_name(level: Any) -> str:
    name = getattr(level, "name", level)
    return str(name).lower()


class RichConsoleTarget(LogTargetPort):
    """Render entries as ``LEVEL message key=value`` lines."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[str, str] | None = None,
    ) -> None:
        """Configure the console and merge ``styles`` over the defaults."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        if styles:
            merged.update({key.lower(): value for key, value in styles.items()})
        self._style_map = merged

    @property
    def console(self) -> Console:
        return self._console

    def log(self, level: Any, message: Any, fields: Mapping[str, Any]) -> None:
        """Print one entry.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=120)
        >>> RichConsoleTarget(console).log("warn", "disk low", {"id": 1})
        >>> "disk low id=1" in console.export_text()
        True
        """
        style = "" if self._no_color else self._style_map.get(_level_name(level), "")
        self._console.print(self.format_line(level, message, fields), style=style, highlight=False, markup=False)

    @staticmethod
    def format_line(level: Any, message: Any, fields: Mapping[str, Any]) -> str:
        """Return the plain text line printed for an entry.

        Examples
        --------
        >>> RichConsoleTarget.format_line("error", "disk full", {"id": 7, "host": "db1"})
        '   ERROR disk full host=db1 id=7'
        """
        extras = "".join(f" {key}={value}" for key, value in sorted(fields.items()))
        return f"{_level_name(level).upper():>8} {message}{extras}"


__all__ = ["RichConsoleTarget"]
