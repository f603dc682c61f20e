"""Static package metadata surfaced by the CLI banner.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Callable

name = "log_stack"
title = "Cache log messages and throw them to a logging target later"
version = "1.0.0"
homepage = "https://pypi.org/project/log-stack/"
author = "log-stack maintainers"
shell_command = "log-stack"


def print_info(writer: Callable[[str], object] = print) -> None:
    """Write the metadata banner through ``writer``, one newline-terminated line per call.

    Examples
    --------
    >>> print_info(writer=lambda text: print(text, end=""))  # doctest: +ELLIPSIS
    Info for log_stack:
    ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:\n\n")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}\n")
