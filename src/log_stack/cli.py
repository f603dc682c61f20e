"""Click command group behind the ``log-stack`` console script.

Purpose
-------
Offer a smoke-test surface for installations: print package metadata and run
a short demonstration of buffering, throwing and flushing.

Contents
--------
* :func:`cli` - root group (``--version``, metadata banner by default).
* :func:`info` / :func:`demo` - subcommands.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import itertools
import os
from typing import Sequence

import click

from . import __init__conf__
from .adapters import RichConsoleTarget
from .log_stack import LogStack

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_DEMO_ENTRIES = (
    ("info", "connecting to database"),
    ("warn", "disk low"),
    ("error", "disk full"),
)


def summary_info() -> str:
    """Return the metadata banner as a single string.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Cache log messages and throw them later."""
    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def info() -> None:
    """Print package metadata."""
    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--outcome",
    type=click.Choice(["throw", "flush"]),
    default="throw",
    show_default=True,
    help="Throw the buffered entries to the console or flush them unseen.",
)
@click.option("--no-color", is_flag=True, help="Disable colour output (also set by a non-empty NO_COLOR).")
@click.option("--force-color", is_flag=True, help="Force colour output even when not attached to a TTY.")
def demo(outcome: str, no_color: bool, force_color: bool) -> None:
    """Buffer a few sample entries and throw or flush them."""
    no_color = no_color or bool(os.environ.get("NO_COLOR"))
    counter = itertools.count(1)
    target = RichConsoleTarget(force_color=force_color, no_color=no_color)
    stack = LogStack(target, seq=lambda level, message: next(counter))
    stack.hook(cleanup=lambda s: click.echo(f"session closed ({outcome})"))
    for level, message in _DEMO_ENTRIES:
        stack.log(level, message)
    click.echo(f"buffered {len(stack)} entries")
    if outcome == "flush":
        stack.flush()
    else:
        stack.throw()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command group and return an exit code instead of exiting.

    Examples
    --------
    >>> main(["--version"])
    1.0.0
    0
    """
    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return 0


__all__ = ["cli", "demo", "info", "main", "summary_info"]
