"""Commands: build strings from text, format strings, and clones."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lenstr.commands._base import LenstrCommand

if TYPE_CHECKING:
    from lenstr.commands._context import AppContext


@click.command(
    cls=LenstrCommand,
    examples="""\
  lenstr new "My dynamic string"
  lenstr new 'abc\\0def' --nul-terminated
  lenstr --json new "hello" """,
)
@click.argument("text")
@click.option(
    "--nul-terminated",
    is_flag=True,
    help="Treat a literal \\0 as the terminator and stop there.",
)
@click.pass_obj
def new(app: AppContext, text: str, nul_terminated: bool) -> None:
    """Create a string from TEXT and report its length."""
    if nul_terminated:
        text = text.replace("\\0", "\0")
    app.emit(app.strings.new(text, nul_terminated=nul_terminated))


@click.command(
    "format",
    cls=LenstrCommand,
    examples="""\
  lenstr format "%s, %s" first second
  lenstr format "%s-%s" left right --size 6""",
)
@click.argument("fmt", metavar="FORMAT")
@click.argument("args", nargs=-1)
@click.option(
    "--size",
    type=click.IntRange(min=0),
    default=None,
    help="Scratch buffer size; output keeps at most SIZE-1 bytes.",
)
@click.pass_obj
def format_cmd(app: AppContext, fmt: str, args: tuple[str, ...], size: int | None) -> None:
    """Render FORMAT (printf-style %s) with ARGS into a bounded buffer."""
    app.emit(app.strings.format(fmt, args, size=size))


@click.command(cls=LenstrCommand, examples="  lenstr clone \"copy me\"")
@click.argument("text")
@click.pass_obj
def clone(app: AppContext, text: str) -> None:
    """Create an independent copy of TEXT."""
    app.emit(app.strings.clone(text))
