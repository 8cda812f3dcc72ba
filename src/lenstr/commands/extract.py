"""Commands: slice and trim."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lenstr.commands._base import LenstrCommand

if TYPE_CHECKING:
    from lenstr.commands._context import AppContext


@click.command(
    "slice",
    cls=LenstrCommand,
    examples="""\
  lenstr slice "test.file.name.txt" --start 13
  lenstr slice "My local string" --start=-6 --length 3
  lenstr slice "abc" --start=-99 --length=-1""",
)
@click.argument("text")
@click.option(
    "-s",
    "--start",
    type=int,
    default=0,
    show_default=True,
    help="Start index; negative counts from the end.",
)
@click.option(
    "-n",
    "--length",
    type=int,
    default=-1,
    show_default=True,
    help="Characters to take; negative means the rest.",
)
@click.pass_obj
def slice_cmd(app: AppContext, text: str, start: int, length: int) -> None:
    """Extract part of TEXT. Out-of-range values are clamped."""
    app.emit(app.strings.slice(text, start, length))


@click.command(cls=LenstrCommand, examples='  lenstr trim "   padded   "')
@click.argument("text")
@click.pass_obj
def trim(app: AppContext, text: str) -> None:
    """Strip leading and trailing whitespace from TEXT."""
    app.emit(app.strings.trim(text))
