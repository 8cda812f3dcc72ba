"""Command: replace occurrences of a substring."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lenstr.commands._base import LenstrCommand

if TYPE_CHECKING:
    from lenstr.commands._context import AppContext


@click.command(
    cls=LenstrCommand,
    examples="""\
  lenstr replace "My dynamic string" My 123
  lenstr replace "aaaa" aa b --all
  lenstr -q replace "a test. (testtest)" test example --all""",
)
@click.argument("text")
@click.argument("what")
@click.argument("to")
@click.option("--all", "replace_all", is_flag=True, help="Replace every occurrence.")
@click.pass_obj
def replace(app: AppContext, text: str, what: str, to: str, replace_all: bool) -> None:
    """Replace the first (or, with --all, every) WHAT in TEXT with TO."""
    app.emit(app.strings.replace(text, what, to, replace_all=replace_all))
