"""Commands: concatenate and join strings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lenstr.commands._base import LenstrCommand

if TYPE_CHECKING:
    from lenstr.commands._context import AppContext


@click.command(
    cls=LenstrCommand,
    examples="""\
  lenstr concat "My global" " and local"
  lenstr concat a b c d""",
)
@click.argument("texts", nargs=-1)
@click.pass_obj
def concat(app: AppContext, texts: tuple[str, ...]) -> None:
    """Concatenate TEXTS in order (no arguments gives the empty string)."""
    app.emit(app.strings.concat(texts))


@click.command(
    cls=LenstrCommand,
    examples="""\
  lenstr join --sep ", " a b c
  lenstr join --sep / usr local bin""",
)
@click.argument("texts", nargs=-1)
@click.option("--sep", "separator", default=", ", show_default=True, help="Separator string.")
@click.pass_obj
def join(app: AppContext, texts: tuple[str, ...], separator: str) -> None:
    """Join TEXTS with a separator between each adjacent pair."""
    app.emit(app.strings.join(separator, texts))
