"""Command: guided walkthrough of the library."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lenstr.commands._base import LenstrCommand

if TYPE_CHECKING:
    from lenstr.commands._context import AppContext


@click.command(
    cls=LenstrCommand,
    examples="""\
  lenstr demo
  lenstr demo --input "   some padded input   "
  lenstr --no-interact --json demo""",
)
@click.option("--input", "input_text", default=None, help="Input line (skips the prompt).")
@click.pass_obj
def demo(app: AppContext, input_text: str | None) -> None:
    """Run every operation on sample strings, then on an input line."""
    if input_text is None:
        if app.settings.no_interact:
            input_text = ""
        else:
            input_text = click.prompt(
                app.settings.prompt.marker.rstrip(),
                default="",
                show_default=False,
                prompt_suffix=" ",
            )
    app.emit(app.demo().walkthrough(input_text))
