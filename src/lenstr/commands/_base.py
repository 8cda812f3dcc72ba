"""Click classes for lenstr commands.

A command may carry ready-to-paste invocations in ``examples``; the
``--examples`` flag prints them and exits before any argument is required.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(ctx.command.examples)  # type: ignore[attr-defined]
    ctx.exit(0)


class _ExamplesMixin:
    params: list[click.Parameter]
    examples: str | None

    def _attach_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=_print_examples,
                help="Show usage examples.",
            )
        )


class LenstrCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)


class LenstrGroup(_ExamplesMixin, click.Group):
    """Group whose ``@group.command`` subcommands are :class:`LenstrCommand`."""

    command_class = LenstrCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)
