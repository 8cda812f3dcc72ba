"""The ``lenstr`` entry point.

Global flags map one-to-one onto :class:`LenstrSettings` fields; the
subcommands in :mod:`lenstr.commands` receive the resulting AppContext.
"""

from __future__ import annotations

import click

from lenstr import __version__
from lenstr.commands import register_commands
from lenstr.commands._context import AppContext
from lenstr.config.settings import LenstrSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="lenstr")
@click.option("--json", "json_output", is_flag=True, help="Print results as ServiceResult JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the resulting string or value.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and per-step timings.")
@click.option("--log-json", is_flag=True, help="Emit stderr log lines as JSON.")
@click.option("--no-interact", is_flag=True, help="Never prompt; demo input defaults to empty.")
@click.option("-c", "--config", "config_path", default=None, help="Use this lenstr.toml.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """lenstr: immutable, length-tracked byte strings."""
    ctx.obj = AppContext(LenstrSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
