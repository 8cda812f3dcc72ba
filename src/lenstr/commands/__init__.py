"""Subcommand modules for lenstr.

Provides register_commands() which uses deferred imports to keep
``lenstr --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the search group and the standalone commands on the root group."""
    from lenstr.commands.search import search

    cli.add_command(search)

    from lenstr.commands.combine import concat, join
    from lenstr.commands.construct import clone, format_cmd, new
    from lenstr.commands.demo import demo
    from lenstr.commands.extract import slice_cmd, trim
    from lenstr.commands.replace import replace

    cli.add_command(new)
    cli.add_command(format_cmd)
    cli.add_command(clone)
    cli.add_command(concat)
    cli.add_command(join)
    cli.add_command(slice_cmd)
    cli.add_command(trim)
    cli.add_command(replace)
    cli.add_command(demo)
