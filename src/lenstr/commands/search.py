"""Command group: search and comparison."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lenstr.commands._base import LenstrGroup

if TYPE_CHECKING:
    from lenstr.commands._context import AppContext

_SEARCH_EXAMPLES = """\
  lenstr search index-of "My dynamic string" string
  lenstr search last-index-of "test.file.name.txt" .
  lenstr search contains "My dynamic string" dynamic
  lenstr search count "aaa" aa
  lenstr search equals abc abcdef --bounded"""


@click.group(cls=LenstrGroup, examples=_SEARCH_EXAMPLES)
def search() -> None:
    """Find, count, and compare substrings."""


@search.command("index-of", examples='  lenstr search index-of "My dynamic string" string')
@click.argument("text")
@click.argument("sub")
@click.pass_obj
def index_of(app: AppContext, text: str, sub: str) -> None:
    """Index of the first SUB in TEXT, or -1."""
    app.emit(app.strings.index_of(text, sub))


@search.command("last-index-of", examples='  lenstr search last-index-of "a.b.c" .')
@click.argument("text")
@click.argument("sub")
@click.pass_obj
def last_index_of(app: AppContext, text: str, sub: str) -> None:
    """Index of the last SUB in TEXT, or -1."""
    app.emit(app.strings.last_index_of(text, sub))


@search.command(examples='  lenstr search contains "My dynamic string" string')
@click.argument("text")
@click.argument("sub")
@click.pass_obj
def contains(app: AppContext, text: str, sub: str) -> None:
    """Whether TEXT contains SUB (never true for an empty SUB)."""
    app.emit(app.strings.contains(text, sub))


@search.command(examples='  lenstr search count "testtest test" test')
@click.argument("text")
@click.argument("sub")
@click.pass_obj
def count(app: AppContext, text: str, sub: str) -> None:
    """Number of non-overlapping SUB occurrences in TEXT."""
    app.emit(app.strings.count(text, sub))


@search.command(
    examples="""\
  lenstr search equals abc abc
  lenstr search equals abcdef abc --bounded"""
)
@click.argument("first")
@click.argument("second")
@click.option(
    "--bounded",
    is_flag=True,
    help="Compare only SECOND's length of characters (prefix match).",
)
@click.pass_obj
def equals(app: AppContext, first: str, second: str, bounded: bool) -> None:
    """Whether FIRST and SECOND hold the same characters."""
    app.emit(app.strings.equals(first, second, bounded=bounded))
