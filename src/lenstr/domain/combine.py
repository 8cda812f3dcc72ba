"""Concatenation and joining.

Each function sizes the output once, allocates it, then copies every input
at its running offset. Inputs are never touched.
"""

from __future__ import annotations

from collections.abc import Iterable

from lenstr.domain.buffer import allocate, copy_into
from lenstr.domain.value import ImmutableString, seal


def concat(a: ImmutableString, b: ImmutableString) -> ImmutableString:
    """Return *a* immediately followed by *b*."""
    length = a.length + b.length
    buffer = allocate(length)
    offset = copy_into(buffer, 0, a.data)
    copy_into(buffer, offset, b.data)
    return seal(buffer, length)


def concat_many(items: Iterable[ImmutableString]) -> ImmutableString:
    """Concatenate any number of strings in order.

    An empty iterable yields the empty string.
    """
    parts = tuple(items)
    length = sum(part.length for part in parts)
    buffer = allocate(length)
    offset = 0
    for part in parts:
        offset = copy_into(buffer, offset, part.data)
    return seal(buffer, length)


def join_many(separator: ImmutableString, items: Iterable[ImmutableString]) -> ImmutableString:
    """Concatenate *items* with *separator* between each adjacent pair.

    Examples:
        >>> from lenstr.domain.value import from_text
        >>> str(join_many(from_text(","), [from_text("a"), from_text("b"), from_text("c")]))
        'a,b,c'
        >>> len(join_many(from_text(","), []))
        0
    """
    parts = tuple(items)
    length = sum(part.length for part in parts)
    if parts:
        length += separator.length * (len(parts) - 1)
    buffer = allocate(length)
    offset = 0
    for index, part in enumerate(parts):
        if index:
            offset = copy_into(buffer, offset, separator.data)
        offset = copy_into(buffer, offset, part.data)
    return seal(buffer, length)
