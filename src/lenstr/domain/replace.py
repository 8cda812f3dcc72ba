"""Substring replacement.

Both functions follow the non-overlapping scan used by
:func:`lenstr.domain.search.count`. An empty pattern is never matched
and yields an unmodified copy.
"""

from __future__ import annotations

from lenstr.domain.buffer import allocate, copy_into
from lenstr.domain.search import count, index_of
from lenstr.domain.value import ImmutableString, clone, seal


def replace_first(s: ImmutableString, what: ImmutableString, to: ImmutableString) -> ImmutableString:
    """Replace the first occurrence of *what* in *s* with *to*."""
    position = index_of(s, what)
    if position == -1:
        return clone(s)
    tail = position + what.length
    length = position + to.length + (s.length - tail)
    buffer = allocate(length)
    offset = copy_into(buffer, 0, s.data[:position])
    offset = copy_into(buffer, offset, to.data)
    copy_into(buffer, offset, s.data[tail:])
    return seal(buffer, length)


def replace_all(s: ImmutableString, what: ImmutableString, to: ImmutableString) -> ImmutableString:
    """Replace every non-overlapping occurrence of *what* in *s* with *to*.

    The output is sized up front as
    ``s.length + count(s, what) * (to.length - what.length)``.
    """
    occurrences = count(s, what)
    if occurrences == 0:
        return clone(s)
    length = s.length + occurrences * (to.length - what.length)
    buffer = allocate(length)
    data, pattern, replacement = s.data, what.data, to.data
    offset = 0
    consumed = 0
    position = data.find(pattern)
    while position != -1:
        offset = copy_into(buffer, offset, data[consumed:position])
        offset = copy_into(buffer, offset, replacement)
        consumed = position + what.length
        position = data.find(pattern, consumed)
    copy_into(buffer, offset, data[consumed:])
    return seal(buffer, length)
