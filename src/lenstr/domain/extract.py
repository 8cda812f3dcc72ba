"""Substring extraction — slicing and trimming.

Out-of-range indices are clamped, never rejected.
"""

from __future__ import annotations

from lenstr.domain.value import ImmutableString, from_characters

# Matches C isspace() in the "C" locale.
WHITESPACE = b" \t\n\v\f\r"


def normalize_range(total: int, start: int, length: int) -> tuple[int, int]:
    """Clamp a ``(start, length)`` request against a string of *total* characters.

    A negative *start* counts back from the end and is clamped to 0; a
    *start* past the end is clamped to the end. A negative *length*, or one
    that runs past the end, means "the rest of the string".

    Examples:
        >>> normalize_range(10, -3, 2)
        (7, 2)
        >>> normalize_range(10, -50, 4)
        (0, 4)
        >>> normalize_range(10, 8, -1)
        (8, 2)
        >>> normalize_range(10, 12, 1)
        (10, 0)
    """
    if start < 0:
        start = max(total + start, 0)
    elif start > total:
        start = total
    if length < 0 or start + length > total:
        length = total - start
    return start, length


def slice_string(s: ImmutableString, start: int, length: int) -> ImmutableString:
    """Return a copy of *length* characters of *s* beginning at *start*.

    See :func:`normalize_range` for the clamping rules.
    """
    start, length = normalize_range(s.length, start, length)
    return from_characters(s.data[start : start + length], length)


def trim(s: ImmutableString) -> ImmutableString:
    """Return a copy of *s* without leading and trailing whitespace."""
    data = s.data
    start = 0
    end = s.length
    while start != end and data[start] in WHITESPACE:
        start += 1
    while end != start and data[end - 1] in WHITESPACE:
        end -= 1
    return from_characters(data[start:end], end - start)
