"""Comparison and substring search.

Empty needles never match: ``index_of`` and ``last_index_of`` return -1,
``contains`` is False and ``count`` is 0.
"""

from __future__ import annotations

from lenstr.domain.value import ImmutableString


def equals(a: ImmutableString, b: ImmutableString) -> bool:
    """True when *a* and *b* have the same length and the same content."""
    return a.length == b.length and a.data == b.data


def equals_bounded(a: ImmutableString, b: ImmutableString) -> bool:
    """Compare only the first ``b.length`` characters of *a* against *b*.

    Asymmetric: true whenever *a* starts with *b*, so strings of different
    lengths can compare equal. Use :func:`equals` unless byte-for-byte
    parity with that older comparison is required.
    """
    return a.data.startswith(b.data)


def index_of(s: ImmutableString, sub: ImmutableString) -> int:
    """Index of the first occurrence of *sub* in *s*, or -1."""
    if sub.length == 0:
        return -1
    return s.data.find(sub.data)


def last_index_of(s: ImmutableString, sub: ImmutableString) -> int:
    """Index of the last occurrence of *sub* in *s*, or -1."""
    if sub.length == 0:
        return -1
    return s.data.rfind(sub.data)


def contains(s: ImmutableString, sub: ImmutableString) -> bool:
    return index_of(s, sub) != -1


def count(s: ImmutableString, sub: ImmutableString) -> int:
    """Number of non-overlapping occurrences of *sub* in *s*.

    Scans left to right and resumes after each full match, so
    ``count("aaa", "aa") == 1``.
    """
    if sub.length == 0:
        return 0
    data, needle = s.data, sub.data
    total = 0
    position = data.find(needle)
    while position != -1:
        total += 1
        position = data.find(needle, position + sub.length)
    return total
