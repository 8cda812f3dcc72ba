"""Exception hierarchy for string operations."""

from __future__ import annotations


class StringError(Exception):
    """Base class for lenstr library errors."""


class AllocationError(StringError, MemoryError):
    """A buffer for a new string could not be obtained.

    Raised instead of returning a partially built value. Also a
    ``MemoryError`` so callers with a generic out-of-memory policy keep
    working.
    """

    def __init__(self, requested: int, limit: int | None = None) -> None:
        self.requested = requested
        self.limit = limit
        if limit is None:
            message = f"cannot allocate buffer for {requested} characters"
        else:
            message = f"cannot allocate buffer for {requested} characters (limit {limit})"
        super().__init__(message)
