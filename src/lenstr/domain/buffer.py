"""Scratch buffer allocation for string construction.

Every constructing operation follows the same three steps: ``allocate``
a zero-filled buffer with room for the terminator, ``copy_into`` it at
explicit offsets, then ``seal`` it (see :mod:`lenstr.domain.value`).

An optional allocation limit bounds the content length a single
allocation may request. The limit lives in a ContextVar so nested
``allocation_limit`` blocks restore cleanly and threads stay isolated.
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar

from lenstr.domain.errors import AllocationError

TERMINATOR = b"\0"

_limit: ContextVar[int | None] = ContextVar("_limit", default=None)


def current_limit() -> int | None:
    """Return the active allocation limit, or None when unbounded."""
    return _limit.get()


@contextmanager
def allocation_limit(max_length: int | None) -> Generator[None]:
    """Bound allocations made inside the block to *max_length* characters.

    ``None`` lifts any limit for the duration of the block.
    """
    token = _limit.set(max_length)
    try:
        yield
    finally:
        _limit.reset(token)


def allocate(length: int) -> bytearray:
    """Return a zero-filled buffer holding *length* characters plus terminator.

    Raises:
        AllocationError: the request exceeds the active limit or the
            interpreter cannot provide the memory.
    """
    limit = _limit.get()
    if limit is not None and length > limit:
        raise AllocationError(length, limit)
    try:
        return bytearray(length + len(TERMINATOR))
    except (MemoryError, OverflowError) as exc:
        raise AllocationError(length) from exc


def copy_into(buffer: bytearray, offset: int, source: bytes | bytearray | memoryview) -> int:
    """Copy *source* into *buffer* at *offset*; return the offset past the copy.

    The target range must lie inside *buffer*. The buffer never grows.
    """
    end = offset + len(source)
    memoryview(buffer)[offset:end] = source
    return end
