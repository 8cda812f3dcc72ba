"""ImmutableString — the length-tracked string value and its constructors.

The value pairs a read-only, NUL-terminated byte buffer with an explicit
length. The terminator exists only for consumers that expect C strings;
it is never part of the content and never counted in ``length``.

INVARIANT: ``len(buffer) == length + 1`` and ``buffer[length] == 0``.
Every derived string is a fresh allocation sharing nothing with its inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

from lenstr.domain.buffer import TERMINATOR, allocate, copy_into
from lenstr.domain.errors import AllocationError

DEFAULT_ENCODING = "utf-8"

BytesLike = bytes | bytearray | memoryview


@dataclass(frozen=True, eq=False)
class ImmutableString:
    """An immutable byte string with an explicitly tracked length.

    Build instances with the module constructors (:func:`from_characters`,
    :func:`from_text`, ...) rather than directly; direct construction is
    only accepted when the buffer already satisfies the terminator
    invariant.
    """

    buffer: bytes = field(repr=False)
    length: int

    def __post_init__(self) -> None:
        if not isinstance(self.buffer, (bytes, bytearray, memoryview)):
            msg = f"buffer must be bytes-like, not {type(self.buffer).__name__}"
            raise TypeError(msg)
        # Detach from any caller-owned mutable buffer.
        object.__setattr__(self, "buffer", bytes(self.buffer))
        if self.length < 0 or len(self.buffer) != self.length + len(TERMINATOR):
            msg = f"buffer of {len(self.buffer)} bytes cannot hold length {self.length}"
            raise ValueError(msg)
        if self.buffer[self.length :] != TERMINATOR:
            raise ValueError("buffer is not NUL-terminated at its length")

    @cached_property
    def data(self) -> bytes:
        """The logical content, without terminator (sliced once, then cached)."""
        return self.buffer[: self.length]

    @property
    def c_str(self) -> bytes:
        """The NUL-terminated buffer, for C-string consumers."""
        return self.buffer

    def decode(self, encoding: str = DEFAULT_ENCODING, errors: str = "strict") -> str:
        return self.data.decode(encoding, errors)

    def __len__(self) -> int:
        return self.length

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.decode(errors="backslashreplace")

    def __repr__(self) -> str:
        return f"ImmutableString({self.data!r}, length={self.length})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImmutableString):
            return NotImplemented
        from lenstr.domain.search import equals

        return equals(self, other)

    def __hash__(self) -> int:
        return hash(self.data)

    def __add__(self, other: object) -> ImmutableString:
        if not isinstance(other, ImmutableString):
            return NotImplemented
        from lenstr.domain.combine import concat

        return concat(self, other)


def seal(buffer: bytearray, length: int) -> ImmutableString:
    """Terminate a filled scratch *buffer* and freeze it into a value."""
    buffer[length] = 0
    try:
        frozen = bytes(buffer)
    except MemoryError as exc:
        raise AllocationError(length) from exc
    return ImmutableString(frozen, length)


def from_characters(chars: BytesLike, length: int) -> ImmutableString:
    """Copy the first *length* bytes of *chars* into a new string.

    Raises:
        ValueError: *length* is negative or larger than *chars*.
        AllocationError: no buffer could be obtained.
    """
    view = memoryview(chars).cast("B")
    if length < 0 or length > len(view):
        msg = f"cannot copy {length} characters from a {len(view)}-byte source"
        raise ValueError(msg)
    buffer = allocate(length)
    copy_into(buffer, 0, view[:length])
    return seal(buffer, length)


def from_null_terminated(chars: BytesLike) -> ImmutableString:
    """Build a string from *chars* up to (not including) the first NUL byte.

    Without any NUL the whole input is taken.
    """
    raw = bytes(chars)
    end = raw.find(TERMINATOR)
    return from_characters(raw, len(raw) if end == -1 else end)


def from_text(text: str, encoding: str = DEFAULT_ENCODING) -> ImmutableString:
    """Encode *text* and build a string from the resulting bytes."""
    raw = text.encode(encoding)
    return from_characters(raw, len(raw))


def from_format(max_size: int, fmt: str | bytes, *args: Any) -> ImmutableString:
    """Render printf-style *fmt* with *args*, keeping at most ``max_size - 1`` bytes.

    Like ``snprintf`` into a buffer of *max_size*: overflow is truncated
    silently and the resulting length is what was actually kept.
    ``ImmutableString`` arguments render through ``__bytes__`` for a bytes
    format and ``__str__`` for a text format.
    """
    if isinstance(fmt, str):
        rendered = (fmt % args).encode(DEFAULT_ENCODING)
    else:
        rendered = fmt % args
    kept = min(len(rendered), max(max_size - 1, 0))
    return from_characters(rendered, kept)


def clone(s: ImmutableString) -> ImmutableString:
    """Return an independent copy of *s*."""
    return from_characters(s.buffer, s.length)
