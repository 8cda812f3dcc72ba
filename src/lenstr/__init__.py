"""lenstr — immutable, explicitly length-tracked byte strings."""

from __future__ import annotations

from lenstr.domain.buffer import allocation_limit
from lenstr.domain.combine import concat, concat_many, join_many
from lenstr.domain.errors import AllocationError, StringError
from lenstr.domain.extract import slice_string, trim
from lenstr.domain.replace import replace_all, replace_first
from lenstr.domain.search import (
    contains,
    count,
    equals,
    equals_bounded,
    index_of,
    last_index_of,
)
from lenstr.domain.value import (
    ImmutableString,
    clone,
    from_characters,
    from_format,
    from_null_terminated,
    from_text,
)

__version__ = "0.1.0"

__all__ = [
    "AllocationError",
    "ImmutableString",
    "StringError",
    "__version__",
    "allocation_limit",
    "clone",
    "concat",
    "concat_many",
    "contains",
    "count",
    "equals",
    "equals_bounded",
    "from_characters",
    "from_format",
    "from_null_terminated",
    "from_text",
    "index_of",
    "join_many",
    "last_index_of",
    "replace_all",
    "replace_first",
    "slice_string",
    "trim",
]
