"""StringService — every library operation behind the ServiceResult contract.

Inputs arrive as text (from the CLI) and are encoded with the configured
codec before reaching the byte-level operations.
"""

from __future__ import annotations

from collections.abc import Sequence

from lenstr.domain import combine, extract, replace, search, value
from lenstr.services.base import BaseService
from lenstr.services.result import ServiceResult
from lenstr.services.telemetry import traced


class StringService(BaseService):
    """Construction, combination, extraction, search and replacement."""

    # --- Construction ---

    @traced
    def new(self, text: str, *, nul_terminated: bool = False) -> ServiceResult:
        """Build a string from *text*; optionally stop at the first NUL."""

        def build() -> dict[str, object]:
            if nul_terminated:
                raw = text.encode(self._settings.output.encoding)
                return self._describe(value.from_null_terminated(raw))
            return self._describe(self._encode(text))

        return self._run("new", build)

    @traced
    def format(self, fmt: str, args: Sequence[str], *, size: int | None = None) -> ServiceResult:
        """Render *fmt* with string *args* into a bounded buffer."""
        max_size = size if size is not None else self._settings.format.buffer_size

        def build() -> dict[str, object]:
            encoded = tuple(self._encode(arg) for arg in args)
            raw_fmt = fmt.encode(self._settings.output.encoding)
            result = value.from_format(max_size, raw_fmt, *encoded)
            return {**self._describe(result), "max_size": max_size}

        try:
            return self._run("format", build)
        except (TypeError, ValueError) as exc:
            return ServiceResult.failure("format", "INVALID_FORMAT", str(exc), format=fmt)

    @traced
    def clone(self, text: str) -> ServiceResult:
        return self._run("clone", lambda: self._describe(value.clone(self._encode(text))))

    # --- Combination ---

    @traced
    def concat(self, texts: Sequence[str]) -> ServiceResult:
        def build() -> dict[str, object]:
            parts = [self._encode(text) for text in texts]
            if len(parts) == 2:
                return self._describe(combine.concat(parts[0], parts[1]))
            return self._describe(combine.concat_many(parts))

        return self._run("concat", build)

    @traced
    def join(self, separator: str, texts: Sequence[str]) -> ServiceResult:
        def build() -> dict[str, object]:
            parts = [self._encode(text) for text in texts]
            return self._describe(combine.join_many(self._encode(separator), parts))

        return self._run("join", build)

    # --- Extraction ---

    @traced
    def slice(self, text: str, start: int = 0, length: int = -1) -> ServiceResult:
        return self._run(
            "slice",
            lambda: self._describe(extract.slice_string(self._encode(text), start, length)),
        )

    @traced
    def trim(self, text: str) -> ServiceResult:
        return self._run("trim", lambda: self._describe(extract.trim(self._encode(text))))

    # --- Search & comparison ---

    @traced
    def index_of(self, text: str, sub: str) -> ServiceResult:
        return self._run(
            "index_of",
            lambda: {"value": search.index_of(self._encode(text), self._encode(sub))},
        )

    @traced
    def last_index_of(self, text: str, sub: str) -> ServiceResult:
        return self._run(
            "last_index_of",
            lambda: {"value": search.last_index_of(self._encode(text), self._encode(sub))},
        )

    @traced
    def contains(self, text: str, sub: str) -> ServiceResult:
        return self._run(
            "contains",
            lambda: {"value": search.contains(self._encode(text), self._encode(sub))},
        )

    @traced
    def count(self, text: str, sub: str) -> ServiceResult:
        return self._run(
            "count",
            lambda: {"value": search.count(self._encode(text), self._encode(sub))},
        )

    @traced
    def equals(self, first: str, second: str, *, bounded: bool = False) -> ServiceResult:
        """Compare two strings; *bounded* uses the prefix-only comparison."""
        compare = search.equals_bounded if bounded else search.equals

        def build() -> dict[str, object]:
            equal = compare(self._encode(first), self._encode(second))
            return {"value": equal, "bounded": bounded}

        return self._run("equals", build)

    # --- Replacement ---

    @traced
    def replace(self, text: str, what: str, to: str, *, replace_all: bool = False) -> ServiceResult:
        """Replace the first (or every) occurrence of *what* with *to*."""
        op = "replace_all" if replace_all else "replace"
        apply = replace.replace_all if replace_all else replace.replace_first

        def build() -> dict[str, object]:
            source = self._encode(text)
            pattern = self._encode(what)
            result = apply(source, pattern, self._encode(to))
            occurrences = search.count(source, pattern)
            replaced = occurrences if replace_all else min(occurrences, 1)
            return {**self._describe(result), "replaced": replaced}

        return self._run(op, build)
