"""DemoService — the guided walkthrough of every library operation.

Replays a fixed sequence of constructions, slices, searches and
replacements, finishing with a caller-supplied input line. Each step is
reported as ``{label, content, length}`` (string results) or
``{label, value}`` (scalar results).
"""

from __future__ import annotations

from typing import Any

from lenstr.domain import combine, extract, replace, search, value
from lenstr.domain.value import ImmutableString
from lenstr.services.base import BaseService
from lenstr.services.result import ServiceResult
from lenstr.services.telemetry import trace_span, traced

GLOBAL_TEXT = "My global statically allocated string"
LOCAL_TEXT = "My local statically allocated string"
DYNAMIC_TEXT = "My dynamic string"
COUNT_SAMPLE = "test... this is a test. (testtest) This test is simple. tes"
FILE_NAME = "test.file.name.txt"
FORMAT_BUFFER_SIZE = 100


class DemoService(BaseService):
    """Walk through the library, one reported step per operation."""

    def _string_step(self, steps: list[dict[str, Any]], label: str, s: ImmutableString) -> None:
        with trace_span(label) as span:
            if span is not None:
                span.annotate("length", s.length)
            steps.append({"label": label, **self._describe(s)})

    def _read_input(self, text: str) -> ImmutableString:
        """Keep the first line of *text*, bounded like a fixed scan buffer."""
        line = self._encode(text.split("\n", 1)[0])
        return extract.slice_string(line, 0, self._settings.prompt.buffer_size - 1)

    @traced
    def walkthrough(self, input_text: str = "") -> ServiceResult:
        """Run every step; *input_text* feeds the clone/trim steps at the end."""
        steps: list[dict[str, Any]] = []

        def build() -> dict[str, Any]:
            global_str = self._encode(GLOBAL_TEXT)
            local_str = self._encode(LOCAL_TEXT)
            comma = self._encode(", ")
            self._string_step(steps, "global", global_str)
            self._string_step(steps, "local", local_str)

            joined = combine.concat(global_str, local_str)
            self._string_step(steps, "concat", joined)
            self._string_step(steps, "slice(-28, 12)", extract.slice_string(joined, -28, 12))

            dynamic = self._encode(DYNAMIC_TEXT)
            self._string_step(steps, "dynamic", dynamic)
            replaced = dynamic
            for what, to in (("My", "123"), ("string", "789"), (" dynamic ", "456")):
                replaced = replace.replace_first(replaced, self._encode(what), self._encode(to))
                self._string_step(steps, f"replace {what!r} -> {to!r}", replaced)

            sample = self._encode(COUNT_SAMPLE)
            self._string_step(
                steps,
                "replace_all 'test' -> 'example'",
                replace.replace_all(sample, self._encode("test"), self._encode("example")),
            )

            needle = self._encode("string")
            steps.append({"label": "index_of 'string'", "value": search.index_of(dynamic, needle)})
            steps.append({"label": "contains 'string'", "value": search.contains(dynamic, needle)})

            file_name = self._encode(FILE_NAME)
            dot = search.last_index_of(file_name, self._encode("."))
            self._string_step(steps, "extension", extract.slice_string(file_name, dot, -1))

            formatted = value.from_format(
                FORMAT_BUFFER_SIZE, b"%s, %s, %s", global_str, local_str, dynamic
            )
            self._string_step(steps, "format", formatted)
            concatenated = combine.concat_many([global_str, comma, local_str, comma, dynamic])
            self._string_step(steps, "concat_many", concatenated)
            joined_many = combine.join_many(comma, [global_str, local_str, dynamic])
            self._string_step(steps, "join_many", joined_many)
            steps.append({"label": "equals", "value": search.equals(concatenated, joined_many)})

            entered = self._read_input(input_text)
            self._string_step(steps, "input", entered)
            cloned = value.clone(entered)
            self._string_step(steps, "clone", cloned)
            self._string_step(steps, "trim", extract.trim(cloned))
            return {"steps": steps, "count": len(steps)}

        result = self._run("demo", build)
        if not result.ok:
            return result.model_copy(update={"data": {"steps": steps, "count": len(steps)}})
        return result
