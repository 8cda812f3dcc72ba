"""Tests for slice_string, normalize_range, and trim."""

from __future__ import annotations

import pytest

from lenstr.domain.extract import normalize_range, slice_string, trim
from lenstr.domain.search import last_index_of
from lenstr.domain.value import from_text


class TestNormalizeRange:
    @pytest.mark.parametrize(
        "total,start,length,expected",
        [
            (10, 0, 10, (0, 10)),
            (10, 2, 3, (2, 3)),
            (10, -3, 2, (7, 2)),
            (10, -10, 1, (0, 1)),
            (10, -11, 4, (0, 4)),
            (10, 4, -1, (4, 6)),
            (10, 4, 100, (4, 6)),
            (10, 10, 5, (10, 0)),
            (10, 15, 2, (10, 0)),
            (0, 0, -1, (0, 0)),
            (0, -5, 3, (0, 0)),
        ],
    )
    def test_clamping(
        self, total: int, start: int, length: int, expected: tuple[int, int]
    ) -> None:
        assert normalize_range(total, start, length) == expected


class TestSliceString:
    def test_identity_slice(self) -> None:
        s = from_text("identity")
        assert slice_string(s, 0, s.length) == s

    def test_middle(self) -> None:
        assert slice_string(from_text("abcdef"), 2, 3).data == b"cde"

    @pytest.mark.parametrize("k", [1, 3, 6])
    def test_negative_start_counts_from_end(self, k: int) -> None:
        s = from_text("abcdef")
        assert slice_string(s, -k, 2) == slice_string(s, s.length - k, 2)

    def test_negative_start_beyond_length_clamps_to_zero(self) -> None:
        assert slice_string(from_text("abc"), -99, 2).data == b"ab"

    def test_negative_length_means_rest(self) -> None:
        assert slice_string(from_text("abcdef"), 2, -1).data == b"cdef"

    def test_overlong_length_means_rest(self) -> None:
        assert slice_string(from_text("abcdef"), 4, 50).data == b"ef"

    def test_start_at_end_is_empty(self) -> None:
        s = from_text("abc")
        assert slice_string(s, 3, 5).length == 0

    def test_start_past_end_is_empty(self) -> None:
        assert slice_string(from_text("abc"), 7, 1).length == 0

    def test_zero_length(self) -> None:
        assert slice_string(from_text("abc"), 1, 0).length == 0

    def test_result_is_terminated_copy(self) -> None:
        s = from_text("abcdef")
        part = slice_string(s, 1, 2)
        assert part.c_str == b"bc\0"

    def test_global_local_sample(self) -> None:
        joined = from_text("My global statically allocated string" "My local statically allocated string")
        assert slice_string(joined, -28, 12).data == b" statically "

    def test_file_extension(self) -> None:
        name = from_text("test.file.name.txt")
        dot = last_index_of(name, from_text("."))
        assert dot == 13
        assert slice_string(name, dot, -1).data == b".txt"


class TestTrim:
    def test_both_sides(self) -> None:
        assert trim(from_text("  hi  ")).data == b"hi"

    def test_only_whitespace(self) -> None:
        assert trim(from_text("   ")).length == 0

    def test_empty(self) -> None:
        assert trim(from_text("")).length == 0

    def test_interior_untouched(self) -> None:
        assert trim(from_text("\t a  b \n")).data == b"a  b"

    def test_all_c_whitespace(self) -> None:
        assert trim(from_text(" \t\n\v\f\rx\r\f\v\n\t ")).data == b"x"

    def test_nothing_to_trim(self) -> None:
        s = from_text("clean")
        assert trim(s) == s

    def test_non_ascii_bytes_are_not_whitespace(self) -> None:
        s = from_text("\u00a0x\u00a0")
        assert trim(s) == s
