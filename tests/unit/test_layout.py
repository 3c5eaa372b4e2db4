"""Tests for character-count padding helpers."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dragonsay.layout import pad_center, pad_left

pytestmark = pytest.mark.unit


class TestPadCenter:
    def test_even_split(self) -> None:
        assert pad_center("ab", 6) == "  ab  "

    def test_odd_split_favors_right(self) -> None:
        assert pad_center("ab", 5) == " ab  "

    def test_empty_text(self) -> None:
        assert pad_center("", 60) == " " * 60

    def test_wider_text_is_not_truncated(self) -> None:
        assert pad_center("abcdef", 3) == "abcdef"

    def test_full_width_glyphs_count_as_one(self) -> None:
        assert pad_center("ラーメン", 8) == "  ラーメン  "

    @given(st.text(max_size=30), st.integers(min_value=0, max_value=80))
    def test_result_width_and_content(self, text: str, width: int) -> None:
        result = pad_center(text, width)
        assert len(result) == max(width, len(text))

        left = (len(result) - len(text)) // 2
        right = len(result) - len(text) - left
        assert result[left : left + len(text)] == text
        assert result[:left] == " " * left
        assert result[left + len(text) :] == " " * right
        assert right - left in (0, 1)


class TestPadLeft:
    def test_fills_on_the_right(self) -> None:
        assert pad_left("ab", 5) == "ab   "

    def test_wider_text_is_not_truncated(self) -> None:
        assert pad_left("abcdef", 3) == "abcdef"

    @given(st.text(max_size=30), st.integers(min_value=0, max_value=80))
    def test_prefix_preserved(self, text: str, width: int) -> None:
        result = pad_left(text, width)
        assert result.startswith(text)
        assert len(result) == max(width, len(text))
