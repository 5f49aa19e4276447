"""Tests for row parsing and universe size detection"""

import pytest

from src.core import InvalidSize, parse_row, universe_size
from src.core.parser import strip_terminator


class TestParseRow:
    def test_exact_length(self):
        assert parse_row("1010", 4) == [True, False, True, False]

    def test_short_line_padded_with_false(self):
        assert parse_row("101", 4) == [True, False, True, False]

    def test_other_characters_are_false(self):
        """Only '1' counts as related; trailing characters past n are ignored"""
        assert parse_row("10x1extra", 3) == [True, False, False]
        assert parse_row("2y1 ", 4) == [False, False, True, False]

    def test_empty_line(self):
        assert parse_row("", 3) == [False, False, False]

    def test_terminator_is_not_related(self):
        assert parse_row("1\n", 3) == [True, False, False]


class TestUniverseSize:
    def test_length_without_terminator(self):
        assert universe_size("1010\n") == 4
        assert universe_size("1010\r\n") == 4
        assert universe_size("1010") == 4

    def test_empty_first_line(self):
        with pytest.raises(InvalidSize, match="must be positive"):
            universe_size("\n")

    def test_too_long(self):
        with pytest.raises(InvalidSize) as exc_info:
            universe_size("1" * 50 + "\n")
        assert exc_info.value.size == 50
        assert exc_info.value.max_size == 49

    def test_maximum_accepted(self):
        assert universe_size("0" * 49) == 49

    def test_line_length_cap_truncates_before_checking(self):
        assert universe_size("1" * 10, max_size=8, max_line_length=8) == 8


def test_strip_terminator():
    assert strip_terminator("abc\r\n") == "abc"
    assert strip_terminator("abc\n") == "abc"
    assert strip_terminator("abc") == "abc"
    assert strip_terminator("abc\n\n") == "abc\n"
