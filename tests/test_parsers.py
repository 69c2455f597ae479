"""Tests for the value parsers."""

from __future__ import annotations

import pytest

from user_intake.parsers import U32_MAX, parse_string, parse_u32


class TestParseString:
    def test_passthrough(self):
        assert parse_string("John") == "John"

    def test_empty_passthrough(self):
        assert parse_string("") == ""


class TestParseU32:
    @pytest.mark.parametrize(
        "text, expected",
        [("42", 42), ("0", 0), ("+7", 7), ("007", 7), (str(U32_MAX), U32_MAX)],
    )
    def test_accepts_decimal(self, text, expected):
        assert parse_u32(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["abc", "", "-1", "-0", "+", "1_000", "4 2", "3.5", "٣", "0x10"],
    )
    def test_rejects_malformed(self, text):
        with pytest.raises(ValueError, match="invalid unsigned integer"):
            parse_u32(text)

    def test_rejects_overflow(self):
        with pytest.raises(ValueError, match="out of range"):
            parse_u32(str(U32_MAX + 1))
