# ABOUTME: Tests for lenient leading-float parsing
# ABOUTME: Verifies prefix extraction, exponents, signs and NaN for non-numeric tokens

import math

import pytest

from pulselog.numeric import parse_leading_float


class TestParseLeadingFloat:
    """Test suite for leading-prefix numeric coercion."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("72", 72.0),
            ("72bpm", 72.0),
            ("85.3", 85.3),
            ("-10", -10.0),
            ("+15", 15.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e2", 100.0),
            ("1E+2x", 100.0),
            ("25e-1", 2.5),
            ("1.2.3", 1.2),
            ("007", 7.0),
            ("  42", 42.0),
        ],
    )
    def test_numeric_prefix(self, token, expected):
        assert parse_leading_float(token) == expected

    def test_dangling_exponent_ignored(self):
        """Test that an 'e' without digits is not part of the number."""
        assert parse_leading_float("1e") == 1.0
        assert parse_leading_float("1e+") == 1.0

    @pytest.mark.parametrize("token", ["error", "N/A", "", "-", ".", "bpm72", "e5", "nan", "inf"])
    def test_no_numeric_prefix_is_nan(self, token):
        assert math.isnan(parse_leading_float(token))

    @pytest.mark.parametrize("token", ["٧٢", "７２", "१२०", "٧٢bpm"])
    def test_non_ascii_digits_are_nan(self, token):
        """Test that only ASCII digits count as numeric."""
        assert math.isnan(parse_leading_float(token))

    def test_non_ascii_digit_ends_prefix(self):
        assert parse_leading_float("72٣") == 72.0

    @pytest.mark.parametrize("space", ["\ufeff", "\u00a0", "\u2003", "\u2028", "\u3000", "\v"])
    def test_unicode_whitespace_skipped(self, space):
        assert parse_leading_float(f"{space}72") == 72.0

    @pytest.mark.parametrize("control", ["\x1c", "\x1f", "\x85"])
    def test_separator_controls_are_not_whitespace(self, control):
        assert math.isnan(parse_leading_float(f"{control}72"))

    def test_infinity_literal(self):
        assert parse_leading_float("Infinity") == math.inf
        assert parse_leading_float("-Infinitybpm") == -math.inf

    def test_overflow_is_infinite(self):
        assert parse_leading_float("1e999") == math.inf
