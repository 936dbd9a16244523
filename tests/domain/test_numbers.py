"""Tests for number formatting and template arithmetic."""

import pytest

from uxr_ds.domain.numbers import add, div, format_number, mod, mul, seq, sub


class TestFormatNumber:
    @pytest.mark.parametrize(
        "n,expected",
        [
            (0, "0"),
            (7, "7"),
            (999, "999"),
            (1000, "1,000"),
            (12345, "12,345"),
            (123456, "123,456"),
            (1234567, "1,234,567"),
            (-1, "-1"),
            (-999, "-999"),
            (-1234, "-1,234"),
            (-1234567, "-1,234,567"),
            (9223372036854775807, "9,223,372,036,854,775,807"),
        ],
    )
    def test_grouping(self, n: int, expected: str) -> None:
        assert format_number(n) == expected

    @pytest.mark.parametrize(
        "n,expected",
        [(1234.5, "1,234"), (999.99, "999"), (-1234.9, "-1,234"), (-0.5, "0")],
    )
    def test_float_truncated(self, n: float, expected: str) -> None:
        assert format_number(n) == expected


class TestArithmetic:
    def test_basic_ops(self) -> None:
        assert add(2, 3) == 5
        assert sub(2, 3) == -1
        assert mul(4, 3) == 12

    @pytest.mark.parametrize(
        "a,b,expected",
        [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (6, 3, 2), (5, 0, 0)],
    )
    def test_div_truncates_toward_zero(self, a: int, b: int, expected: int) -> None:
        assert div(a, b) == expected

    @pytest.mark.parametrize(
        "a,b,expected",
        [(7, 3, 1), (-7, 3, -1), (7, -3, 1), (6, 3, 0), (5, 0, 0)],
    )
    def test_mod_follows_dividend_sign(self, a: int, b: int, expected: int) -> None:
        assert mod(a, b) == expected

    def test_seq_inclusive(self) -> None:
        assert seq(1, 5) == [1, 2, 3, 4, 5]
        assert seq(3, 3) == [3]

    def test_seq_empty_when_reversed(self) -> None:
        assert seq(5, 1) == []
