"""
Tests for the arithmetic evaluator and number formatting.
"""

import logging

import pytest

from backend.engine import (
    DIVISION_BY_ZERO_TEXT,
    DivisionByZero,
    InvalidNumber,
    evaluate,
    format_number,
    parse_number,
)


class TestEvaluate:
    """Binary operators applied to two numbers."""

    def test_add(self):
        assert evaluate(5, 3, "+") == 8

    def test_subtract_negative_result(self):
        assert evaluate(3, 5, "-") == -2

    def test_multiply(self):
        assert evaluate(-3, 4, "*") == -12

    def test_divide(self):
        assert evaluate(7, 2, "/") == 3.5

    def test_modulo(self):
        assert evaluate(7, 3, "%") == 1

    def test_modulo_sign_follows_dividend(self):
        assert evaluate(-7, 3, "%") == -1
        assert evaluate(7, -3, "%") == 1

    def test_modulo_fractional(self):
        assert evaluate(5.5, 2, "%") == 1.5

    @pytest.mark.parametrize("op", ["/", "%"])
    @pytest.mark.parametrize("left", [0, 6, -2.5])
    def test_zero_divisor_raises(self, left, op):
        with pytest.raises(DivisionByZero):
            evaluate(left, 0, op)

    def test_division_by_zero_display_text(self):
        with pytest.raises(DivisionByZero) as exc_info:
            evaluate(1, 0.0, "/")
        assert exc_info.value.display_text == DIVISION_BY_ZERO_TEXT

    def test_left_to_right_composition(self):
        a, b, c = 4.0, 2.5, 1.25
        assert evaluate(evaluate(a, b, "+"), c, "-") == (a + b) - c

    def test_unknown_operator_returns_right_operand(self, caplog):
        with caplog.at_level(logging.WARNING, logger="backend.engine"):
            assert evaluate(1, 2, "^") == 2
        assert "Unknown operator" in caplog.text


class TestParseNumber:

    def test_integer_text(self):
        assert parse_number("42") == 42.0

    def test_trailing_decimal_point(self):
        assert parse_number("3.") == 3.0

    def test_negative(self):
        assert parse_number("-0.5") == -0.5

    @pytest.mark.parametrize("text", ["Error", "Err: Div by 0", "", "inf", "nan", "-inf"])
    def test_rejects_non_numbers(self, text):
        with pytest.raises(InvalidNumber):
            parse_number(text)


class TestFormatNumber:

    def test_whole_number_has_no_decimal_point(self):
        assert format_number(8.0) == "8"

    def test_trims_trailing_zeros(self):
        assert format_number(2.50) == "2.5"

    def test_rounds_float_noise(self):
        assert format_number(0.1 + 0.2) == "0.3"

    def test_ten_fractional_digits(self):
        assert format_number(1 / 3) == "0.3333333333"

    def test_no_scientific_notation(self):
        assert format_number(1e20) == "100000000000000000000"
        assert format_number(1e-12) == "0"

    def test_negative(self):
        assert format_number(-3.0) == "-3"

    def test_negative_zero_is_zero(self):
        assert format_number(-0.0) == "0"
        assert format_number(-1e-12) == "0"

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_raises(self, value):
        with pytest.raises(InvalidNumber):
            format_number(value)
