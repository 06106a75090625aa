"""Tests for the arithmetic evaluator."""

import pytest

from lifeos.calculator import (
    Calculation, DivisionByZero, ExpressionEvaluator, ParseError,
    compute, detect_operator, evaluate, extract_numbers, format_number, format_quotient,
)


class TestFormatting:

    def test_integral_values_have_no_decimal_point(self):
        assert format_number(15.0) == "15"
        assert format_number(-3.0) == "-3"

    def test_fractions_are_trimmed(self):
        assert format_number(2.5) == "2.5"
        assert format_number(1.41421356) == "1.4142"

    def test_quotient_strips_trailing_zeros(self):
        assert format_quotient(3.0) == "3"
        assert format_quotient(10 / 3) == "3.3333"


class TestOperators:

    def test_keywords_before_symbols(self):
        assert detect_operator("5 plus 3") == "add"
        assert detect_operator("10 divided by 2") == "divide"
        assert detect_operator("2 to the 8") == "power"
        assert detect_operator("17 mod 5") == "modulo"

    def test_symbols(self):
        assert detect_operator("12 * 4") == "multiply"
        assert detect_operator("12 × 4") == "multiply"
        assert detect_operator("9 ÷ 3") == "divide"
        assert detect_operator("7 - 2") == "subtract"

    def test_em_dash_is_not_minus(self):
        assert detect_operator("7 — 2") is None

    def test_extract_numbers(self):
        assert extract_numbers("between 3.5 and 10") == [3.5, 10.0]


class TestEvaluate:

    def test_addition_words(self):
        assert evaluate("10 plus 5") == "10 + 5 = 15"

    def test_multiplication_symbol(self):
        assert evaluate("12 * 4") == "12 × 4 = 48"

    def test_multiplied_by(self):
        assert evaluate("what is 12 multiplied by 4") == "12 × 4 = 48"
        assert detect_operator("multiply 3 and 5") == "multiply"

    def test_divided_by(self):
        assert evaluate("10 divided by 4") == "10 ÷ 4 = 2.5"

    def test_subtraction(self):
        assert evaluate("5 - 8") == "5 - 8 = -3"

    def test_division(self):
        assert evaluate("10 / 4") == "10 ÷ 4 = 2.5"
        assert evaluate("9 / 3") == "9 ÷ 3 = 3"

    def test_power(self):
        assert evaluate("2 ^ 10") == "2 ^ 10 = 1024"

    def test_percent(self):
        result = compute("20 percent of 50")
        assert result.operator == "percent"
        assert result.value == 10
        assert result.rendered == "50% of 20 = 10"

    def test_modulo(self):
        assert evaluate("17 mod 5") == "17 mod 5 = 2"

    def test_assumed_addition(self):
        assert evaluate("5 and 3") == "5 + 3 = 8 (assumed addition)"

    def test_square_root(self):
        assert evaluate("square root of 16") == "√16 = 4"
        assert evaluate("sqrt 2") == "√2 = 1.4142"

    def test_calculation_fields(self):
        result = compute("what is 6 times 7")
        assert isinstance(result, Calculation)
        assert (result.left, result.operator, result.right) == (6, "multiply", 7)
        assert result.result == "42"


class TestErrors:

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZero):
            compute("12 / 0")

    def test_modulo_by_zero(self):
        with pytest.raises(DivisionByZero):
            compute("12 mod 0")

    def test_needs_two_numbers(self):
        with pytest.raises(ParseError) as excinfo:
            compute("what is 5")
        assert excinfo.value.expected == 2
        assert excinfo.value.found == 1

    def test_square_root_needs_a_number(self):
        with pytest.raises(ParseError) as excinfo:
            compute("square root of nothing")
        assert excinfo.value.expected == 1

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            compute("no numbers here")


def test_evaluator_facade():
    evaluator = ExpressionEvaluator()
    assert evaluator.evaluate("3 + 4") == "3 + 4 = 7"
    assert evaluator.compute("3 + 4").value == 7
