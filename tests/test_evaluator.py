"""Tests for numeric evaluation."""

import math

import pytest

from latex_solver import (
    Const, Context, DivisionByZeroError, EvalErrorKind, EvaluationError,
    Evaluator, Function, NegativeSqrtError, UndefinedVariableError,
    UnknownFunctionError, evaluate, parse,
)


def _eval(text, **bindings):
    return Evaluator(Context(bindings)).evaluate(parse(text))


class TestArithmetic:
    @pytest.mark.parametrize("text,expected", [
        ("2 + 3 * 4", 14.0),
        ("(2+3)*4", 20.0),
        ("10 - 3 - 2", 5.0),
        ("8 / 2", 4.0),
        ("7 \\div 2", 3.5),
        ("3 \\times 4", 12.0),
        ("-5 + 2", -3.0),
        ("2^10", 1024.0),
        ("2^3^2", 64.0),
        ("\\sqrt{16}", 4.0),
        ("\\sqrt{9} + 3", 6.0),
        ("2 * \\sqrt{25}", 10.0),
        ("0.1 + 0.2", 0.3),
    ])
    def test_values(self, text, expected):
        assert _eval(text) == pytest.approx(expected)

    def test_module_function(self):
        assert evaluate(parse("2 + 3 * 4")) == 14.0


class TestVariables:
    def test_lookup(self):
        assert _eval("x * y + 1", x=2, y=3) == pytest.approx(7.0)

    def test_plain_dict_context(self):
        assert Evaluator({"r": 2.0}).evaluate(parse("r^2")) == pytest.approx(4.0)

    def test_undefined_variable(self):
        with pytest.raises(UndefinedVariableError) as exc:
            _eval("x + 1")
        assert exc.value.kind == EvalErrorKind.UNDEFINED_VARIABLE
        assert exc.value.name == "x"

    def test_context_not_mutated(self):
        ctx = Context({"x": 1.0})
        Evaluator(ctx).evaluate(parse("x + 1"))
        assert ctx.get_all() == {"x": 1.0}


class TestErrors:
    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            _eval("5/0")

    def test_division_by_near_zero(self):
        with pytest.raises(DivisionByZeroError):
            _eval("1 / 0.00000000001")

    def test_small_but_valid_divisor(self):
        assert _eval("1 / 0.001") == pytest.approx(1000.0)

    def test_negative_sqrt(self):
        with pytest.raises(NegativeSqrtError) as exc:
            _eval("\\sqrt{-4}")
        assert exc.value.kind == EvalErrorKind.NEGATIVE_SQRT

    def test_unknown_function(self):
        with pytest.raises(UnknownFunctionError) as exc:
            _eval("\\sin{0}")
        assert exc.value.name == "sin"

    def test_all_are_evaluation_errors(self):
        with pytest.raises(EvaluationError):
            Evaluator().evaluate(Function("log", Const(10)))


class TestPower:
    def test_negative_base_fractional_exponent_is_nan(self):
        assert math.isnan(_eval("(0 - 8)^0.5"))

    def test_overflow_is_inf(self):
        assert math.isinf(_eval("10^400"))

    def test_zero_to_negative_power_is_inf(self):
        assert math.isinf(_eval("0^(0-1)"))

    def test_result_is_builtin_float(self):
        assert type(_eval("2^0.5")) is float
