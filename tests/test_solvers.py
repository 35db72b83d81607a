"""Tests for coefficient collection and the linear/quadratic solvers."""

import pytest

from latex_solver import (
    CoefficientCollector, Coefficients, Context, DivisionByZeroError,
    LinearSolver, NegativeSqrtError, QuadraticSolver, SolverError, SolverErrorKind,
    UndefinedVariableError, find_unknowns,
    parse, parse_equation,
)
from latex_solver.solvers import solve_equation


def _linear(text, ctx=None):
    return LinearSolver().solve(parse_equation(text), ctx)


def _quadratic(text, ctx=None):
    return QuadraticSolver().solve(parse_equation(text), ctx)


def _collect(text, variable="x", ctx=None):
    return CoefficientCollector(variable, ctx).collect(parse(text))


# ---------------------------------------------------------------------------
# Coefficient collection
# ---------------------------------------------------------------------------

class TestCollector:
    @pytest.mark.parametrize("text,expected", [
        ("x", (0, 1, 0)),
        ("7", (0, 0, 7)),
        ("2*x + 3", (0, 2, 3)),
        ("x*2 - 3", (0, 2, -3)),
        ("x / 4", (0, 0.25, 0)),
        ("(x + 2) / 2", (0, 0.5, 1)),
        ("x^2", (1, 0, 0)),
        ("3*x^2 - x + 1", (3, -1, 1)),
        ("x * x", (1, 0, 0)),
        ("(x + 1) * (x - 1)", (1, 0, -1)),
        ("(x + 1)^2", (1, 2, 1)),
        ("x^1", (0, 1, 0)),
        ("x^0", (0, 0, 1)),
        ("-x", (0, -1, 0)),
        ("\\sqrt{16} * x", (0, 4, 0)),
        ("2^3 * x", (0, 8, 0)),
    ])
    def test_coefficients(self, text, expected):
        c = _collect(text)
        assert (c.quadratic, c.linear, c.constant) == pytest.approx(expected)

    def test_projections(self):
        collector = CoefficientCollector("x")
        expr = parse("2*x^2 + 3*x + 4")
        assert collector.collect_quadratic(expr) == pytest.approx(2.0)
        assert collector.collect_linear(expr) == pytest.approx(3.0)
        assert collector.collect_constant(expr) == pytest.approx(4.0)

    def test_known_symbols_are_constants(self):
        c = _collect("a*x + b", ctx=Context({"a": 3, "b": -2}))
        assert (c.linear, c.constant) == pytest.approx((3.0, -2.0))

    def test_degree(self):
        assert Coefficients(1, 0, 0).degree == 2
        assert Coefficients(0, 2, 5).degree == 1
        assert Coefficients(0, 0, 5).degree == 0

    @pytest.mark.parametrize("text,fragment", [
        ("x^3", "exponent 3"),
        ("x^2 * x", "above degree 2"),
        ("2^x", "in exponent"),
        ("1 / x", "division by expression"),
        ("\\sqrt{x}", "inside function sqrt"),
    ])
    def test_non_polynomial_structure(self, text, fragment):
        with pytest.raises(SolverError) as exc:
            _collect(text)
        assert exc.value.kind == SolverErrorKind.NON_LINEAR
        assert fragment in exc.value.reason

    def test_division_by_zero_constant(self):
        with pytest.raises(SolverError) as exc:
            _collect("x / (2 - 2)")
        assert exc.value.kind == SolverErrorKind.DIVISION_BY_ZERO_IN_COEFFICIENT

    @pytest.mark.parametrize("text", [
        "x / (2 - 2) = 1",
        "x * (1 / 0) = 1",
        "x + 1 / 0 = 3",
    ])
    def test_zero_divisor_anywhere_is_a_solver_error(self, text):
        with pytest.raises(SolverError) as exc:
            _linear(text)
        assert exc.value.kind == SolverErrorKind.DIVISION_BY_ZERO_IN_COEFFICIENT
        assert not isinstance(exc.value, DivisionByZeroError)

    def test_undefined_constant_still_propagates(self):
        with pytest.raises(UndefinedVariableError):
            _collect("x + q")

    def test_negative_sqrt_still_propagates(self):
        with pytest.raises(NegativeSqrtError):
            _collect("x + \\sqrt{0 - 4}")


class TestUnknowns:
    def test_single(self):
        assert find_unknowns(parse_equation("x + 5 = 10")) == ["x"]

    def test_bound_symbols_excluded(self):
        eq = parse_equation("a * x + b = y")
        assert find_unknowns(eq, Context({"a": 1, "b": 2})) == ["x", "y"]

    def test_none(self):
        with pytest.raises(SolverError) as exc:
            _linear("2 + 3 = 5")
        assert exc.value.kind == SolverErrorKind.NO_UNKNOWN_VARIABLE

    def test_multiple(self):
        with pytest.raises(SolverError) as exc:
            _linear("x + y = 10")
        assert exc.value.kind == SolverErrorKind.MULTIPLE_UNKNOWN_VARIABLES
        assert exc.value.variables == ["x", "y"]
        assert "x, y" in str(exc.value)

    def test_context_resolves_ambiguity(self):
        assert _linear("x + y = 10", Context({"y": 4})) == pytest.approx(6.0)


# ---------------------------------------------------------------------------
# Linear solver
# ---------------------------------------------------------------------------

class TestLinearSolver:
    @pytest.mark.parametrize("text,expected", [
        ("x + 5 = 10", 5.0),
        ("2*x - 3 = 7", 5.0),
        ("2 \\times x = 10", 5.0),
        ("2 \\times x - 3 = 7", 5.0),
        ("10 = x + 5", 5.0),
        ("x \\div 2 = 5", 10.0),
        ("x + 10 = 5", -5.0),
        ("3*x + 2 = x - 4", -3.0),
        ("(x + 1) / 2 = 3", 5.0),
        ("-x = 4", -4.0),
        ("0.5 * x = 0.25", 0.5),
        ("x^1 + 1 = 3", 2.0),
    ])
    def test_solutions(self, text, expected):
        assert _linear(text) == pytest.approx(expected)

    def test_zero_solution_is_positive_zero(self):
        assert str(_linear("2 * x = 0")) == "0.0"

    def test_with_context(self):
        assert _linear("a*x = 10", Context({"a": 2})) == pytest.approx(5.0)

    def test_always_true(self):
        with pytest.raises(SolverError) as exc:
            _linear("x + 1 = x + 1")
        assert exc.value.kind == SolverErrorKind.ALWAYS_TRUE

    def test_no_solution(self):
        with pytest.raises(SolverError) as exc:
            _linear("x + 1 = x + 2")
        assert exc.value.kind == SolverErrorKind.NO_SOLUTION

    def test_quadratic_rejected(self):
        with pytest.raises(SolverError) as exc:
            _linear("x^2 = 4")
        assert exc.value.kind == SolverErrorKind.NON_LINEAR

    def test_cancelled_quadratic_is_linear(self):
        assert _linear("x^2 + x = x^2 + 3") == pytest.approx(3.0)

    def test_equation_not_mutated(self):
        eq = parse_equation("2*x + 1 = 5")
        before = str(eq)
        _linear("2*x + 1 = 5")
        LinearSolver().solve(eq)
        assert str(eq) == before


# ---------------------------------------------------------------------------
# Quadratic solver
# ---------------------------------------------------------------------------

class TestQuadraticSolver:
    def test_two_roots_larger_first(self):
        assert _quadratic("x^2 - 5*x + 6 = 0") == pytest.approx([3.0, 2.0])

    def test_negative_leading_coefficient_order(self):
        # (-b + sqrt(d)) / 2a comes first even when it is the smaller root
        assert _quadratic("0 - x^2 + 5*x - 6 = 0") == pytest.approx([2.0, 3.0])

    def test_double_root(self):
        assert _quadratic("x^2 - 4*x + 4 = 0") == pytest.approx([2.0])

    def test_no_real_solution(self):
        with pytest.raises(SolverError) as exc:
            _quadratic("x^2 + 1 = 0")
        assert exc.value.kind == SolverErrorKind.NO_REAL_SOLUTION

    def test_not_quadratic(self):
        with pytest.raises(SolverError) as exc:
            _quadratic("2*x + 1 = 0")
        assert exc.value.kind == SolverErrorKind.NOT_QUADRATIC

    def test_x_times_x(self):
        assert _quadratic("x * x = 9") == pytest.approx([3.0, -3.0])

    def test_product_of_binomials(self):
        assert _quadratic("(x - 1) * (x + 4) = 0") == pytest.approx([1.0, -4.0])

    def test_terms_on_both_sides(self):
        assert _quadratic("2*x^2 = x + 1") == pytest.approx([1.0, -0.5])

    def test_with_context(self):
        assert _quadratic("k*x^2 = 8", Context({"k": 2})) == pytest.approx([2.0, -2.0])

    def test_cubic_rejected(self):
        with pytest.raises(SolverError) as exc:
            _quadratic("x^3 = 8")
        assert exc.value.kind == SolverErrorKind.NON_LINEAR

    def test_variable_in_function_rejected(self):
        with pytest.raises(SolverError) as exc:
            _quadratic("\\sqrt{x} + x^2 = 1")
        assert exc.value.kind == SolverErrorKind.NON_LINEAR


class TestDispatch:
    def test_linear_dispatch(self):
        solution = solve_equation(parse_equation("x + 5 = 10"))
        assert solution.degree == 1
        assert solution.roots == pytest.approx([5.0])

    def test_quadratic_dispatch(self):
        solution = solve_equation(parse_equation("y^2 = 4"))
        assert solution.variable == "y"
        assert solution.degree == 2
        assert solution.roots == pytest.approx([2.0, -2.0])

    def test_solution_str(self):
        assert str(solve_equation(parse_equation("x = 3"))) == "x = 3"
