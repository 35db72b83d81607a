"""
Univariate linear and quadratic equation solvers.

Both solvers rest on coefficient collection: a structural walk that
extracts the ``v^2``, ``v^1`` and constant coefficients of one variable
from an arbitrary expression, evaluating fully-constant subtrees directly.
Anything that is not a polynomial of degree <= 2 in ``v`` is rejected.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

from .config import DEFAULT_CONFIG, EngineConfig
from .errors import DivisionByZeroError, SolverError, SolverErrorKind
from .evaluator import ContextLike, Evaluator, as_context
from .expr import (
    BinaryOp, BinaryOperator, Equation, Expression, Function, Symbol, free_symbols,
)

logger = logging.getLogger(__name__)


# ============================================================================
# COEFFICIENT COLLECTION
# ============================================================================

@dataclass(frozen=True)
class Coefficients:
    """``quadratic * v^2 + linear * v + constant``"""
    quadratic: float = 0.0
    linear: float = 0.0
    constant: float = 0.0

    def __add__(self, other: 'Coefficients') -> 'Coefficients':
        return Coefficients(self.quadratic + other.quadratic,
                            self.linear + other.linear,
                            self.constant + other.constant)

    def __sub__(self, other: 'Coefficients') -> 'Coefficients':
        return Coefficients(self.quadratic - other.quadratic,
                            self.linear - other.linear,
                            self.constant - other.constant)

    def scale(self, factor: float) -> 'Coefficients':
        return Coefficients(self.quadratic * factor,
                            self.linear * factor,
                            self.constant * factor)

    @property
    def degree(self) -> int:
        if self.quadratic != 0.0:
            return 2
        if self.linear != 0.0:
            return 1
        return 0


def find_unknowns(equation: Equation, context: ContextLike = None) -> List[str]:
    """Symbols on either side that the context does not bind, sorted."""
    ctx = as_context(context)
    names = free_symbols(equation.left) | free_symbols(equation.right)
    return sorted(name for name in names if not ctx.has(name))


def unknown_variable(equation: Equation, context: ContextLike = None) -> str:
    unknowns = find_unknowns(equation, context)
    if not unknowns:
        raise SolverError(SolverErrorKind.NO_UNKNOWN_VARIABLE)
    if len(unknowns) > 1:
        raise SolverError(SolverErrorKind.MULTIPLE_UNKNOWN_VARIABLES, unknowns)
    return unknowns[0]


class CoefficientCollector:
    """Collect the polynomial coefficients of ``variable`` from an expression."""

    def __init__(self, variable: str, context: ContextLike = None,
                 config: Optional[EngineConfig] = None):
        self.variable = variable
        self.config = config or DEFAULT_CONFIG
        self.evaluator = Evaluator(context, self.config)

    def depends(self, expr: Expression) -> bool:
        return self.variable in free_symbols(expr)

    def collect(self, expr: Expression) -> Coefficients:
        if not self.depends(expr):
            try:
                return Coefficients(constant=self.evaluator.evaluate(expr))
            except DivisionByZeroError as err:
                raise SolverError(SolverErrorKind.DIVISION_BY_ZERO_IN_COEFFICIENT) from err

        if isinstance(expr, Symbol):
            return Coefficients(linear=1.0)

        if isinstance(expr, Function):
            raise SolverError(SolverErrorKind.NON_LINEAR,
                              reason=f"variable inside function {expr.name}")

        if isinstance(expr, BinaryOp):
            if expr.op == BinaryOperator.ADD:
                return self.collect(expr.left) + self.collect(expr.right)
            if expr.op == BinaryOperator.SUB:
                return self.collect(expr.left) - self.collect(expr.right)
            if expr.op == BinaryOperator.MUL:
                return self._multiply(self.collect(expr.left), self.collect(expr.right))
            if expr.op == BinaryOperator.DIV:
                return self._divide(expr)
            if expr.op == BinaryOperator.POW:
                return self._power(expr)

        raise TypeError(f"Invalid expression node: {expr!r}")

    def collect_quadratic(self, expr: Expression) -> float:
        return self.collect(expr).quadratic

    def collect_linear(self, expr: Expression) -> float:
        return self.collect(expr).linear

    def collect_constant(self, expr: Expression) -> float:
        return self.collect(expr).constant

    def _multiply(self, left: Coefficients, right: Coefficients) -> Coefficients:
        cubic = left.quadratic * right.linear + left.linear * right.quadratic
        quartic = left.quadratic * right.quadratic
        if cubic != 0.0 or quartic != 0.0:
            raise SolverError(SolverErrorKind.NON_LINEAR,
                              reason=f"product raises {self.variable} above degree 2")
        return Coefficients(
            quadratic=(left.quadratic * right.constant
                       + left.linear * right.linear
                       + left.constant * right.quadratic),
            linear=left.linear * right.constant + left.constant * right.linear,
            constant=left.constant * right.constant,
        )

    def _divide(self, expr: BinaryOp) -> Coefficients:
        if self.depends(expr.right):
            raise SolverError(SolverErrorKind.NON_LINEAR,
                              reason=f"division by expression containing {self.variable}")
        divisor = self.evaluator.evaluate(expr.right)
        if abs(divisor) < self.config.epsilon:
            raise SolverError(SolverErrorKind.DIVISION_BY_ZERO_IN_COEFFICIENT)
        return self.collect(expr.left).scale(1.0 / divisor)

    def _power(self, expr: BinaryOp) -> Coefficients:
        if self.depends(expr.right):
            raise SolverError(SolverErrorKind.NON_LINEAR,
                              reason=f"{self.variable} in exponent")
        exponent = self.evaluator.evaluate(expr.right)
        base = self.collect(expr.left)

        if exponent == 0.0:
            return Coefficients(constant=1.0)
        if exponent == 1.0:
            return base
        if exponent == 2.0:
            return self._multiply(base, base)
        raise SolverError(SolverErrorKind.NON_LINEAR,
                          reason=f"exponent {exponent:g} on {self.variable} (must be 1 or 2)")


def collect_equation(equation: Equation, variable: str, context: ContextLike = None,
                     config: Optional[EngineConfig] = None) -> Coefficients:
    """Coefficients of ``left - right = 0``."""
    collector = CoefficientCollector(variable, context, config)
    left = collector.collect(equation.left)
    right = collector.collect(equation.right)
    coefficients = left - right
    logger.debug(f"Collected {variable}: left={left} right={right} combined={coefficients}")
    return coefficients


# ============================================================================
# SOLVERS
# ============================================================================

@dataclass(frozen=True)
class Solution:
    variable: str
    roots: List[float]
    degree: int

    def __str__(self):
        if not self.roots:
            return f"{self.variable}: no solution"
        return ", ".join(f"{self.variable} = {root:g}" for root in self.roots)


class LinearSolver:
    """Solve a*x + b = 0."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def solve(self, equation: Equation, context: ContextLike = None) -> float:
        ctx = as_context(context)
        variable = unknown_variable(equation, ctx)
        coefficients = collect_equation(equation, variable, ctx, self.config)
        return self.solve_coefficients(coefficients)

    def solve_coefficients(self, coefficients: Coefficients) -> float:
        if coefficients.quadratic != 0.0:
            raise SolverError(SolverErrorKind.NON_LINEAR,
                              reason="quadratic term present, use quadratic solver")

        a, b = coefficients.linear, coefficients.constant
        if a == 0.0:
            if b == 0.0:
                raise SolverError(SolverErrorKind.ALWAYS_TRUE)
            raise SolverError(SolverErrorKind.NO_SOLUTION)

        # adding 0.0 turns -0.0 into 0.0
        return -b / a + 0.0


class QuadraticSolver:
    """Solve a*x^2 + b*x + c = 0 over the reals."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def solve(self, equation: Equation, context: ContextLike = None) -> List[float]:
        ctx = as_context(context)
        variable = unknown_variable(equation, ctx)
        coefficients = collect_equation(equation, variable, ctx, self.config)
        return self.solve_coefficients(coefficients)

    def solve_coefficients(self, coefficients: Coefficients) -> List[float]:
        a = coefficients.quadratic
        b = coefficients.linear
        c = coefficients.constant

        if a == 0.0:
            raise SolverError(SolverErrorKind.NOT_QUADRATIC)

        disc = b * b - 4 * a * c
        logger.debug(f"Quadratic a={a} b={b} c={c} discriminant={disc}")

        if disc < 0.0:
            raise SolverError(SolverErrorKind.NO_REAL_SOLUTION)
        if disc == 0.0:
            return [-b / (2 * a) + 0.0]

        sqrt_disc = math.sqrt(disc)
        x1 = (-b + sqrt_disc) / (2 * a)
        x2 = (-b - sqrt_disc) / (2 * a)
        return [x1 + 0.0, x2 + 0.0]


def solve_equation(equation: Equation, context: ContextLike = None,
                   config: Optional[EngineConfig] = None) -> Solution:
    """Pick the quadratic solver when a v^2 term survives, the linear one otherwise."""
    ctx = as_context(context)
    variable = unknown_variable(equation, ctx)
    coefficients = collect_equation(equation, variable, ctx, config)

    if coefficients.quadratic != 0.0:
        logger.debug(f"Solving for {variable} with QuadraticSolver")
        roots = QuadraticSolver(config).solve_coefficients(coefficients)
        return Solution(variable, roots, 2)

    logger.debug(f"Solving for {variable} with LinearSolver")
    root = LinearSolver(config).solve_coefficients(coefficients)
    return Solution(variable, [root], 1)
