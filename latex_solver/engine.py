"""
Main MathEngine class - unified interface for all operations.
"""

import logging
from typing import Dict, List, Optional, Union

from .config import DEFAULT_CONFIG, EngineConfig
from .evaluator import ContextLike, Evaluator, as_context
from .expr import Equation, Expression
from .parser import Parser
from .pretty import format_error, render_error
from .simplifier import Simplifier
from .solvers import LinearSolver, QuadraticSolver, Solution, solve_equation

logger = logging.getLogger(__name__)


class MathEngine:
    """
    Unified interface for the expression engine.

    Usage:
        engine = MathEngine()

        engine.evaluate("2 + 3 \\times 4")          # 14.0
        str(engine.simplify("x \\times 1 + 0"))    # 'x'
        engine.solve("x^2 - 5*x + 6 = 0").roots    # [3.0, 2.0]

        engine.set_variable("a", 2)
        engine.solve_linear("a*x = 10")            # 5.0

    The engine owns a Context unless one is passed in; every call reads it,
    none writes it except the variable helpers.
    """

    def __init__(self, config: Optional[EngineConfig] = None, context: ContextLike = None):
        self.config = config or DEFAULT_CONFIG
        self.context = as_context(context)
        self.simplifier = Simplifier(self.config)
        self.linear = LinearSolver(self.config)
        self.quadratic = QuadraticSolver(self.config)

    def parse(self, text: str) -> Expression:
        """Parse string to expression tree."""
        return Parser(text, self.config).parse()

    def parse_equation(self, text: str) -> Equation:
        """Parse string to equation."""
        return Parser(text, self.config).parse_equation()

    def _expression(self, expr: Union[str, Expression]) -> Expression:
        return self.parse(expr) if isinstance(expr, str) else expr

    def _equation(self, equation: Union[str, Equation]) -> Equation:
        return self.parse_equation(equation) if isinstance(equation, str) else equation

    def evaluate(self, expr: Union[str, Expression]) -> float:
        return Evaluator(self.context, self.config).evaluate(self._expression(expr))

    def simplify(self, expr: Union[str, Expression]) -> Expression:
        return self.simplifier.simplify(self._expression(expr))

    def solve_linear(self, equation: Union[str, Equation]) -> float:
        return self.linear.solve(self._equation(equation), self.context)

    def solve_quadratic(self, equation: Union[str, Equation]) -> List[float]:
        return self.quadratic.solve(self._equation(equation), self.context)

    def solve(self, equation: Union[str, Equation]) -> Solution:
        """Solve for the single unknown, choosing the solver by degree."""
        solution = solve_equation(self._equation(equation), self.context, self.config)
        logger.debug(f"Solved {equation}: {solution}")
        return solution

    def set_variable(self, name: str, value: float):
        self.context.set(name, value)

    def get_variable(self, name: str) -> Optional[float]:
        return self.context.get(name)

    def variables(self) -> Dict[str, float]:
        return self.context.get_all()

    def clear_variables(self):
        self.context.clear()

    def format_error(self, error: Exception, source: Optional[str] = None) -> str:
        """Render an error for display, with source context when available."""
        if source is not None:
            return render_error(source, error)
        return format_error(error)

