"""
LaTeX Solver
============
Parse LaTeX-flavoured arithmetic, evaluate it, simplify it, and solve
univariate linear and quadratic equations symbolically.

Usage:
    from latex_solver import parse, parse_equation, evaluate, simplify, solve

    evaluate(parse("2 + 3 \\times 4"))              # 14.0
    str(simplify(parse("x + 0")))                   # 'x'
    solve("x^2 - 5*x + 6 = 0").roots                # [3.0, 2.0]

    # Explicit components
    from latex_solver import Context, LinearSolver, QuadraticSolver
    ctx = Context({"a": 2})
    LinearSolver().solve(parse_equation("a*x - 3 = 7"), ctx)   # 5.0

    # Errors carry a kind and render with source context
    from latex_solver import ParseError, render_error
    try:
        parse("(2 + 3")
    except ParseError as e:
        print(render_error("(2 + 3", e))
"""

from .config import DEFAULT_CONFIG, EngineConfig
from .context import Context
from .errors import (
    LatexSolverError,
    LexErrorKind, LexerError,
    ParseErrorKind, ParseError,
    EvalErrorKind, EvaluationError,
    UndefinedVariableError, DivisionByZeroError,
    NegativeSqrtError, UnknownFunctionError,
    SolverErrorKind, SolverError,
)
from .lexer import Lexer, Token, TokenType
from .expr import (
    # Expression system
    BinaryOperator, Expression, Equation,
    Number, Symbol, BinaryOp, Function,
    Const, Var, Add, Sub, Mul, Div, Pow, Sqrt, Neg, Eq,
    to_string, clone, tree_depth, free_symbols, structurally_equal,
)
from .parser import Parser
from .evaluator import Evaluator
from .simplifier import Simplifier
from .solvers import (
    Coefficients, CoefficientCollector, LinearSolver, QuadraticSolver,
    Solution, find_unknowns,
)
from .pretty import format_error, render_error, line_col_at
from .engine import MathEngine
from .generator import ProblemGenerator

# Convenience functions
_default_engine = None


def get_engine():
    """Get or create default engine."""
    global _default_engine
    if _default_engine is None:
        _default_engine = MathEngine()
    return _default_engine


def parse(text):
    """Parse string to expression tree."""
    return get_engine().parse(text)


def parse_equation(text):
    """Parse string to equation."""
    return get_engine().parse_equation(text)


def evaluate(expr, context=None):
    """Evaluate an expression (string or tree) against optional bindings."""
    engine = get_engine()
    if isinstance(expr, str):
        expr = engine.parse(expr)
    if context is None:
        context = engine.context
    return Evaluator(context, engine.config).evaluate(expr)


def simplify(expr):
    """Simplify an expression (string or tree)."""
    return get_engine().simplify(expr)


def solve(equation):
    """Quick solve a linear or quadratic equation."""
    return get_engine().solve(equation)


__version__ = "0.1.0"
__all__ = [
    # Config
    'EngineConfig', 'DEFAULT_CONFIG', 'Context',

    # Errors
    'LatexSolverError',
    'LexErrorKind', 'LexerError', 'ParseErrorKind', 'ParseError',
    'EvalErrorKind', 'EvaluationError', 'UndefinedVariableError',
    'DivisionByZeroError', 'NegativeSqrtError', 'UnknownFunctionError',
    'SolverErrorKind', 'SolverError',

    # Expression system
    'BinaryOperator', 'Expression', 'Equation',
    'Number', 'Symbol', 'BinaryOp', 'Function',
    'Const', 'Var', 'Add', 'Sub', 'Mul', 'Div', 'Pow', 'Sqrt', 'Neg', 'Eq',
    'to_string', 'clone', 'tree_depth', 'free_symbols', 'structurally_equal',

    # Classes
    'Lexer', 'Token', 'TokenType', 'Parser', 'Evaluator', 'Simplifier',
    'Coefficients', 'CoefficientCollector', 'LinearSolver', 'QuadraticSolver',
    'Solution', 'find_unknowns', 'MathEngine', 'ProblemGenerator',

    # Presentation
    'format_error', 'render_error', 'line_col_at',

    # Functions
    'parse', 'parse_equation', 'evaluate', 'simplify', 'solve', 'get_engine',
]
