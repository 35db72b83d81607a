"""
Error taxonomy for the lexer, parser, evaluator and solvers.

Every exception carries structured data (a per-component ``kind`` plus the
operands that explain it). ``str(err)`` gives a short message built from
that data; category prefixes and source rendering live in ``pretty``.
"""

from enum import Enum
from typing import List, Optional, Sequence


class LexErrorKind(Enum):
    UNEXPECTED_CHARACTER = 0
    INVALID_NUMBER = 1
    UNKNOWN_COMMAND = 2


class ParseErrorKind(Enum):
    UNEXPECTED_TOKEN = 0
    TRAILING_INPUT = 1
    MISSING_EQUALS = 2
    DUPLICATE_EQUALS = 3
    NESTING_TOO_DEEP = 4


class EvalErrorKind(Enum):
    UNDEFINED_VARIABLE = 0
    DIVISION_BY_ZERO = 1
    NEGATIVE_SQRT = 2
    UNKNOWN_FUNCTION = 3


class SolverErrorKind(Enum):
    NO_UNKNOWN_VARIABLE = 0
    MULTIPLE_UNKNOWN_VARIABLES = 1
    NON_LINEAR = 2
    DIVISION_BY_ZERO_IN_COEFFICIENT = 3
    ALWAYS_TRUE = 4
    NO_SOLUTION = 5
    NOT_QUADRATIC = 6
    NO_REAL_SOLUTION = 7


class LatexSolverError(Exception):
    """Base class for every error raised by the engine."""

    category = "Error"

    def __init__(self, kind: Enum):
        self.kind = kind
        super().__init__(self.describe())

    def describe(self) -> str:
        return self.kind.name.lower().replace("_", " ")

    @property
    def positioned(self) -> bool:
        return getattr(self, "position", None) is not None


# ============================================================================
# LEXER
# ============================================================================

class LexerError(LatexSolverError):
    category = "Lexer error"

    def __init__(self, kind: LexErrorKind, position: int, end: Optional[int] = None,
                 detail: str = ""):
        self.position = position
        self.end = end if end is not None else position + 1
        self.detail = detail
        super().__init__(kind)

    def describe(self) -> str:
        if self.kind == LexErrorKind.UNEXPECTED_CHARACTER:
            return f"unexpected character '{self.detail}'"
        if self.kind == LexErrorKind.INVALID_NUMBER:
            return "invalid number literal"
        return f"unknown command \\{self.detail}"


# ============================================================================
# PARSER
# ============================================================================

class ParseError(LatexSolverError):
    category = "Parse error"

    def __init__(self, kind: ParseErrorKind, expected: str = "", found=None,
                 lexeme: str = "", position: Optional[int] = None,
                 end: Optional[int] = None):
        self.expected = expected
        self.found = found
        self.lexeme = lexeme
        self.position = position
        self.end = end if end is not None or position is None else position + 1
        super().__init__(kind)

    def _found_text(self) -> str:
        if self.found is None:
            return ""
        text = self.found.name
        if self.lexeme:
            text += f" ({self.lexeme})"
        return text

    def describe(self) -> str:
        found = self._found_text()
        if self.kind == ParseErrorKind.TRAILING_INPUT:
            return f"unexpected input after {self.expected}: {found}"
        if self.kind == ParseErrorKind.MISSING_EQUALS:
            return f"expected '=' in equation, found {found}"
        if self.kind == ParseErrorKind.DUPLICATE_EQUALS:
            return "equation contains more than one '='"
        if self.kind == ParseErrorKind.NESTING_TOO_DEEP:
            return f"expression nesting exceeds {self.expected}"
        return f"expected {self.expected}, found {found}"


# ============================================================================
# EVALUATOR
# ============================================================================

class EvaluationError(LatexSolverError):
    category = "Evaluation error"

    def __init__(self, kind: EvalErrorKind, name: str = ""):
        self.name = name
        super().__init__(kind)

    def describe(self) -> str:
        if self.kind == EvalErrorKind.UNDEFINED_VARIABLE:
            return f"undefined variable: {self.name}"
        if self.kind == EvalErrorKind.DIVISION_BY_ZERO:
            return "division by zero"
        if self.kind == EvalErrorKind.NEGATIVE_SQRT:
            return "cannot take square root of negative number"
        return f"unknown function: {self.name}"


class UndefinedVariableError(EvaluationError):
    def __init__(self, name: str):
        super().__init__(EvalErrorKind.UNDEFINED_VARIABLE, name)


class DivisionByZeroError(EvaluationError):
    def __init__(self):
        super().__init__(EvalErrorKind.DIVISION_BY_ZERO)


class NegativeSqrtError(EvaluationError):
    def __init__(self):
        super().__init__(EvalErrorKind.NEGATIVE_SQRT, "sqrt")


class UnknownFunctionError(EvaluationError):
    def __init__(self, name: str):
        super().__init__(EvalErrorKind.UNKNOWN_FUNCTION, name)


# ============================================================================
# SOLVERS
# ============================================================================

class SolverError(LatexSolverError):
    category = "Solver error"

    def __init__(self, kind: SolverErrorKind, variables: Sequence[str] = (),
                 reason: str = ""):
        self.variables: List[str] = list(variables)
        self.reason = reason
        super().__init__(kind)

    def describe(self) -> str:
        if self.kind == SolverErrorKind.NO_UNKNOWN_VARIABLE:
            return "no unknown variable found in equation"
        if self.kind == SolverErrorKind.MULTIPLE_UNKNOWN_VARIABLES:
            return f"multiple unknown variables found: {', '.join(self.variables)}"
        if self.kind == SolverErrorKind.NON_LINEAR:
            return f"non-linear equation ({self.reason})"
        if self.kind == SolverErrorKind.DIVISION_BY_ZERO_IN_COEFFICIENT:
            return "division by zero while collecting coefficients"
        if self.kind == SolverErrorKind.ALWAYS_TRUE:
            return "equation is always true (infinite solutions)"
        if self.kind == SolverErrorKind.NO_SOLUTION:
            return "equation has no solution"
        if self.kind == SolverErrorKind.NOT_QUADRATIC:
            return "not a quadratic equation (use linear solver)"
        return "no real solutions (discriminant is negative)"
