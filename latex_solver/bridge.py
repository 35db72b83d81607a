"""
SymPy bridge: convert expression trees to SymPy objects for cross-checking.

SymPy is optional (``pip install latex_solver[verify]``).
"""

from .expr import BinaryOp, BinaryOperator, Equation, Expression, Function, Number, Symbol

try:
    import sympy
    SYMPY_AVAILABLE = True
except ImportError:
    SYMPY_AVAILABLE = False


def _require_sympy():
    if not SYMPY_AVAILABLE:
        raise RuntimeError("SymPy required for the verification bridge")


def to_sympy(expr: Expression):
    """Convert an expression tree to a SymPy expression."""
    _require_sympy()

    if isinstance(expr, Number):
        value = expr.value
        return sympy.Integer(int(value)) if value.is_integer() else sympy.Float(value)
    if isinstance(expr, Symbol):
        return sympy.Symbol(expr.name)
    if isinstance(expr, BinaryOp):
        left, right = to_sympy(expr.left), to_sympy(expr.right)
        if expr.op == BinaryOperator.ADD:
            return left + right
        if expr.op == BinaryOperator.SUB:
            return left - right
        if expr.op == BinaryOperator.MUL:
            return left * right
        if expr.op == BinaryOperator.DIV:
            return left / right
        return left ** right
    if isinstance(expr, Function):
        func = {
            'sqrt': sympy.sqrt, 'sin': sympy.sin, 'cos': sympy.cos,
            'tan': sympy.tan, 'ln': sympy.log, 'log': sympy.log,
            'exp': sympy.exp, 'abs': sympy.Abs,
        }[expr.name]
        return func(to_sympy(expr.argument))
    raise TypeError(f"Invalid expression node: {expr!r}")


def equation_to_sympy(equation: Equation):
    _require_sympy()
    return sympy.Eq(to_sympy(equation.left), to_sympy(equation.right))


def real_roots(equation: Equation, variable: str):
    """Real roots found by SymPy, as floats in descending order."""
    _require_sympy()
    roots = sympy.solve(equation_to_sympy(equation), sympy.Symbol(variable))
    values = [complex(root) for root in roots]
    return sorted((v.real for v in values if abs(v.imag) < 1e-12), reverse=True)
