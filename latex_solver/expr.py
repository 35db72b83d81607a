"""
Expression tree.

A closed set of four immutable node types. Transformations never mutate a
tree; they build a new one.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Set, Tuple, Union


# ============================================================================
# EXPRESSION SYSTEM
# ============================================================================

class BinaryOperator(Enum):
    """Binary operators, valued by their printed symbol."""
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    POW = '^'

    @property
    def symbol(self) -> str:
        return self.value


class _Node:
    def __str__(self):
        return to_string(self)


@dataclass(frozen=True)
class Number(_Node):
    value: float


@dataclass(frozen=True)
class Symbol(_Node):
    name: str


@dataclass(frozen=True)
class BinaryOp(_Node):
    left: 'Expression'
    right: 'Expression'
    op: BinaryOperator


@dataclass(frozen=True)
class Function(_Node):
    name: str
    argument: 'Expression'


Expression = Union[Number, Symbol, BinaryOp, Function]


@dataclass(frozen=True)
class Equation:
    """Two expressions joined by '='."""
    left: Expression
    right: Expression

    def __str__(self):
        return f"{to_string(self.left)} = {to_string(self.right)}"

    def clone(self) -> 'Equation':
        return Equation(clone(self.left), clone(self.right))


# ============================================================================
# CONSTRUCTORS
# ============================================================================

def Const(v): return Number(float(v))
def Var(name): return Symbol(name)
def Add(l, r): return BinaryOp(l, r, BinaryOperator.ADD)
def Sub(l, r): return BinaryOp(l, r, BinaryOperator.SUB)
def Mul(l, r): return BinaryOp(l, r, BinaryOperator.MUL)
def Div(l, r): return BinaryOp(l, r, BinaryOperator.DIV)
def Pow(b, e): return BinaryOp(b, e, BinaryOperator.POW)
def Sqrt(e): return Function("sqrt", e)
def Neg(e): return Sub(Const(0), e)
def Eq(l, r): return Equation(l, r)


# ============================================================================
# TRAVERSAL
# ============================================================================

def format_number(value: float) -> str:
    """Fixed notation, six fractional digits, trailing zeros stripped."""
    text = f"{abs(value):.6f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if value < 0 and text != "0":
        # a bare leading '-' would re-parse as unary minus
        return f"(0 - {text})"
    return text


def to_string(expr: Expression) -> str:
    """Canonical, fully parenthesised rendering that always re-parses."""
    if isinstance(expr, Number):
        return format_number(expr.value)
    if isinstance(expr, Symbol):
        return expr.name
    if isinstance(expr, BinaryOp):
        return f"({to_string(expr.left)} {expr.op.symbol} {to_string(expr.right)})"
    if isinstance(expr, Function):
        return f"{expr.name}({to_string(expr.argument)})"
    raise TypeError(f"Not an expression node: {expr!r}")


def children(expr: Expression) -> Tuple[Expression, ...]:
    if isinstance(expr, BinaryOp):
        return (expr.left, expr.right)
    if isinstance(expr, Function):
        return (expr.argument,)
    return ()


def clone(expr: Expression) -> Expression:
    if isinstance(expr, Number):
        return Number(expr.value)
    if isinstance(expr, Symbol):
        return Symbol(expr.name)
    if isinstance(expr, BinaryOp):
        return BinaryOp(clone(expr.left), clone(expr.right), expr.op)
    if isinstance(expr, Function):
        return Function(expr.name, clone(expr.argument))
    raise TypeError(f"Not an expression node: {expr!r}")


def tree_depth(expr: Expression) -> int:
    """Height of the tree (a leaf has depth 1), computed with an explicit stack."""
    deepest = 0
    stack: List[Tuple[Expression, int]] = [(expr, 1)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in children(node):
            stack.append((child, depth + 1))
    return deepest


def free_symbols(expr: Expression) -> Set[str]:
    names = set()
    stack = [expr]
    while stack:
        node = stack.pop()
        if isinstance(node, Symbol):
            names.add(node.name)
        stack.extend(children(node))
    return names


def structurally_equal(a: Expression, b: Expression) -> bool:
    stack = [(a, b)]
    while stack:
        x, y = stack.pop()
        if type(x) is not type(y):
            return False
        if isinstance(x, Number):
            if x.value != y.value:
                return False
        elif isinstance(x, Symbol):
            if x.name != y.name:
                return False
        elif isinstance(x, BinaryOp):
            if x.op != y.op:
                return False
            stack.append((x.left, y.left))
            stack.append((x.right, y.right))
        elif isinstance(x, Function):
            if x.name != y.name:
                return False
            stack.append((x.argument, y.argument))
    return True
