"""
Simplify expressions: constant folding plus a fixed set of identities.

Bottom-up and non-mutating. Simplification never raises evaluation errors;
a constant division by (near) zero is left unfolded.
"""

import math
from typing import Optional

from .config import DEFAULT_CONFIG, EngineConfig
from .evaluator import apply_operator
from .expr import (
    BinaryOp, BinaryOperator, Expression, Function, Number, Symbol, clone,
)


class Simplifier:
    """Simplify expressions."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def simplify(self, expr: Expression) -> Expression:
        if isinstance(expr, (Number, Symbol)):
            return clone(expr)
        if isinstance(expr, BinaryOp):
            left = self.simplify(expr.left)
            right = self.simplify(expr.right)
            if isinstance(left, Number) and isinstance(right, Number):
                return self._constant_fold(expr.op, left, right)
            return self._identity_rules(expr.op, left, right)
        if isinstance(expr, Function):
            return self._simplify_function(expr)
        raise TypeError(f"Invalid expression node: {expr!r}")

    def _is_zero(self, node: Expression) -> bool:
        return isinstance(node, Number) and abs(node.value) < self.config.epsilon

    def _is_one(self, node: Expression) -> bool:
        return isinstance(node, Number) and abs(node.value - 1.0) < self.config.epsilon

    def _constant_fold(self, op: BinaryOperator, left: Number, right: Number) -> Expression:
        if op == BinaryOperator.DIV and abs(right.value) < self.config.epsilon:
            return BinaryOp(left, right, op)
        value = apply_operator(op, left.value, right.value, self.config.epsilon)
        if not math.isfinite(value):
            # inf/nan have no literal form
            return BinaryOp(left, right, op)
        return Number(value)

    def _identity_rules(self, op: BinaryOperator, left: Expression, right: Expression) -> Expression:
        if op == BinaryOperator.ADD:
            if self._is_zero(right):
                return left
            if self._is_zero(left):
                return right
        elif op == BinaryOperator.SUB:
            if self._is_zero(right):
                return left
        elif op == BinaryOperator.MUL:
            if self._is_zero(left) or self._is_zero(right):
                return Number(0.0)
            if self._is_one(right):
                return left
            if self._is_one(left):
                return right
        elif op == BinaryOperator.DIV:
            if self._is_zero(left):
                return Number(0.0)
            if self._is_one(right):
                return left
        return BinaryOp(left, right, op)

    def _simplify_function(self, func: Function) -> Expression:
        argument = self.simplify(func.argument)
        if func.name == "sqrt" and isinstance(argument, Number) and argument.value >= 0:
            return Number(math.sqrt(argument.value))
        # sqrt of a negative literal stays as written
        return Function(func.name, argument)


def simplify(expr: Expression, config: Optional[EngineConfig] = None) -> Expression:
    return Simplifier(config).simplify(expr)
