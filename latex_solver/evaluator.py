"""
Numeric evaluation of expression trees.
"""

import math
from typing import Mapping, Optional, Union

import numpy as np

from .config import DEFAULT_CONFIG, EngineConfig
from .context import Context
from .errors import (
    DivisionByZeroError, NegativeSqrtError, UndefinedVariableError,
    UnknownFunctionError,
)
from .expr import BinaryOp, BinaryOperator, Expression, Function, Number, Symbol


ContextLike = Union[Context, Mapping[str, float], None]


def as_context(context: ContextLike) -> Context:
    if context is None:
        return Context()
    if isinstance(context, Context):
        return context
    return Context(context)


def power(base: float, exponent: float) -> float:
    # float64 semantics: overflow gives inf, negative base with a
    # fractional exponent gives nan
    with np.errstate(all='ignore'):
        return float(np.power(np.float64(base), np.float64(exponent)))


def apply_operator(op: BinaryOperator, left: float, right: float,
                   epsilon: float = DEFAULT_CONFIG.epsilon) -> float:
    if op == BinaryOperator.ADD:
        return left + right
    if op == BinaryOperator.SUB:
        return left - right
    if op == BinaryOperator.MUL:
        return left * right
    if op == BinaryOperator.DIV:
        if abs(right) < epsilon:
            raise DivisionByZeroError()
        return left / right
    if op == BinaryOperator.POW:
        return power(left, right)
    raise ValueError(f"Unsupported operator {op}")


def apply_function(name: str, argument: float) -> float:
    if name == "sqrt":
        if argument < 0:
            raise NegativeSqrtError()
        return math.sqrt(argument)
    raise UnknownFunctionError(name)


class Evaluator:
    def __init__(self, context: ContextLike = None, config: Optional[EngineConfig] = None):
        self.context = as_context(context)
        self.config = config or DEFAULT_CONFIG

    def evaluate(self, node: Expression) -> float:
        if isinstance(node, Number):
            return node.value

        if isinstance(node, Symbol):
            value = self.context.get(node.name)
            if value is None:
                raise UndefinedVariableError(node.name)
            return value

        if isinstance(node, BinaryOp):
            left = self.evaluate(node.left)
            right = self.evaluate(node.right)
            return apply_operator(node.op, left, right, self.config.epsilon)

        if isinstance(node, Function):
            return apply_function(node.name, self.evaluate(node.argument))

        raise TypeError(f"Invalid expression node: {node!r}")


def evaluate(expr: Expression, context: ContextLike = None,
             config: Optional[EngineConfig] = None) -> float:
    return Evaluator(context, config).evaluate(expr)
