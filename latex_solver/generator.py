"""
Generate equations with known integer roots for self-checks and tests.
"""

from typing import List, Optional, Tuple

import numpy as np


def _term(coefficient: int, body: str, first: bool = False) -> str:
    """Render ``coefficient * body`` with an explicit sign."""
    if body:
        magnitude = "" if abs(coefficient) == 1 else f"{abs(coefficient)} \\times "
        text = f"{magnitude}{body}"
    else:
        text = str(abs(coefficient))
    if first:
        return f"-{text}" if coefficient < 0 else text
    return f" - {text}" if coefficient < 0 else f" + {text}"


class ProblemGenerator:
    """Generate problems with known solutions."""

    def __init__(self, seed: Optional[int] = None, variable: str = "x"):
        self.rng = np.random.default_rng(seed)
        self.variable = variable

    def _randint(self, low: int, high: int) -> int:
        return int(self.rng.integers(low, high + 1))

    def linear_equation(self, solution: Optional[int] = None) -> Tuple[str, List[float]]:
        if solution is None:
            solution = self._randint(-10, 10)
        a = int(self.rng.choice([1, 2, 3, -1, -2, -3]))
        b = self._randint(-10, 10)
        c = a * solution + b

        lhs = _term(a, self.variable, first=True)
        if b != 0:
            lhs += _term(b, "")
        return f"{lhs} = {c}", [float(solution)]

    def quadratic_equation(self, r1: Optional[int] = None,
                           r2: Optional[int] = None) -> Tuple[str, List[float]]:
        if r1 is None:
            r1 = self._randint(-5, 5)
        if r2 is None:
            r2 = self._randint(-5, 5)
        b, c = -(r1 + r2), r1 * r2

        lhs = f"{self.variable}^2"
        if b != 0:
            lhs += _term(b, self.variable)
        if c != 0:
            lhs += _term(c, "")

        roots = sorted({float(r1), float(r2)}, reverse=True)
        return f"{lhs} = 0", roots
