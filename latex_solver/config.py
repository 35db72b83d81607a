"""Configuration management for the expression engine."""

import os
import logging
from dataclasses import dataclass, field
from typing import FrozenSet

logger = logging.getLogger(__name__)


FUNCTION_NAMES = frozenset({"sqrt", "sin", "cos", "tan", "ln", "log", "exp", "abs"})


@dataclass(frozen=True)
class EngineConfig:
    """Central configuration shared by parser, evaluator, simplifier and solvers."""

    # Zero/one comparisons (division guard, simplifier identities)
    epsilon: float = 1e-10

    # Input contract: keeps every recursive tree walk well inside the
    # interpreter's recursion limit
    max_nesting: int = 64
    # Height of the finished tree; flat operator chains count too, so a
    # sum of n terms is n levels deep
    max_tree_depth: int = 256

    # Backslash commands lexed as Function tokens
    function_names: FrozenSet[str] = field(default_factory=lambda: FUNCTION_NAMES)

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create config from environment variables."""
        defaults = cls()
        return cls(
            epsilon=float(os.getenv("LATEX_SOLVER_EPSILON", defaults.epsilon)),
            max_nesting=int(os.getenv("LATEX_SOLVER_MAX_NESTING", defaults.max_nesting)),
            max_tree_depth=int(os.getenv("LATEX_SOLVER_MAX_TREE_DEPTH", defaults.max_tree_depth)),
        )

    def validate(self) -> list:
        """Validate configuration, return list of warnings."""
        warnings = []

        if self.epsilon <= 0:
            warnings.append("epsilon must be positive - division by zero will not be detected")
        if self.max_nesting < 1:
            warnings.append("max_nesting below 1 - every grouped expression will be rejected")
        if self.max_tree_depth < self.max_nesting:
            warnings.append("max_tree_depth is smaller than max_nesting")
        if self.max_tree_depth > 400:
            warnings.append("max_tree_depth above 400 may exceed the recursion limit")
        if "sqrt" not in self.function_names:
            warnings.append("sqrt is not an allowed function - \\sqrt will not lex")

        for warning in warnings:
            logger.warning(f"EngineConfig: {warning}")
        return warnings


DEFAULT_CONFIG = EngineConfig()
