"""
Shared fixtures for the latex_solver test suite.
"""

import sys
import os
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from latex_solver import Context, EngineConfig, MathEngine


@pytest.fixture
def ctx():
    """Empty variable bindings."""
    return Context()


@pytest.fixture
def engine():
    """Engine with its own fresh context."""
    return MathEngine(context=Context())


@pytest.fixture
def small_config():
    """Tight limits so depth checks are cheap to trigger."""
    return EngineConfig(max_nesting=4, max_tree_depth=8)
