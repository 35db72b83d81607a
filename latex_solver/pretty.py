"""
Human-readable error presentation.

Errors carry structured data only; this module turns them into text for
whatever front end sits on top of the engine.
"""

from typing import Tuple

from .errors import LatexSolverError


def line_col_at(source: str, offset: int) -> Tuple[int, int]:
    """1-based line and column of a character offset."""
    line, col = 1, 1
    for ch in source[:offset]:
        if ch == '\n':
            line += 1
            col = 1
        else:
            col += 1
    return line, col


def format_error(error: Exception) -> str:
    """One-line message prefixed with the error category."""
    if isinstance(error, LatexSolverError):
        return f"{error.category}: {error.describe()}"
    return f"Error: {error}"


def render_error(source: str, error: Exception) -> str:
    """
    Render an error with source context::

        error: unexpected character '@'
         --> 1:5
           |
         1 | x + @
           |     ^
    """
    if not isinstance(error, LatexSolverError) or not error.positioned:
        return format_error(error)

    line, col = line_col_at(source, error.position)
    lines = source.splitlines() or [""]
    line_text = lines[line - 1] if line <= len(lines) else ""
    width = max((error.end or error.position) - error.position, 1)

    out = [
        f"error: {error.describe()}",
        f" --> {line}:{col}",
        "   |",
        f"{line:2} | {line_text}",
        "   | " + " " * (col - 1) + "^" * width,
    ]
    return "\n".join(out)
