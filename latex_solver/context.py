"""Variable bindings used by the evaluator and the solvers."""

from typing import Dict, Mapping, Optional


class Context:
    """
    Mapping from variable name to value.

    The caller owns the context; evaluator and solvers only read it.
    Not synchronised: serialise writes or use per-thread copies.
    """

    def __init__(self, initial: Optional[Mapping[str, float]] = None):
        self._variables: Dict[str, float] = {}
        for name, value in (initial or {}).items():
            self.set(name, value)

    def set(self, name: str, value: float):
        if not name.isidentifier():
            raise ValueError(f"Invalid variable name: {name!r}")
        self._variables[name] = float(value)

    def get(self, name: str) -> Optional[float]:
        return self._variables.get(name)

    def has(self, name: str) -> bool:
        return name in self._variables

    def get_all(self) -> Dict[str, float]:
        return dict(self._variables)

    def clear(self):
        self._variables.clear()

    def size(self) -> int:
        return len(self._variables)

    def copy(self) -> 'Context':
        return Context(self._variables)

    def __contains__(self, name) -> bool:
        return self.has(name)

    def __len__(self) -> int:
        return self.size()

    def __repr__(self):
        return f"Context({self._variables!r})"
