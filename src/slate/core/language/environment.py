"""
Variable scopes for the Slate evaluator.

Scopes form a chain from the innermost outward. Reads walk the chain and
return the first binding found; writes always land in the innermost scope
and never touch a parent.
"""

from __future__ import annotations

from slate.core.ir import Value


class Environment:
    """A scope of name -> value bindings with an optional read-only parent."""

    def __init__(self, parent: Environment | None = None) -> None:
        self._parent = parent
        self._state: dict[str, Value] = {}

    @property
    def parent(self) -> Environment | None:
        return self._parent

    def get(self, key: str) -> Value | None:
        """Look ``key`` up here, then in each enclosing scope."""
        scope: Environment | None = self
        while scope is not None:
            if key in scope._state:
                return scope._state[key]
            scope = scope._parent
        return None

    def insert(self, key: str, value: Value) -> None:
        """Bind ``key`` in this scope, shadowing any outer binding."""
        self._state[key] = value

    def child(self) -> Environment:
        """A new empty scope nested inside this one."""
        return Environment(parent=self)

    def bindings(self) -> dict[str, Value]:
        """Every visible binding, inner scopes shadowing outer ones."""
        visible: dict[str, Value] = {}
        if self._parent is not None:
            visible.update(self._parent.bindings())
        visible.update(self._state)
        return visible

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __repr__(self) -> str:
        depth = 0
        scope = self._parent
        while scope is not None:
            depth += 1
            scope = scope._parent
        return f"Environment({self._state!r}, depth={depth})"
