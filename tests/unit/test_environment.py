"""Tests for Slate scopes."""

from __future__ import annotations

from slate.core.ir import BoolValue, FloatValue
from slate.core.language import Environment


class TestEnvironment:
    """Lookup walks outward, writes stay local."""

    def test_empty(self, env: Environment) -> None:
        assert env.get("x") is None
        assert env.parent is None
        assert "x" not in env

    def test_insert_and_get(self, env: Environment) -> None:
        env.insert("x", FloatValue(value=1.0))
        assert env.get("x") == FloatValue(value=1.0)
        assert "x" in env

    def test_child_reads_parent(self, env: Environment) -> None:
        env.insert("x", FloatValue(value=1.0))
        child = env.child()
        assert child.parent is env
        assert child.get("x") == FloatValue(value=1.0)

    def test_grandchild_reads_root(self, env: Environment) -> None:
        env.insert("x", BoolValue(value=True))
        assert env.child().child().get("x") == BoolValue(value=True)

    def test_child_shadows_without_touching_parent(self, env: Environment) -> None:
        env.insert("x", FloatValue(value=1.0))
        child = env.child()
        child.insert("x", FloatValue(value=2.0))
        assert child.get("x") == FloatValue(value=2.0)
        assert env.get("x") == FloatValue(value=1.0)

    def test_child_binding_invisible_to_parent(self, env: Environment) -> None:
        child = env.child()
        child.insert("y", FloatValue(value=3.0))
        assert env.get("y") is None

    def test_bindings(self, env: Environment) -> None:
        env.insert("x", FloatValue(value=1.0))
        env.insert("y", FloatValue(value=2.0))
        child = env.child()
        child.insert("x", FloatValue(value=9.0))
        assert child.bindings() == {
            "x": FloatValue(value=9.0),
            "y": FloatValue(value=2.0),
        }

    def test_contains_non_string(self, env: Environment) -> None:
        assert 1 not in env
