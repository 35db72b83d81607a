"""Tests for the variable store."""

import pytest

from latex_solver import Context


class TestContext:
    def test_set_and_get(self, ctx):
        ctx.set("x", 5)
        assert ctx.get("x") == 5.0
        assert isinstance(ctx.get("x"), float)

    def test_missing_is_none(self, ctx):
        assert ctx.get("nope") is None
        assert not ctx.has("nope")

    def test_overwrite(self, ctx):
        ctx.set("x", 1)
        ctx.set("x", 2)
        assert ctx.get("x") == 2.0
        assert ctx.size() == 1

    def test_get_all_is_a_copy(self, ctx):
        ctx.set("x", 1)
        snapshot = ctx.get_all()
        snapshot["y"] = 2.0
        assert not ctx.has("y")

    def test_clear(self, ctx):
        ctx.set("a", 1)
        ctx.set("b", 2)
        ctx.clear()
        assert ctx.size() == 0
        assert len(ctx) == 0

    def test_initial_mapping(self):
        ctx = Context({"a": 1, "b": 2.5})
        assert ctx.get_all() == {"a": 1.0, "b": 2.5}
        assert "a" in ctx

    def test_copy_is_independent(self):
        ctx = Context({"a": 1})
        other = ctx.copy()
        other.set("a", 9)
        assert ctx.get("a") == 1.0

    @pytest.mark.parametrize("name", ["", "1x", "a b", "x+y"])
    def test_invalid_names(self, ctx, name):
        with pytest.raises(ValueError):
            ctx.set(name, 1.0)
