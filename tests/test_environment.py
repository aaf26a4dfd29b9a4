import pytest

from duo.errors import DuoRedefinedSlot, DuoUndefinedSlot
from duo.types import Environment, Nil


@pytest.fixture
def env():
    env = Environment()
    env.define("one", 1)
    env.define("two", 2)
    return env


def test_define_and_get(env):
    assert env.get("one") == 1
    assert env.get("two") == 2
    assert env.get("missing") is None


def test_define_returns_value(env):
    assert env.define("three", 3) == 3


def test_redefine_in_same_frame_fails(env):
    with pytest.raises(DuoRedefinedSlot):
        env.define("one", -1)
    assert env.get("one") == 1


def test_child_can_shadow_parent(env):
    sub = env.child()
    sub.define("three", 3)
    assert sub.define("one", -1) == -1
    assert sub.get("one") == -1
    assert env.get("one") == 1
    assert env.get("three") is None


def test_child_reads_through_parent(env):
    sub = env.child().child()
    assert sub.get("two") == 2
    assert sub.find("two") is env
    assert sub.find("zzz") is None


def test_update_rebinds_nearest_binding(env):
    sub = env.child()
    sub.define("three", 3)
    assert sub.update("one", 10) == 10
    assert env.get("one") == 10
    assert "one" not in sub.vars


def test_update_prefers_shadowing_frame(env):
    sub = env.child()
    sub.define("one", -1)
    sub.update("one", 5)
    assert sub.get("one") == 5
    assert env.get("one") == 1


def test_update_undefined_fails(env):
    with pytest.raises(DuoUndefinedSlot):
        env.child().update("nope", 1)


def test_get_of_undefined_name_is_none(env):
    assert env.child().get("nope") is None
    assert env.find("nope") is None


def test_define_force_replaces(env):
    env.define_force("one", 100)
    assert env.get("one") == 100


def test_nil_binding_is_found():
    env = Environment()
    env.define("n", Nil)
    assert env.get("n") is Nil
    assert env.find("n") is env


def test_find_returns_owning_frame(env):
    sub = env.child()
    assert sub.find("one") is env
    assert sub.find("missing") is None


def test_items_are_own_bindings_in_order(env):
    sub = env.child()
    sub.define("b", 2)
    sub.define("a", 1)
    assert list(sub.items()) == [("b", 2), ("a", 1)]


def test_str_and_repr(env):
    sub = env.child()
    sub.define("s", "x")
    assert str(sub) == '{s: "x"} -> ...'
    assert repr(sub) == '<Environment chain: {s: "x"} -> {one: 1, two: 2}>'
