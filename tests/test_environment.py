import pytest

from scm import errors
from scm.types.environment import Environment, is_valid_name
from scm.types.values import Integer, VOID


def test_define_and_lookup(env):
    env.define("x", Integer(1))
    assert env.lookup("x") == Integer(1)
    assert env.find("x") is env


def test_lookup_missing_returns_none(env):
    assert env.lookup("nope") is None
    assert env.find("nope") is None


def test_extend_creates_child_frame(env):
    env.define("x", Integer(1))
    child = env.extend([("y", Integer(2)), ("x", Integer(10))])
    assert child.outer is env
    assert child.lookup("x") == Integer(10)
    assert child.lookup("y") == Integer(2)
    # parent is untouched
    assert env.lookup("x") == Integer(1)
    assert env.lookup("y") is None


def test_define_overwrites_in_place(env):
    env.define("x", Integer(1))
    env.define("x", Integer(2))
    assert env.vars == {"x": Integer(2)}


def test_set_updates_nearest_binding(env):
    env.define("x", Integer(1))
    child = env.extend([])
    child.set("x", Integer(5))
    assert env.lookup("x") == Integer(5)
    assert "x" not in child.vars


def test_set_unbound_never_creates_binding(env):
    with pytest.raises(errors.ScmUnboundAssignment):
        env.set("z", Integer(1))
    assert env.lookup("z") is None


def test_placeholder_binding_is_visible_through_children(env):
    env.define("f", VOID)
    child = env.extend([])
    env.define("f", Integer(3))
    assert child.lookup("f") == Integer(3)


@pytest.mark.parametrize(
    "name,valid",
    [
        ("x", True),
        ("set-car!", True),
        ("list->string", True),
        ("a1", True),
        ("+", True),
        ("", False),
        ("1abc", False),
        (".x", False),
        ("@x", False),
        ("a b", False),
        ("a#b", False),
        ("it's", False),
        ('say"', False),
        ("back`tick", False),
    ],
)
def test_variable_name_rule(name, valid):
    assert is_valid_name(name) is valid


def test_define_rejects_invalid_name(env):
    with pytest.raises(errors.ScmInvalidVariableName):
        env.define("9lives", Integer(9))


def test_repr_shows_chain(env):
    env.define("x", Integer(1))
    child = env.extend([("y", VOID)])
    assert repr(child) == "<Environment chain: {y: Void} -> {x: Integer}>"
    assert str(child) == "{y: Void} -> ..."
