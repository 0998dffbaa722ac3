from hypothesis import given, strategies as st

from blisp.builtin.env_builtin import BUILTINS
from blisp.types.environment import Environment
from blisp.types.value import (
    INT_MAX,
    INT_MIN,
    Error,
    ErrorKind,
    Function,
    Number,
    QExpr,
    Sequence,
    SExpr,
    Symbol,
)

leaves = st.one_of(
    st.integers(min_value=INT_MIN, max_value=INT_MAX).map(Number),
    st.text(min_size=1, max_size=8).map(Symbol),
    st.sampled_from(sorted(BUILTINS)).map(Function),
)
values = st.recursive(
    leaves,
    lambda children: st.one_of(
        st.lists(children, max_size=4).map(SExpr),
        st.lists(children, max_size=4).map(QExpr),
    ),
    max_leaves=12,
)


def _mutate(v):
    if isinstance(v, Sequence):
        v.add(Number(0))
    elif isinstance(v, Number):
        v.value += 1
    else:
        v.name = v.name + "!"


@given(st.text(min_size=1, max_size=12), values)
def test_get_after_put_returns_equal_value(name, value):
    env = Environment()
    env.put(name, value)
    assert env.get(name) == value


@given(st.text(min_size=1, max_size=12), values)
def test_mutating_a_lookup_never_touches_the_binding(name, value):
    env = Environment()
    env.put(name, value)
    got = env.get(name)
    _mutate(got)
    assert env.get(name) == value


def test_put_stores_a_copy():
    env = Environment()
    v = QExpr([Number(1)])
    env.put("xs", v)
    v.add(Number(2))
    assert env.get("xs") == QExpr([Number(1)])


def test_get_unbound_is_an_error_value():
    env = Environment()
    assert env.get("nope") == Error(ErrorKind.UnboundSymbol)


def test_put_replaces_without_growing():
    env = Environment()
    env.put("x", Number(1))
    env.put("y", Number(2))
    env.put("x", QExpr([Number(3)]))
    assert len(env) == 2
    assert env.names() == ["x", "y"]
    assert env.get("x") == QExpr([Number(3)])


def test_names_are_exact_matches():
    env = Environment()
    env.put("x", Number(1))
    assert "x" in env
    assert "X" not in env
    assert env.get("x ") == Error(ErrorKind.UnboundSymbol)


def test_register_binds_every_builtin(env):
    assert env.names() == list(BUILTINS)
    for name in BUILTINS:
        assert env.get(name) == Function(name)


def test_str_and_repr():
    env = Environment()
    env.put("x", Number(1))
    assert str(env) == "{x: Number(1)}"
    assert repr(env) == "<Environment {x: Number(1)}>"
