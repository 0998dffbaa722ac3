import pytest
from hypothesis import given, strategies as st

from blisp.builtin.env_builtin import register
from blisp.evaluation.evaluator import evaluate
from blisp.types.environment import Environment
from blisp.types.value import (
    INT_MAX,
    INT_MIN,
    Error,
    ErrorKind,
    Function,
    Number,
    QExpr,
    SExpr,
    Symbol,
)


@given(st.integers(min_value=INT_MIN, max_value=INT_MAX))
def test_number_is_irreducible(n):
    env = Environment()
    register(env)
    assert evaluate(env, Number(n)) == Number(n)


@pytest.mark.parametrize(
    "value",
    [
        Function("+"),
        QExpr([Symbol("undefined"), SExpr([Number(1), Number(2)])]),
        Error(ErrorKind.BadNumber),
    ],
)
def test_inert_values_come_back_unchanged(env, value):
    assert evaluate(env, value) is value


def test_symbol_lookup(env):
    env.put("x", Number(10))
    assert evaluate(env, Symbol("x")) == Number(10)
    assert evaluate(env, Symbol("+")) == Function("+")


def test_unbound_symbol_is_an_ordinary_result(env):
    assert evaluate(env, Symbol("nope")) == Error(ErrorKind.UnboundSymbol)


def test_empty_sexpr_reduces_to_itself(env):
    v = SExpr()
    assert evaluate(env, v) is v


def test_singleton_reduces_to_its_element(env):
    assert evaluate(env, SExpr([Number(5)])) == Number(5)
    assert evaluate(env, SExpr([SExpr([Number(5)])])) == Number(5)
    assert evaluate(env, SExpr([Symbol("+")])) == Function("+")


def test_application(env):
    expr = SExpr([Symbol("+"), Number(1), SExpr([Symbol("*"), Number(2), Number(3)])])
    assert evaluate(env, expr) == Number(7)


def test_not_a_function(env):
    assert evaluate(env, SExpr([Number(1), Number(2)])) == Error(ErrorKind.NotAFunction)


def test_leftmost_error_wins(env):
    expr = SExpr([
        Symbol("+"),
        SExpr([Symbol("/"), Number(1), Number(0)]),
        Symbol("unbound"),
    ])
    assert evaluate(env, expr) == Error(ErrorKind.DivisionByZero)


def test_error_in_head_position(env):
    expr = SExpr([Symbol("unbound"), SExpr([Symbol("/"), Number(1), Number(0)])])
    assert evaluate(env, expr) == Error(ErrorKind.UnboundSymbol)


def test_children_are_reduced_left_to_right(env):
    # The first definition is visible to the second child
    expr = SExpr([
        Symbol("list"),
        SExpr([Symbol("muta"), QExpr([Symbol("a")]), Number(1)]),
        Symbol("a"),
    ])
    assert evaluate(env, expr) == QExpr([SExpr(), Number(1)])


def test_later_children_still_run_when_an_earlier_one_fails(env):
    expr = SExpr([
        Symbol("+"),
        SExpr([Symbol("/"), Number(1), Number(0)]),
        SExpr([Symbol("muta"), QExpr([Symbol("side")]), Number(7)]),
    ])
    assert evaluate(env, expr) == Error(ErrorKind.DivisionByZero)
    assert env.get("side") == Number(7)


def test_unknown_function(env):
    env.put("f", Function("no-such-primitive"))
    expr = SExpr([Symbol("f"), Number(1), Number(2)])
    assert evaluate(env, expr) == Error(ErrorKind.UnknownFunction)


def test_qexpr_children_are_not_reduced(env):
    expr = SExpr([QExpr([SExpr([Symbol("/"), Number(1), Number(0)])])])
    assert evaluate(env, expr) == QExpr([SExpr([Symbol("/"), Number(1), Number(0)])])
