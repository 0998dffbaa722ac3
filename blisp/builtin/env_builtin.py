"""Built-in functions for the blisp runtime environment.

Every primitive takes the environment and an owned, already-evaluated
argument list (an SExpr) and returns a fresh Value. Failures are returned as
Error values, never raised. Cells that a primitive returns are moved out of
the argument list; everything else is dropped with it.
"""
from __future__ import annotations

import logging
import operator
from typing import Callable

from blisp import BuiltinFn
from blisp.types.environment import Environment
from blisp.types.value import (
    Error,
    ErrorKind,
    Function,
    Number,
    QExpr,
    SExpr,
    Symbol,
    Value,
    wrap_int,
)

logger = logging.getLogger(__name__)


def bad_arg_count(name: str) -> Error:
    return Error(ErrorKind.BadArgCount, f"Function '{name}' passed incorrect number of arguments!")


def bad_arg_type(name: str) -> Error:
    return Error(ErrorKind.BadArgType, f"Function '{name}' passed incorrect type!")


def _single_qexpr(name: str, a: SExpr) -> Error | None:
    """Check that `a` holds exactly one argument and that it is a Q-expression."""
    if len(a) != 1:
        return bad_arg_count(name)
    if not isinstance(a[0], QExpr):
        return bad_arg_type(name)
    return None


# -------------------------------
# List operations
# -------------------------------
def builtin_list(env: Environment, a: SExpr) -> Value:
    """Return the argument list itself as a Q-expression."""
    return a.retag(QExpr)


def head(env: Environment, a: SExpr) -> Value:
    """Return a Q-expression holding only the first element of the argument."""
    if (err := _single_qexpr("head", a)) is not None:
        return err
    if len(a[0]) == 0:
        return Error(ErrorKind.BadArgType, "Function 'head' passed {}!")
    v = a.take(0)
    return QExpr().add(v.take(0))


def tail(env: Environment, a: SExpr) -> Value:
    """Return the argument with its first element removed."""
    if (err := _single_qexpr("tail", a)) is not None:
        return err
    if len(a[0]) == 0:
        return Error(ErrorKind.BadArgType, "Function 'tail' passed {}!")
    v = a.take(0)
    v.pop(0)
    return v


def join(env: Environment, a: SExpr) -> Value:
    """Concatenate Q-expressions in argument order."""
    for cell in a:
        if not isinstance(cell, QExpr):
            return bad_arg_type("++")
    if len(a) == 0:
        return QExpr()
    x = a.pop(0)
    while len(a) > 0:
        x.join(a.pop(0))
    return x


# -------------------------------
# Evaluation
# -------------------------------
def builtin_eval(env: Environment, a: SExpr) -> Value:
    """Retag a Q-expression as an S-expression and reduce it."""
    from blisp.evaluation.evaluator import evaluate

    if (err := _single_qexpr("eval", a)) is not None:
        return err
    x = a.take(0).retag(SExpr)
    return evaluate(env, x)


# -------------------------------
# Arithmetic
# -------------------------------
def _numeric_args(name: str, a: SExpr) -> Error | None:
    if len(a) == 0:
        return bad_arg_count(name)
    for cell in a:
        if not isinstance(cell, Number):
            return Error(ErrorKind.NonNumericOperand)
    return None


def _fold(name: str, a: SExpr, step: Callable[[int, int], int]) -> Value:
    """Left-to-right reduction seeded by the first argument."""
    if (err := _numeric_args(name, a)) is not None:
        return err
    result = a.pop(0).value
    while len(a) > 0:
        result = wrap_int(step(result, a.pop(0).value))
    return Number(result)


def quotient(x: int, y: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def add(env: Environment, a: SExpr) -> Value:
    return _fold("+", a, operator.add)


def sub(env: Environment, a: SExpr) -> Value:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if len(a) == 1 and isinstance(a[0], Number):
        return Number(wrap_int(-a.take(0).value))
    return _fold("-", a, operator.sub)


def mul(env: Environment, a: SExpr) -> Value:
    return _fold("*", a, operator.mul)


def div(env: Environment, a: SExpr) -> Value:
    """Divide the first number by each subsequent one.

    Stops at the first zero divisor; the rest of the list is never looked at.
    """
    if (err := _numeric_args("/", a)) is not None:
        return err
    result = a.pop(0).value
    while len(a) > 0:
        y = a.pop(0).value
        if y == 0:
            return Error(ErrorKind.DivisionByZero)
        result = wrap_int(quotient(result, y))
    return Number(result)


# -------------------------------
# Definitions
# -------------------------------
def muta(env: Environment, a: SExpr) -> Value:
    """Bind each symbol of the first argument to the matching remaining argument."""
    if len(a) == 0:
        return bad_arg_count("muta")
    syms = a[0]
    if not isinstance(syms, QExpr):
        return bad_arg_type("muta")
    for sym in syms:
        if not isinstance(sym, Symbol):
            return Error(ErrorKind.BadArgType, "Function 'muta' cannot define non-symbol!")
    if len(syms) != len(a) - 1:
        return Error(ErrorKind.ArityMismatch)

    syms = a.pop(0)
    for sym in syms:
        env.put(sym.name, a.pop(0))
    return SExpr()


# -------------------------------
# Dispatch and registration
# -------------------------------
BUILTINS: dict[str, BuiltinFn] = {
    "list": builtin_list,
    "head": head,
    "tail": tail,
    "eval": builtin_eval,
    "++": join,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "muta": muta,
}


def call_builtin(env: Environment, name: str, a: SExpr) -> Value:
    """Invoke the primitive called `name` with the owned argument list `a`."""
    fn = BUILTINS.get(name)
    if fn is None:
        return Error(ErrorKind.UnknownFunction)
    logger.debug("Applying %s to %d argument(s)", name, len(a))
    return fn(env, a)


def register(env: Environment) -> None:
    """Bind every primitive's name to a Function value in `env`."""
    for name in BUILTINS:
        env.put(name, Function(name))
