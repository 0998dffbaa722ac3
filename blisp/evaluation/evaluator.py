"""Core evaluator for the blisp interpreter.

Strict, eager, call-by-value reduction under a single global environment.
Errors are ordinary values: an S-expression whose children produce an Error
reduces to the leftmost one.
"""

from __future__ import annotations

from blisp.builtin.env_builtin import call_builtin
from blisp.types.environment import Environment
from blisp.types.value import Error, ErrorKind, Function, SExpr, Symbol, Value


def evaluate(env: Environment, v: Value) -> Value:
    """Reduce `v` to its final form. Takes ownership of `v`."""
    match v:
        case Symbol():
            return env.get(v.name)
        case SExpr():
            return evaluate_sexpr(env, v)
    # Number, Function, QExpr and Error are already irreducible
    return v


def evaluate_sexpr(env: Environment, v: SExpr) -> Value:
    # Reduce every child first, left to right
    for i, cell in enumerate(v.cells):
        v.cells[i] = evaluate(env, cell)

    for i, cell in enumerate(v.cells):
        if isinstance(cell, Error):
            return v.take(i)

    if len(v) == 0:
        return v
    if len(v) == 1:
        return v.take(0)

    f = v.pop(0)
    if not isinstance(f, Function):
        return Error(ErrorKind.NotAFunction)
    return call_builtin(env, f.name, v)
