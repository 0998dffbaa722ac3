import pytest

from blisp.printer import to_str
from blisp.types.value import Error, ErrorKind, Function, Number, QExpr, SExpr, Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (Number(42), "42"),
        (Number(-7), "-7"),
        (Symbol("a\\b"), "a\\b"),
        (Function("+"), "<function>"),
        (Error(ErrorKind.DivisionByZero), "Error: Division By Zero!"),
        (Error(ErrorKind.UnboundSymbol), "Error: unbound symbol!"),
        (Error(ErrorKind.BadArgType, "Function 'head' passed {}!"), "Error: Function 'head' passed {}!"),
        (SExpr(), "()"),
        (QExpr(), "{}"),
        (SExpr([Symbol("+"), Number(1), Number(2)]), "(+ 1 2)"),
        (QExpr([Number(1), QExpr([Number(2), Number(3)]), SExpr([])]), "{1 {2 3} ()}"),
        (QExpr([Function("head")]), "{<function>}"),
    ]
)
def test_to_str(value, expected):
    assert to_str(value) == expected


@pytest.mark.parametrize("kind", list(ErrorKind))
def test_every_error_kind_renders(kind):
    assert to_str(Error(kind)) == f"Error: {kind.message}"


def test_to_str_rejects_foreign_objects():
    with pytest.raises(TypeError):
        to_str(3)
