"""Renders Values as the text shown to the user."""

from __future__ import annotations

from io import StringIO

from blisp.types.value import Error, Function, Number, QExpr, SExpr, Symbol, Value

FUNCTION_PLACEHOLDER = "<function>"


def _write_seq(buffer: StringIO, v: SExpr | QExpr, open_: str, close: str) -> None:
    buffer.write(open_)
    for i, cell in enumerate(v.cells):
        if i:
            buffer.write(" ")
        _write(buffer, cell)
    buffer.write(close)


def _write(buffer: StringIO, v: Value) -> None:
    match v:
        case Number():
            buffer.write(str(v.value))
        case Symbol():
            buffer.write(v.name)
        case Error():
            buffer.write(f"Error: {v.message}")
        case Function():
            buffer.write(FUNCTION_PLACEHOLDER)
        case SExpr():
            _write_seq(buffer, v, "(", ")")
        case QExpr():
            _write_seq(buffer, v, "{", "}")
        case _:
            raise TypeError(f"Not a blisp value: {v!r}")


def to_str(v: Value) -> str:
    """Render `v` on a single line."""
    with StringIO() as buffer:
        _write(buffer, v)
        return buffer.getvalue()
