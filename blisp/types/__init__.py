from blisp.types.value import (
    Error,
    ErrorKind,
    Function,
    Number,
    QExpr,
    Sequence,
    SExpr,
    Symbol,
    Value,
    copy_value,
)
from blisp.types.environment import Environment

__all__ = [
    "Environment",
    "Error",
    "ErrorKind",
    "Function",
    "Number",
    "QExpr",
    "Sequence",
    "SExpr",
    "Symbol",
    "Value",
    "copy_value",
]
