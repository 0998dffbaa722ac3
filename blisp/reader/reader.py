"""Reader: converts a grammar parse tree into a Value tree."""

from __future__ import annotations

from blisp import ParseTree
from blisp.types.value import (
    INT_MAX,
    INT_MIN,
    Error,
    ErrorKind,
    Number,
    QExpr,
    SExpr,
    Symbol,
    Value,
)

DELIMITERS = frozenset("(){}")


def read_number(node: ParseTree) -> Value:
    try:
        n = int(node.contents)
    except ValueError:
        return Error(ErrorKind.BadNumber)
    if not INT_MIN <= n <= INT_MAX:
        return Error(ErrorKind.BadNumber)
    return Number(n)


def read(node: ParseTree) -> Value:
    """Build the Value for `node` and everything below it.

    Leaves tagged number/symbol become Number/Symbol; the root (">") and
    sexpr nodes become SExpr, qexpr nodes become QExpr. Delimiter chars and
    the "regex" anchors are skipped.
    """
    rules = node.tag.split("|")
    if "number" in rules:
        return read_number(node)
    if "symbol" in rules:
        return Symbol(node.contents)

    if node.tag == ">" or "sexpr" in rules:
        x: SExpr | QExpr = SExpr()
    elif "qexpr" in rules:
        x = QExpr()
    else:
        raise ValueError(f"Cannot read parse node tagged {node.tag!r}")

    for child in node.children:
        if child.contents in DELIMITERS or child.tag == "regex":
            continue
        x.add(read(child))
    return x
