"""Value model for blisp.

A Value is one of six tagged variants: Error, Number, Symbol, Function,
SExpr and QExpr. Sequences own their cells; removal operations (pop, take,
join, retag) move cells out of the source instead of sharing them, so a cell
always has exactly one owner.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Iterator

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def wrap_int(n: int) -> int:
    """Reduce `n` into the signed 64-bit range (two's complement wrap)."""
    return (n - INT_MIN) % 2**64 + INT_MIN


class ErrorKind(Enum):
    BadNumber = "invalid number!"
    UnboundSymbol = "unbound symbol!"
    NotAFunction = "first element is not a function!"
    BadArgCount = "Function passed incorrect number of arguments!"
    BadArgType = "Function passed incorrect type!"
    DivisionByZero = "Division By Zero!"
    NonNumericOperand = "Cannot operate on non-number!"
    ArityMismatch = "Function 'muta' cannot define incorrect number of values to symbols!"
    UnknownFunction = "Unknown Function!"

    @property
    def message(self) -> str:
        return self.value


class Value:
    __slots__ = ()


class Error(Value):
    __slots__ = ("kind", "message")

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        self.message = message if message is not None else kind.message

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Error)
            and self.kind is other.kind
            and self.message == other.message
        )

    def __repr__(self):
        return f"Error({self.kind.name}, {self.message!r})"


class Number(Value):
    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __repr__(self):
        return f"Number({self.value})"


class Symbol(Value):
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to keep environment lookups cheap
        self.name = sys.intern(name)

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __repr__(self):
        return f"Symbol({self.name!r})"


class Function(Value):
    """Reference to a fixed primitive, by name. Carries no captured state."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __eq__(self, other) -> bool:
        return isinstance(other, Function) and self.name == other.name

    def __repr__(self):
        return f"Function({self.name!r})"


class Sequence(Value):
    """Ordered sequence of owned cells; base of SExpr and QExpr."""

    __slots__ = ("cells",)

    def __init__(self, cells: list[Value] | None = None):
        self.cells: list[Value] = cells if cells is not None else []

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __getitem__(self, i: int) -> Value:
        return self.cells[i]

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.cells == other.cells

    def __repr__(self):
        return f"{type(self).__name__}({self.cells!r})"

    def add(self, v: Value) -> Sequence:
        """Append `v` (taking ownership) and return self."""
        self.cells.append(v)
        return self

    def pop(self, i: int) -> Value:
        """Remove and return the cell at `i`; later cells shift left."""
        return self.cells.pop(i)

    def take(self, i: int) -> Value:
        """Pop the cell at `i` and drop the rest of this sequence."""
        v = self.pop(i)
        self.cells.clear()
        return v

    def join(self, other: Sequence) -> Sequence:
        """Move every cell of `other` onto the end of self, in order."""
        self.cells.extend(other.cells)
        other.cells.clear()
        return self

    def retag(self, cls: type[Sequence]) -> Sequence:
        """Move all cells into a fresh sequence of type `cls`."""
        moved = cls(self.cells)
        self.cells = []
        return moved


class SExpr(Sequence):
    """Active sequence: reducing it applies its first element."""

    __slots__ = ()


class QExpr(Sequence):
    """Inert, quoted sequence. Never reduced automatically."""

    __slots__ = ()


def copy_value(v: Value) -> Value:
    """Deep copy of `v`; sequences get freshly copied cells."""
    match v:
        case Error():
            return Error(v.kind, v.message)
        case Number():
            return Number(v.value)
        case Symbol():
            return Symbol(v.name)
        case Function():
            return Function(v.name)
        case SExpr() | QExpr():
            return type(v)([copy_value(c) for c in v.cells])
    raise TypeError(f"Not a blisp value: {v!r}")
