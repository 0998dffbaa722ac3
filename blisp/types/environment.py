"""Runtime environment for blisp.

The Environment is a single, unscoped, ordered table from symbol names to
values. Both directions copy: `put` stores a copy of what it is given and
`get` hands back a copy, so nothing outside the table ever holds a reference
into it.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator

from blisp.types.value import Error, ErrorKind, Value, copy_value

logger = logging.getLogger(__name__)


class Environment:
    """Ordered mapping from names to values with last-write-wins semantics."""

    __slots__ = ("vars",)

    def __init__(self):
        # dict keeps insertion order; a rebinding keeps the entry's position
        self.vars: dict[str, Value] = {}

    def get(self, name: str) -> Value:
        """Return a copy of the value bound to `name`.

        An unbound name is not an exception: it yields an UnboundSymbol error
        value, which the evaluator propagates like any other result.
        """
        v = self.vars.get(name)
        if v is None:
            return Error(ErrorKind.UnboundSymbol)
        return copy_value(v)

    def put(self, name: str, value: Value) -> None:
        """Bind `name` to a copy of `value`, replacing any prior binding."""
        if name in self.vars:
            logger.debug("Rebinding %s", name)
        self.vars[name] = copy_value(value)

    def names(self) -> list[str]:
        return list(self.vars)

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
