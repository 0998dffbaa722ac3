from __future__ import annotations

from blisp import LispValue
from blisp.builtin.env_builtin import register
from blisp.errors import BlispNestingError
from blisp.evaluation.evaluator import evaluate
from blisp.printer import to_str
from blisp.reader.parser import parse
from blisp.reader.reader import read
from blisp.types.environment import Environment

NESTING_MESSAGE = "expression nested too deeply"


class Interpreter:
    """
    Orchestrates reading, evaluating and printing blisp code.
    Keeps one Environment across calls so definitions persist.

    Reading, reduction and printing all recurse once per bracket level; input
    nested past Python's recursion limit raises BlispNestingError (or
    BlispSyntaxError from the parser) for that input only.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = Environment()
        register(self.env)

        if prelude:
            self.eval(prelude)

    def read(self, code: str) -> LispValue:
        """Parse `code` and read it into an S-expression of its top-level forms.

        Raises BlispSyntaxError if `code` does not match the grammar.
        """
        tree = parse(code)
        try:
            return read(tree)
        except RecursionError:
            raise BlispNestingError(NESTING_MESSAGE) from None

    def eval(self, code: str) -> LispValue:
        value = self.read(code)
        try:
            return evaluate(self.env, value)
        except RecursionError:
            raise BlispNestingError(NESTING_MESSAGE) from None

    def eval_to_str(self, code: str) -> str:
        result = self.eval(code)
        try:
            return to_str(result)
        except RecursionError:
            raise BlispNestingError(NESTING_MESSAGE) from None
