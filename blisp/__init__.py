# Core type aliases for blisp's data model.
# Values are small tagged classes (see blisp.types.value); these aliases only
# name the roles they play so signatures read the same across modules.
#
# Naming guidance:
# - ParseTree: the generic tagged tree produced by the grammar (blisp.reader.parser).
# - LispValue: a reader- or evaluator-produced Value.

import logging
from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Tagged tree produced by the grammar, consumed by the reader
ParseTree = Any

# Primitive signature: (environment, owned argument list) -> fresh value
BuiltinFn = Callable[..., LispValue]

__version__ = "0.0.0.0.1"

logging.getLogger(__name__).addHandler(logging.NullHandler())
