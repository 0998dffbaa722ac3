from blisp.reader.parser import ParseNode, lex, parse
from blisp.reader.reader import read

__all__ = ["ParseNode", "lex", "parse", "read"]
