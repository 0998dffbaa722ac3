"""
  Lexer and parse-tree builder for blisp source text.

The grammar:

    number : /-?[0-9]+/ ;
    symbol : /[a-zA-Z0-9_+\\-*\\/\\\\=<>!&]+/ ;
    sexpr  : '(' <expr>* ')' ;
    qexpr  : '{' <expr>* '}' ;
    expr   : <number> | <symbol> | <sexpr> | <qexpr> ;
    lispy  : /^/ <expr>* /$/ ;

The output is a generic tagged tree (ParseNode) rather than values: tags are
`|`-joined rule names such as "expr|number|regex", the root is tagged ">",
delimiters appear as "char" leaves and the start/end anchors as "regex"
leaves. blisp.reader.reader turns that tree into Values.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from io import StringIO
from typing import Iterator, Optional

from blisp.errors import BlispNestingError, BlispSyntaxError

logger = logging.getLogger(__name__)


# number is tried before symbol, so "12x" is a number followed by a symbol
TOKEN_RE = re.compile(
    r"(?P<number>-?[0-9]+)"
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&]+)"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<lbrace>\{)"
    r"|(?P<rbrace>\})"
)

CLOSERS = {"lparen": "rparen", "lbrace": "rbrace"}
NODE_TAGS = {"lparen": "expr|sexpr|>", "lbrace": "expr|qexpr|>"}

Token = tuple[Optional[str], Optional[str], int]


@dataclass
class ParseNode:
    tag: str
    contents: str = ""
    children: list[ParseNode] = field(default_factory=list)
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        with StringIO() as buffer:
            try:
                self._write(buffer, 0)
            except RecursionError:
                raise BlispNestingError("expression nested too deeply") from None
            return buffer.getvalue()

    def _write(self, buffer: StringIO, depth: int) -> None:
        buffer.write("  " * depth)
        if self.contents:
            buffer.write(f"{self.tag}:{self.line}:{self.column} '{self.contents}'\n")
        else:
            buffer.write(f"{self.tag} \n")
        for child in self.children:
            child._write(buffer, depth + 1)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise BlispSyntaxError(f"unexpected character {source[pos]!r}", pos, source)
        yield m.lastgroup, m.group(), pos
        pos = m.end()


class TokenStream:
    def __init__(self, token_iter: Iterator[Token], source: str = ""):
        self.tokens = iter(token_iter)
        self.source = source
        self.buffer: list[Token] = []

    def peek(self) -> Token:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, len(self.source)
        return self.buffer[0]

    def advance(self) -> Token:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, len(self.source)))

    def _node(self, tag: str, contents: str, pos: int) -> ParseNode:
        line = self.source.count("\n", 0, pos) + 1
        column = pos - (self.source.rfind("\n", 0, pos) + 1) + 1
        return ParseNode(tag, contents, line=line, column=column)

    def _error(self, message: str, pos: int) -> BlispSyntaxError:
        return BlispSyntaxError(message, pos, self.source)

    def parse_expr(self) -> ParseNode:
        tok_type, tok_val, pos = self.advance()
        if tok_type is None:
            raise self._error("unexpected end of input", pos)

        if tok_type in ("number", "symbol"):
            return self._node(f"expr|{tok_type}|regex", tok_val, pos)

        if tok_type in CLOSERS:
            node = self._node(NODE_TAGS[tok_type], "", pos)
            node.children.append(self._node("char", tok_val, pos))
            closer = CLOSERS[tok_type]
            while True:
                nxt_type, nxt_val, nxt_pos = self.peek()
                if nxt_type is None:
                    raise self._error(f"unmatched {tok_val!r}", pos)
                if nxt_type == closer:
                    self.advance()
                    node.children.append(self._node("char", nxt_val, nxt_pos))
                    return node
                if nxt_type in ("rparen", "rbrace"):
                    raise self._error(f"unexpected {nxt_val!r}", nxt_pos)
                node.children.append(self.parse_expr())

        raise self._error(f"unexpected {tok_val!r}", pos)

    def parse_all(self) -> Iterator[ParseNode]:
        while True:
            tok_type, _, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> ParseNode:
    """Parse `source` into a root node holding every top-level expression.

    Raises BlispSyntaxError if the text does not match the grammar or is
    nested past the recursion limit.
    """
    stream = TokenStream(lex(source), source)
    root = ParseNode(">")
    root.children.append(ParseNode("regex"))
    try:
        root.children.extend(stream.parse_all())
    except RecursionError:
        logger.debug("Rejected input nested past the recursion limit")
        raise BlispSyntaxError("expression nested too deeply", 0, source) from None
    except BlispSyntaxError as err:
        logger.debug("Rejected input at offset %d: %s", err.position, err.message)
        raise
    root.children.append(ParseNode("regex"))
    return root
