"""
  blisp lexer and parser

Turns source text into a SyntaxNode tree. The tree keeps everything the
source contained, comments and brackets included; the reader decides what
is meaningful:

    - root    -> the whole input, children are the top-level forms
    - sexpr   -> ( ... )
    - qexpr   -> [ ... ]
    - number  -> -?[0-9]+
    - string  -> "..." (raw text, quotes and escapes untouched)
    - symbol  -> identifiers and operators
    - comment -> ; to end of line
    - char    -> a bracket
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple

from blisp.errors import BlispSyntaxError


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\r\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&]+)",  # symbols and numbers
    re.DOTALL,
)

NUMBER_RE = re.compile(r"-?[0-9]+")

OPENERS = {"(": ("sexpr", ")"), "[": ("qexpr", "]")}


class Token(NamedTuple):
    type: str
    value: str
    line: int
    column: int


@dataclass
class SyntaxNode:
    tag: str
    contents: str = ""
    children: list[SyntaxNode] = field(default_factory=list)
    line: int = 1
    column: int = 1


def lex(source: str, filename: str = "<input>") -> Iterator[Token]:
    """Token generator: yields Token(type, value, line, column), skipping whitespace."""
    pos = 0
    line = 1
    line_start = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        column = pos - line_start + 1
        if not m:
            if source[pos] == '"':
                raise BlispSyntaxError("unterminated string literal", filename, line, column)
            raise BlispSyntaxError(f"unexpected character {source[pos]!r}", filename, line, column)
        kind = m.lastgroup
        text = m.group()
        if kind != "whitespace":
            if kind == "symbol" and NUMBER_RE.fullmatch(text):
                kind = "number"
            yield Token(kind, text, line, column)
        # keep line/column bookkeeping across multi-line whitespace and strings
        newlines = text.count("\n")
        if newlines:
            line += newlines
            line_start = pos + text.rindex("\n") + 1
        pos = m.end()


def parse(source: str, filename: str = "<input>") -> SyntaxNode:
    """Parse a whole program into a tree rooted at a `root` node.

    Raises BlispSyntaxError for unexpected characters, unterminated strings and
    unbalanced or mismatched brackets.
    """
    root = SyntaxNode("root")
    # (node being filled, closing bracket it expects)
    stack: list[tuple[SyntaxNode, str | None]] = [(root, None)]

    for tok in lex(source, filename):
        parent, expected = stack[-1]
        punct = SyntaxNode("char", tok.value, [], tok.line, tok.column)
        if tok.type in ("lparen", "lbracket"):
            tag, closer = OPENERS[tok.value]
            node = SyntaxNode(tag, "", [punct], tok.line, tok.column)
            parent.children.append(node)
            stack.append((node, closer))
        elif tok.type in ("rparen", "rbracket"):
            if expected is None:
                raise BlispSyntaxError(f"unexpected {tok.value!r}", filename, tok.line, tok.column)
            if tok.value != expected:
                raise BlispSyntaxError(
                    f"expected {expected!r} but found {tok.value!r}", filename, tok.line, tok.column
                )
            parent.children.append(punct)
            stack.pop()
        else:
            parent.children.append(SyntaxNode(tok.type, tok.value, [], tok.line, tok.column))

    if len(stack) > 1:
        node, expected = stack[-1]
        raise BlispSyntaxError(f"missing {expected!r} before end of input", filename, node.line, node.column)
    return root
