"""Reader: converts a parser SyntaxNode tree into blisp values."""

from __future__ import annotations

from blisp import LispValue
from blisp.errors import BlispSyntaxError
from blisp.reader.parser import SyntaxNode
from blisp.types.symbol import Symbol
from blisp.types.values import LispError, SExpr, QExpr, NUMBER_MIN, NUMBER_MAX

UNESCAPES: dict[str, str] = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
    "0": "\0",
}

ESCAPES: dict[str, str] = {v: "\\" + k for k, v in UNESCAPES.items() if k != "'"}

# Nodes that only carry layout.
IGNORED_TAGS = {"comment", "char"}


def unescape(text: str) -> str:
    """Decode backslash escapes; an unknown escape keeps the escaped character."""
    out = []
    chars = iter(text)
    for c in chars:
        if c == "\\":
            nxt = next(chars, "")
            out.append(UNESCAPES.get(nxt, nxt))
        else:
            out.append(c)
    return "".join(out)


def escape(text: str) -> str:
    return "".join(ESCAPES.get(c, c) for c in text)


# Most significant digits an in-range literal can have.
MAX_NUMBER_DIGITS = len(str(NUMBER_MAX))


def read_number(text: str) -> LispValue:
    if len(text.lstrip("-").lstrip("0")) > MAX_NUMBER_DIGITS:
        return LispError("invalid number")
    n = int(text)
    if n < NUMBER_MIN or n > NUMBER_MAX:
        return LispError("invalid number")
    return n


def read(tree: SyntaxNode) -> LispValue:
    """Convert a syntax tree node (and its children) to a value."""
    match tree.tag:
        case "number":
            return read_number(tree.contents)
        case "string":
            return unescape(tree.contents[1:-1])
        case "symbol":
            return Symbol(tree.contents)
        case "root" | "sexpr":
            return SExpr(read(c) for c in tree.children if c.tag not in IGNORED_TAGS)
        case "qexpr":
            return QExpr(read(c) for c in tree.children if c.tag not in IGNORED_TAGS)
    raise BlispSyntaxError(f"unknown syntax node {tree.tag!r}", line=tree.line, column=tree.column)
