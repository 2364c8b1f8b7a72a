"""Canonical textual form of blisp values."""

from __future__ import annotations

from io import StringIO

from blisp import LispValue
from blisp.reader.reader import escape
from blisp.types.symbol import Symbol
from blisp.types.lambda_fn import Lambda
from blisp.types.values import LispError, SExpr, QExpr

BUILTIN_PLACEHOLDER = "<builtin>"


def _write_expr(buffer: StringIO, items: list[LispValue], open_: str, close: str) -> None:
    buffer.write(open_)
    buffer.write(" ".join(render(v) for v in items))
    buffer.write(close)


def render(value: LispValue) -> str:
    """Render any value the way the REPL would show it."""
    match value:
        case LispError():
            return f"Error: {value.message}"
        case Symbol():
            return value.id
        case str():
            return f'"{escape(value)}"'
        case int():
            return str(value)
        case Lambda():
            return str(value)
    with StringIO() as buffer:
        if isinstance(value, SExpr):
            _write_expr(buffer, value, "(", ")")
        elif isinstance(value, QExpr):
            _write_expr(buffer, value, "[", "]")
        elif callable(value):
            buffer.write(BUILTIN_PLACEHOLDER)
        else:
            buffer.write(repr(value))
        return buffer.getvalue()
