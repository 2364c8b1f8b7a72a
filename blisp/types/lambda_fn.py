"""Closure representation for blisp."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blisp.types.environment import Environment
    from blisp.types.values import QExpr


class Lambda:
    """A first-class closure: formal parameters, body and an owned scope.

    `env` is created when the closure is built (a child of the defining
    scope) and belongs to this value alone, so copying a Lambda copies it.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: QExpr, body: QExpr, env: Environment):
        self.formals: QExpr = formals
        self.body: QExpr = body
        self.env: Environment = env

    def copy(self) -> Lambda:
        from blisp.types.values import copy_value
        return Lambda(copy_value(self.formals), copy_value(self.body), self.env.copy())

    def __str__(self) -> str:
        from blisp.printer import render
        with StringIO() as buffer:
            buffer.write("(\\ ")
            buffer.write(render(self.formals))
            buffer.write(" ")
            buffer.write(render(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
