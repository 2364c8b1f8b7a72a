"""Runtime value classes and the helpers that treat every value case alike.

Numbers are plain ints and strings are plain strs. The remaining cases get
small classes so the evaluator can tell them apart by type:

- LispError: an error travelling in the normal return channel.
- SExpr: a list that evaluates as a function application.
- QExpr: a quoted list that is never evaluated automatically.

Builtins are Python callables and closures are Lambda instances.
"""

from __future__ import annotations

from blisp import LispValue
from blisp.types.symbol import Symbol
from blisp.types.lambda_fn import Lambda

# Numbers behave like a signed machine word.
WORD_BITS = 64
NUMBER_MIN = -(1 << (WORD_BITS - 1))
NUMBER_MAX = (1 << (WORD_BITS - 1)) - 1


class LispError:
    """An error value; carries a human-readable message."""

    __slots__ = ("message",)

    def __init__(self, message: str):
        self.message = message

    def __eq__(self, other) -> bool:
        return isinstance(other, LispError) and self.message == other.message

    def __hash__(self) -> int:
        return hash(("error", self.message))

    def __repr__(self) -> str:
        return f"LispError({self.message!r})"

    def __str__(self) -> str:
        return f"Error: {self.message}"


class _ListExpr(list):
    """Shared base for the two list forms; equality also requires the same form."""

    __hash__ = None

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and list.__eq__(self, other)

    def __ne__(self, other) -> bool:
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"


class SExpr(_ListExpr):
    pass


class QExpr(_ListExpr):
    pass


def is_function(value: LispValue) -> bool:
    return isinstance(value, Lambda) or callable(value)


def wrap_number(n: int) -> int:
    """Reduce n into the signed 64-bit range, wrapping like native arithmetic."""
    n &= (1 << WORD_BITS) - 1
    return n - (1 << WORD_BITS) if n > NUMBER_MAX else n


def type_name(value: LispValue) -> str:
    match value:
        case LispError():
            return "Error"
        case SExpr():
            return "S-Expression"
        case QExpr():
            return "Q-Expression"
        case Symbol():
            return "Symbol"
        case str():
            return "String"
        case int():
            return "Number"
        case _ if is_function(value):
            return "Function"
    return type(value).__name__


def copy_value(value: LispValue) -> LispValue:
    """Deep copy of a value.

    Atoms are immutable and returned as is. Lists are rebuilt element by
    element and closures copy their captured scope too.
    """
    if isinstance(value, _ListExpr):
        return type(value)(copy_value(v) for v in value)
    if isinstance(value, Lambda):
        return value.copy()
    return value


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality; builtins compare by identity, closures by formals and body."""
    if a is b:
        return True
    if type_name(a) != type_name(b):
        return False
    if isinstance(a, _ListExpr):
        if type(a) is not type(b) or len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Lambda):
        if not isinstance(b, Lambda):
            return False
        return is_equal(a.formals, b.formals) and is_equal(a.body, b.body)
    if callable(a):
        # builtins: identity was already checked above
        return False
    return a == b


def is_truthy(value: LispValue) -> bool:
    match value:
        case LispError():
            return False
        case _ListExpr():
            return len(value) > 0
        case Symbol():
            return True
        case str():
            return value != ""
        case int():
            return value != 0
    return is_function(value)
