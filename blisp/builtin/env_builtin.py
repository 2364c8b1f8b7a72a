"""Built-in functions for the blisp runtime environment.

This module defines arithmetic, comparison, list processing and output
builtins, plus `register`, which installs the whole library (including the
evaluation forms and `load`) into an environment.

Every builtin has the signature (env, args) -> value and validates its own
arguments, returning a LispError instead of raising.
"""
from __future__ import annotations

import operator
from itertools import chain
from typing import Callable, Optional

from blisp import LispValue, BuiltinFn
from blisp.builtin.checks import (
    ANY,
    NUMBER,
    STRING,
    Q_EXPRESSION,
    expect_all,
    expect_args,
)
from blisp.builtin import form_builtin
from blisp.modules.loader import make_load, read_text_file as default_read_text_file
from blisp.printer import render
from blisp.types.environment import Environment
from blisp.types.symbol import Symbol
from blisp.types.values import LispError, SExpr, QExpr, is_equal, wrap_number


# -------------------------------
# Arithmetic
# -------------------------------
def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, like a machine divide."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _fold(name: str, args: QExpr, op: Callable[[int, int], int]) -> LispValue:
    if (err := expect_all(name, args, NUMBER)) is not None:
        return err
    result = args[0]
    for x in args[1:]:
        result = wrap_number(op(result, x))
    return result


def add(env: Environment, args: QExpr) -> LispValue:
    """Return the sum of all arguments."""
    return _fold("+", args, operator.add)


def sub(env: Environment, args: QExpr) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    result = _fold("-", args, operator.sub)
    if len(args) == 1 and not isinstance(result, LispError):
        return wrap_number(-result)
    return result


def mul(env: Environment, args: QExpr) -> LispValue:
    """Return the product of all arguments."""
    return _fold("*", args, operator.mul)


def div(env: Environment, args: QExpr) -> LispValue:
    """Divide left-to-right, truncating toward zero."""
    try:
        return _fold("/", args, _truncating_div)
    except ZeroDivisionError:
        return LispError("division by zero")


# -------------------------------
# Comparison
# -------------------------------
def _compare(name: str, args: QExpr, op: Callable[[int, int], bool]) -> LispValue:
    if (err := expect_args(name, args, NUMBER, NUMBER)) is not None:
        return err
    return int(op(args[0], args[1]))


def gt(env: Environment, args: QExpr) -> LispValue:
    return _compare(">", args, operator.gt)


def gte(env: Environment, args: QExpr) -> LispValue:
    return _compare(">=", args, operator.ge)


def lt(env: Environment, args: QExpr) -> LispValue:
    return _compare("<", args, operator.lt)


def lte(env: Environment, args: QExpr) -> LispValue:
    return _compare("<=", args, operator.le)


def equals(env: Environment, args: QExpr) -> LispValue:
    """Deep structural equality of two values, as 1 or 0."""
    if (err := expect_args("==", args, ANY, ANY)) is not None:
        return err
    return int(is_equal(args[0], args[1]))


# -------------------------------
# Lists
# -------------------------------
def array(env: Environment, args: QExpr) -> LispValue:
    """Return the argument list itself as a Q-Expression."""
    return QExpr(args)


def _non_empty_list(name: str, args: QExpr) -> Optional[LispError]:
    if (err := expect_args(name, args, Q_EXPRESSION)) is not None:
        return err
    if not args[0]:
        return LispError(f"Function {name} passed empty Q-Expression")
    return None


def head(env: Environment, args: QExpr) -> LispValue:
    """Return the first element of a non-empty Q-Expression."""
    if (err := _non_empty_list("head", args)) is not None:
        return err
    return args[0][0]


def tail(env: Environment, args: QExpr) -> LispValue:
    """Return the last element of a non-empty Q-Expression.

    Not the rest of the list: `(tail [1 2 3])` is 3.
    """
    if (err := _non_empty_list("tail", args)) is not None:
        return err
    return args[0][-1]


def concat(env: Environment, args: QExpr) -> LispValue:
    """Join the elements of every Q-Expression argument, in order."""
    if (err := expect_all("concat", args, Q_EXPRESSION)) is not None:
        return err
    return QExpr(chain.from_iterable(args))


# -------------------------------
# Output and errors
# -------------------------------
def print_builtin(env: Environment, args: QExpr) -> LispValue:
    """Print space-separated renderings of args followed by newline; returns ()."""
    print(" ".join(render(a) for a in args))
    return SExpr()


def error_builtin(env: Environment, args: QExpr) -> LispValue:
    """Turn a string into an error value."""
    if (err := expect_args("error", args, STRING)) is not None:
        return err
    return LispError(args[0])


def register(env: Environment, read_text_file: Callable[[str], str] | None = None) -> None:
    """Register all builtin functions into the given environment.

    `read_text_file` is the file reader used by `load`; it defaults to reading
    from the filesystem, searching BLISP_LOAD_PATH for relative paths.
    """
    builtins: dict[str, BuiltinFn] = {
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        ">": gt,
        ">=": gte,
        "<": lt,
        "<=": lte,
        "==": equals,
        "array": array,
        "head": head,
        "tail": tail,
        "concat": concat,
        "print": print_builtin,
        "error": error_builtin,
        "eval": form_builtin.eval_builtin,
        "def": form_builtin.define,
        "\\": form_builtin.lambda_builtin,
        "if": form_builtin.if_builtin,
        "!": form_builtin.logical_not,
        "load": make_load(read_text_file or default_read_text_file),
    }
    env.update({Symbol(name): fn for name, fn in builtins.items()})
