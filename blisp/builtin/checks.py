"""Argument validation shared by every builtin.

Each check returns a LispError describing the first problem it finds, or
None when the arguments are acceptable, so builtins can write

    if (err := expect_args("head", args, Q_EXPRESSION)) is not None:
        return err
"""

from __future__ import annotations

from typing import Optional

from blisp import LispValue
from blisp.types.values import LispError, type_name

NUMBER = "Number"
STRING = "String"
SYMBOL = "Symbol"
FUNCTION = "Function"
Q_EXPRESSION = "Q-Expression"
ANY = "Any"


def arity_error(func_name: str, expected: int, got: int, at_least: bool = False) -> LispError:
    qualifier = "at least " if at_least else ""
    return LispError(f"Function {func_name} expected {qualifier}{expected} args but got {got}")


def type_error(func_name: str, position: int, expected: str, actual: LispValue) -> LispError:
    """`position` counts arguments from 1."""
    return LispError(
        f"Function {func_name} argument {position} expected {expected} but got {type_name(actual)}"
    )


def check_type(func_name: str, position: int, expected: str, value: LispValue) -> Optional[LispError]:
    if expected == ANY or type_name(value) == expected:
        return None
    return type_error(func_name, position, expected, value)


def expect_args(func_name: str, args: list[LispValue], *expected_types: str) -> Optional[LispError]:
    """Validate an exact argument count and the type of each position."""
    if len(args) != len(expected_types):
        return arity_error(func_name, len(expected_types), len(args))
    for i, (arg, expected) in enumerate(zip(args, expected_types), start=1):
        if (err := check_type(func_name, i, expected, arg)) is not None:
            return err
    return None


def expect_all(func_name: str, args: list[LispValue], expected: str, minimum: int = 1) -> Optional[LispError]:
    """Validate a variadic argument list: at least `minimum` args, all of one type."""
    if len(args) < minimum:
        return arity_error(func_name, minimum, len(args), at_least=True)
    for i, arg in enumerate(args, start=1):
        if (err := check_type(func_name, i, expected, arg)) is not None:
            return err
    return None
