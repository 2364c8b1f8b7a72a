"""Core evaluator for the blisp interpreter.

Symbols are looked up, s-expressions are reduced by evaluating their
children and applying the first to the rest, and everything else evaluates
to itself. Errors are ordinary values: the first one produced while
evaluating an s-expression becomes the result of the whole expression.
"""

from __future__ import annotations

import logging

from blisp import LispValue
from blisp.types.environment import Environment
from blisp.types.symbol import Symbol
from blisp.types.values import LispError, SExpr, QExpr, is_function
from blisp.evaluation.apply import call

logger = logging.getLogger(__name__)


def evaluate(env: Environment, expr: LispValue) -> LispValue:
    """Evaluate `expr` in `env` and return the resulting value."""
    match expr:
        case Symbol():
            return env.get(expr)
        case SExpr():
            return eval_sexpr(env, expr)
    # --- Atoms, q-expressions, errors and functions return as-is ---
    return expr


def eval_sexpr(env: Environment, expr: SExpr) -> LispValue:
    values: list[LispValue] = []
    for child in expr:
        value = evaluate(env, child)
        if isinstance(value, LispError):
            return value
        values.append(value)

    if not values:
        return SExpr()
    if len(values) == 1:
        return values[0]

    head, *args = values
    if not is_function(head):
        logger.debug("not a function in head position: %r", head)
        return LispError("not a function")
    return call(env, head, QExpr(args))
