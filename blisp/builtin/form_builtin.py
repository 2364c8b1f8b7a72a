"""Builtins that evaluate code or change bindings: eval, def, \\, if and !.

They are ordinary builtins, so their arguments arrive already evaluated;
code to be run later is passed as Q-Expressions and turned into
S-Expressions here.
"""
from __future__ import annotations

import logging

from blisp import LispValue
from blisp.builtin.checks import (
    ANY,
    Q_EXPRESSION,
    arity_error,
    check_type,
    expect_args,
)
from blisp.evaluation.evaluator import evaluate
from blisp.types.environment import Environment
from blisp.types.lambda_fn import Lambda
from blisp.types.symbol import Symbol
from blisp.types.values import LispError, SExpr, QExpr, is_truthy, type_name

logger = logging.getLogger(__name__)


def eval_builtin(env: Environment, args: QExpr) -> LispValue:
    """(eval [expr...]) evaluates the list as an S-Expression in the calling scope."""
    if (err := expect_args("eval", args, Q_EXPRESSION)) is not None:
        return err
    return evaluate(env, SExpr(args[0]))


def define(env: Environment, args: QExpr) -> LispValue:
    """
    (def [name...] value...)
    Binds each name to the value in the same position, in the outermost scope.
    """
    if len(args) < 2:
        return arity_error("def", 2, len(args), at_least=True)
    if (err := check_type("def", 1, Q_EXPRESSION, args[0])) is not None:
        return err

    names = args[0]
    for name in names:
        if not isinstance(name, Symbol):
            return LispError(f"Function def cannot define non-symbol {type_name(name)}")
    values = args[1:]
    if len(names) != len(values):
        return arity_error("def", len(names) + 1, len(args))

    for name, value in zip(names, values):
        logger.debug("def %s", name)
        env.define_global(name, value)
    return SExpr()


def lambda_builtin(env: Environment, args: QExpr) -> LispValue:
    """(\\ [formals...] [body...]) builds a closure whose scope is a child of `env`."""
    if (err := expect_args("\\", args, Q_EXPRESSION, Q_EXPRESSION)) is not None:
        return err
    formals, body = args
    for formal in formals:
        if not isinstance(formal, Symbol):
            return LispError(f"Function \\ cannot take non-symbol parameter {type_name(formal)}")
    return Lambda(formals, body, Environment(outer=env))


def if_builtin(env: Environment, args: QExpr) -> LispValue:
    """(if cond [then...]) or (if cond [then...] [else...])."""
    if len(args) not in (2, 3):
        return arity_error("if", 2 if len(args) < 2 else 3, len(args))

    cond = args[0]
    if isinstance(cond, LispError):
        return cond
    for position, branch in enumerate(args[1:], start=2):
        if (err := check_type("if", position, Q_EXPRESSION, branch)) is not None:
            return err

    if is_truthy(cond):
        return evaluate(env, SExpr(args[1]))
    elif len(args) > 2:
        return evaluate(env, SExpr(args[2]))
    else:
        return SExpr()


def logical_not(env: Environment, args: QExpr) -> LispValue:
    """(! x) is 1 when x is falsy, else 0."""
    if (err := expect_args("!", args, ANY)) is not None:
        return err
    return int(not is_truthy(args[0]))
