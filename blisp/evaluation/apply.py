"""Application engine for blisp.

Builtins are called directly with the calling environment and their
argument list. Closures bind their arguments positionally into their own
scope and then evaluate their body there. Arity is strict: a closure must
receive exactly as many arguments as it has formals.
"""

from __future__ import annotations

from blisp import LispValue, BuiltinFn
from blisp.builtin.checks import arity_error
from blisp.types.environment import Environment
from blisp.types.lambda_fn import Lambda
from blisp.types.values import LispError, SExpr, QExpr


def apply_lambda(fn: Lambda, args: QExpr) -> LispValue:
    """Bind `args` to the formals of `fn` and evaluate its body in its own scope."""
    from blisp.evaluation.evaluator import evaluate

    if len(args) != len(fn.formals):
        return arity_error("lambda", len(fn.formals), len(args))

    for name, value in zip(fn.formals, args):
        fn.env.put(name, value)
    return evaluate(fn.env, SExpr(fn.body))


def call(env: Environment, fn: Lambda | BuiltinFn, args: QExpr) -> LispValue:
    """Apply either a closure or a builtin to an already-evaluated argument list."""
    if isinstance(fn, Lambda):
        return apply_lambda(fn, args)
    elif callable(fn):
        return fn(env, args)
    else:
        return LispError("not a function")
