# Core type aliases for blisp's data model.
# Runtime values are plain Python types where one fits (int for numbers, str for
# strings) plus a few small classes for the rest (Symbol, LispError, SExpr,
# QExpr, Lambda). Builtins are ordinary Python callables taking (env, args).
#
# Naming guidance:
# - SyntaxTree: the parser's node tree, consumed only by the reader.
# - LispValue:  anything the reader produces or the evaluator returns.

import logging
from typing import Any, Callable

# Runtime value alias
LispValue = Any

# Builtin procedure type: (Environment, QExpr of arguments) -> LispValue
BuiltinFn = Callable[..., LispValue]

logging.getLogger(__name__).addHandler(logging.NullHandler())
