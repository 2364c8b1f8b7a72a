from blisp.types.symbol import Symbol
from blisp.types.values import LispError, SExpr, QExpr
from blisp.types.lambda_fn import Lambda
from blisp.types.environment import Environment

__all__ = ["Symbol", "LispError", "SExpr", "QExpr", "Lambda", "Environment"]
