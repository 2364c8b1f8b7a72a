from __future__ import annotations

import logging
import sys
from typing import Callable

from blisp import LispValue
from blisp.config import get_recursion_limit
from blisp.errors import BlispSyntaxError
from blisp.evaluation.evaluator import evaluate
from blisp.printer import render
from blisp.reader.parser import parse
from blisp.reader.reader import read, IGNORED_TAGS
from blisp.types.environment import Environment
from blisp.types.values import LispError
from blisp.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates blisp code against one root environment.
    Bindings made by `def` persist across calls.

    Creating one raises Python's recursion limit to BLISP_RECURSION_LIMIT
    (default 10000) if it is lower; that allows roughly 900 nested blisp calls.
    """

    def __init__(self, read_text_file: Callable[[str], str] | None = None):
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)
        self.env: Environment = Environment()
        register(self.env, read_text_file)

    def eval(self, code: str) -> LispValue:
        """Evaluate a line of input as one S-Expression, so `+ 1 2` is 3."""
        try:
            tree = parse(code)
        except BlispSyntaxError as e:
            logger.debug("parse failed: %s", e)
            return LispError(str(e))
        return evaluate(self.env, read(tree))

    def eval_all(self, code: str, filename: str = "<input>") -> list[LispValue]:
        """Evaluate each top-level form separately and return every result."""
        try:
            tree = parse(code, filename)
        except BlispSyntaxError as e:
            return [LispError(str(e))]
        return [
            evaluate(self.env, read(node))
            for node in tree.children
            if node.tag not in IGNORED_TAGS
        ]

    @staticmethod
    def render(value: LispValue) -> str:
        return render(value)
