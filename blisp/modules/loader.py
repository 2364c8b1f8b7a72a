"""Loading blisp source files.

`load` reads a file through an injectable reader, parses it and evaluates
each top-level form in the caller's environment. A form that evaluates to
an error is printed and the remaining forms still run.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from blisp import LispValue, BuiltinFn
from blisp.builtin.checks import STRING, expect_args
from blisp.config import get_load_roots, get_encoding
from blisp.errors import BlispSyntaxError
from blisp.evaluation.evaluator import evaluate
from blisp.printer import render
from blisp.reader.parser import parse
from blisp.reader.reader import read, IGNORED_TAGS
from blisp.types.environment import Environment
from blisp.types.values import LispError, SExpr, QExpr

logger = logging.getLogger(__name__)


def resolve_path(path: str) -> Path:
    """Resolve `path` as given, or underneath one of the BLISP_LOAD_PATH roots."""
    p = Path(path)
    if p.is_absolute() or p.is_file():
        return p
    for root in get_load_roots():
        candidate = root / p
        if candidate.is_file():
            return candidate
    return p


def read_text_file(path: str) -> str:
    resolved = resolve_path(path)
    logger.debug("reading %s from %s", path, resolved)
    return resolved.read_text(encoding=get_encoding())


def run_source(env: Environment, code: str, filename: str = "<input>") -> LispValue:
    """Evaluate every top-level form of `code` in `env`, printing any errors."""
    try:
        tree = parse(code, filename)
    except BlispSyntaxError as e:
        return LispError(f"Could not load library {e}")

    for node in tree.children:
        if node.tag in IGNORED_TAGS:
            continue
        result = evaluate(env, read(node))
        if isinstance(result, LispError):
            logger.warning("%s:%d: %s", filename, node.line, result.message)
            print(render(result))
    return SExpr()


def make_load(read_text_file: Callable[[str], str] = read_text_file) -> BuiltinFn:
    """Build the `load` builtin around a file reader."""

    def load(env: Environment, args: QExpr) -> LispValue:
        """(load "path") runs a source file in the calling scope."""
        if (err := expect_args("load", args, STRING)) is not None:
            return err
        path = args[0]
        try:
            code = read_text_file(path)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            return LispError(f"Could not load file {path}: {e}")
        logger.debug("loading %s", path)
        return run_source(env, code, filename=path)

    return load
