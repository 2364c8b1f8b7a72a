from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Defaults
_DEFAULT_LOAD_DIRS: List[Path] = []
_DEFAULT_ENCODING = 'utf-8'
_DEFAULT_RECURSION_LIMIT = 10000


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_roots() -> List[Path]:
    """Directories searched, after the working directory, for relative `load` paths."""
    return paths_from_env('BLISP_LOAD_PATH', _DEFAULT_LOAD_DIRS)


def get_encoding() -> str:
    return os.environ.get('BLISP_ENCODING') or _DEFAULT_ENCODING


def get_recursion_limit() -> int:
    """Python recursion limit an Interpreter needs; each blisp call costs about 11 frames."""
    raw = os.environ.get('BLISP_RECURSION_LIMIT')
    return int(raw) if raw else _DEFAULT_RECURSION_LIMIT
