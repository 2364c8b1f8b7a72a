import pytest

from blisp.types.environment import Environment
from blisp.builtin.env_builtin import register
from blisp.evaluation.evaluator import evaluate
from blisp.reader.parser import parse
from blisp.reader.reader import read


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Parse, read and evaluate a line of source in the `env` fixture."""
    def _run(source: str):
        return evaluate(env, read(parse(source)))
    return _run
