import pytest

from callisp.types.environment import Environment
from callisp.reader.parser import parse_all
from callisp.evaluation.evaluator import evaluate


@pytest.fixture
def env():
    """Fresh root environment with the builtins loaded."""
    return Environment.root()


@pytest.fixture
def run(env):
    """Evaluate every expression of a source string in `env`; return the last value."""
    def _run(source):
        result = None
        for expr in parse_all(source):
            result = evaluate(expr, env)
        return result
    return _run
