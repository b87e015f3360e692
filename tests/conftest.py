import sys

import pytest

from urlisp import config
from urlisp.builtin.base_env import base_environment
from urlisp.builtin.prelude import standard_environment
from urlisp.evaluation.evaluator import evaluate
from urlisp.reader.parser import parse_one

# The self-hosted evaluator nests many host frames per Lisp call.
sys.setrecursionlimit(max(sys.getrecursionlimit(), config.get_recursion_limit()))


@pytest.fixture
def base_env():
    """Fresh primitive environment."""
    return base_environment()


@pytest.fixture
def std_env():
    """Fresh standard environment (primitives plus prelude)."""
    return standard_environment()


@pytest.fixture
def run(std_env):
    """Parse and evaluate one expression against the standard environment."""
    def _run(source, env=None):
        expr, _ = parse_one(source)
        return evaluate(expr, std_env if env is None else env)
    return _run
