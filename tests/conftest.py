import pytest

from lispeval.evaluation.execution import evaluate
from lispeval.interpreter import Interpreter
from lispeval.reader.parser import read
from lispeval.runtime_context import ExecutionContext


@pytest.fixture
def context():
    """A fresh execution context (own global env, macros and stack trace)."""
    return ExecutionContext()


@pytest.fixture
def env(context):
    return context.global_env


@pytest.fixture
def run(context):
    """Evaluate every form in a source string; return the last value."""
    def _run(source, in_env=None):
        result = None
        for term in read(source):
            result = evaluate(term, in_env if in_env is not None else context.global_env, context)
        return result
    return _run


@pytest.fixture
def interp():
    return Interpreter(prelude=None)
