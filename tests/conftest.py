import pytest

from scm.interpreter import Interpreter
from scm.printer import show
from scm.types.environment import Environment


@pytest.fixture
def env():
    """Fresh, empty global environment."""
    return Environment()


@pytest.fixture
def interp():
    """Interpreter with its own global environment for each test."""
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate source text and return the canonical printed form of the result."""

    def _run(code: str) -> str:
        return show(interp.eval(code))

    return _run
