import pytest

from blisp.builtin.env_builtin import register
from blisp.interpreter import Interpreter
from blisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
