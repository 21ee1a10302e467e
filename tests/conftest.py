import pytest

from sprig.builtin.env_builtin import register
from sprig.interpreter import Interpreter
from sprig.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment.new_root()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
