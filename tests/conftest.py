import pytest

from mal.builtin import env_builtin
from mal.interpreter import Interpreter
from mal.types.environment import Environment


@pytest.fixture
def interp():
    """Interpreter with the native library and the core prelude."""
    return Interpreter()


@pytest.fixture
def bare_interp():
    """Interpreter with the native library only."""
    return Interpreter(prelude=None)


@pytest.fixture
def env():
    """Return a fresh root environment holding the native library."""
    e = Environment()
    env_builtin.register(e)
    return e
