import pytest

from kappa.builtin.env_builtin import register
from kappa.builtin.macro_builtin import register as register_macros
from kappa.interpreter import Interpreter
from kappa.reader.parser import read_program
from kappa.evaluation.evaluator import evaluate
from kappa.types import Environment, HostFunction, Symbol


class Boom(Exception):
    """Raised by the `boom` test builtin so tests can see it was called."""


def _boom(*args):
    raise Boom("boom was called")


@pytest.fixture
def interp():
    """A fresh interpreter session with builtins and library macros."""
    i = Interpreter()
    i.env.define(Symbol("boom"), HostFunction("boom", _boom))
    return i


@pytest.fixture
def env():
    """Fresh root environment with builtins and library macros loaded."""
    e = Environment()
    register(e)
    register_macros(e)
    e.define(Symbol("boom"), HostFunction("boom", _boom))
    return e


@pytest.fixture
def run(env):
    """Read a program and evaluate it against the `env` fixture (or another env)."""
    def _run(source, in_env=None):
        return evaluate(read_program(source), in_env if in_env is not None else env)
    return _run
