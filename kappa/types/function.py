"""Callable values for Kappa.

The evaluator recognises exactly three callable variants:

- HostFunction: a Python callable applied to evaluated arguments. It never
  sees an environment.
- Function: a user function made by `fn`, closing over its defining frame.
- Macro: wraps a Function or HostFunction; at a call site it receives the
  unevaluated call form, the calling environment and the argument forms, and
  its result is evaluated again in the caller's environment.
"""

from __future__ import annotations

from typing import Callable

from kappa import LispValue, SExpression
from kappa.types.collections import Vector
from kappa.types.environment import Environment


class Function:
    """A first-class user function with parameters, body, and closure env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: Vector, body: tuple[SExpression, ...], env: Environment):
        self.params: Vector = params
        self.body: tuple[SExpression, ...] = tuple(body)
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def __call__(self, *args: LispValue) -> LispValue:
        """Apply from Python, e.g. when a host function receives a Function argument."""
        from kappa.evaluation.apply import apply_function
        from kappa.evaluation.evaluator import evaluate0
        return apply_function(self, list(args), evaluate0)

    def __repr__(self) -> str:
        from kappa.debug_utils.pprint import to_source
        return to_source(self)


class HostFunction:
    """A builtin implemented in Python, called positionally."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, *args: LispValue) -> LispValue:
        return self.fn(*args)

    def __repr__(self) -> str:
        return f"#<host {self.name}>"


class Macro:
    """Marks a callable as a macro; the flag travels with the value."""

    __slots__ = ("target",)

    def __init__(self, target: Function | HostFunction):
        self.target = target

    def __repr__(self) -> str:
        return f"#<macro {self.target!r}>"
