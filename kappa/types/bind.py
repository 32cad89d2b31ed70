from __future__ import annotations

from kappa import LispValue, SExpression
from kappa.errors import KappaTypeError
from kappa.types.collections import Map, Sequential, Vector
from kappa.types.environment import Environment
from kappa.types.symbol import Symbol


def bind_pattern(env: Environment, pattern: SExpression, value: LispValue) -> None:
    """
    Single source of truth for binding a name or positional pattern in a frame.

    Supports:
    - A Symbol, bound directly to `value`
    - A Vector of patterns, destructuring a sequential `value` by position,
      recursively. Missing positions bind nil; extra positions are ignored.
      nil destructures like an empty sequence.

    Used by both `let` and function application so the two agree on what a
    binding form means.
    """
    if isinstance(pattern, Symbol):
        env.define(pattern, value)
        return

    if isinstance(pattern, Vector):
        items = _positional_items(value)
        for i, sub_pattern in enumerate(pattern):
            bind_pattern(env, sub_pattern, items[i] if i < len(items) else None)
        return

    raise KappaTypeError(
        f"Binding target must be a symbol or a vector of symbols, got {pattern!r}"
    )


def _positional_items(value: LispValue) -> list[LispValue]:
    if value is None:
        return []
    if isinstance(value, (Sequential, list, tuple)):
        return list(value)
    if isinstance(value, Map):
        raise KappaTypeError("Maps cannot be destructured positionally")
    raise KappaTypeError(f"Cannot destructure non-sequential value {value!r}")
