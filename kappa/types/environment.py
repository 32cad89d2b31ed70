"""Runtime environment for Kappa.

An Environment is one frame of the scope chain: a mapping of Symbols to
evaluated values plus an optional link to its parent (`outer`). Frames made by
`let` and by function application are write-once; the parentless root frame is
the only frame that is ever updated in place, and only through `def`.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from kappa import LispValue
from kappa.errors import KappaSyntaxError, KappaTypeError, KappaUnboundSymbol
from kappa.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @property
    def is_root(self) -> bool:
        return self.outer is None

    def define(self, name: Symbol, value: LispValue) -> None:
        """Add a new binding for `name` to this frame.

        A name may shadow a binding in any ancestor, but may only be bound once
        per non-root frame. Raises KappaSyntaxError on a duplicate and
        KappaTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise KappaTypeError(f"Cannot bind {name!r}: binding names must be symbols")
        if name in self.vars and not self.is_root:
            raise KappaSyntaxError(f"Duplicate binding for {name} in the same scope")
        self.vars[name] = value

    def define_global(self, name: Symbol, value: LispValue) -> None:
        """Bind (or rebind) `name` on the root frame of this chain."""
        if not isinstance(name, Symbol):
            raise KappaTypeError(f"Cannot bind {name!r}: binding names must be symbols")
        self.root().vars[name] = value

    def root(self) -> Environment:
        """Walk the parent links to the parentless frame."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        A binding to nil is a real binding and resolves to None; only a name
        missing from every frame raises KappaUnboundSymbol.
        """
        env = self.find(name)
        if env is None:
            raise KappaUnboundSymbol(f"The symbol {name} has not been assigned a value")
        return env.vars[name]

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation, innermost frame first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame_buf:
                env._write_vars(frame_buf)
                chain.append(frame_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
