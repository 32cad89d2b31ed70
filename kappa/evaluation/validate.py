"""Shape checks for the special forms, and a pre-evaluation validation pass.

Each check receives the unevaluated rest of a special-form list (everything
after the head symbol). The special-form handlers call their own check, and
`validate` runs every check over a whole form before evaluation starts so
that a malformed branch fails even if it would never be reached.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from kappa import SExpression
from kappa.errors import KappaSyntaxError, KappaTypeError
from kappa.types.collections import List, Vector
from kappa.types.environment import Environment
from kappa.types.function import Macro
from kappa.types.symbol import Symbol


def _arity(allowed: tuple[int, ...], form: str, tail: List) -> None:
    if len(tail) not in allowed:
        expected = " or ".join(str(n) for n in allowed)
        raise KappaSyntaxError(f"{form} expects exactly {expected} arguments; got {len(tail)}")


def _min_arity(minimum: int, form: str, tail: List) -> None:
    if len(tail) < minimum:
        raise KappaSyntaxError(f"{form} expects at least {minimum} arguments; got {len(tail)}")


def _check_pattern(form: str, pattern: SExpression) -> None:
    if isinstance(pattern, Symbol):
        return
    if isinstance(pattern, Vector):
        for sub in pattern:
            _check_pattern(form, sub)
        return
    raise KappaTypeError(f"{form} binding target must be a symbol or a vector, got {pattern!r}")


def check_quote(tail: List) -> None:
    _arity((1,), "quote", tail)


def check_if(tail: List) -> None:
    _arity((3,), "if", tail)


def check_def(tail: List) -> None:
    _arity((2,), "def", tail)
    if not isinstance(tail[0], Symbol):
        raise KappaTypeError(f"First argument to def must be a symbol, got {tail[0]!r}")


def check_do(tail: List) -> None:
    """do accepts any number of forms, including none."""


def check_let(tail: List) -> None:
    _min_arity(2, "let", tail)
    bindings = tail[0]
    if not isinstance(bindings, Vector):
        raise KappaSyntaxError("The first argument to let (the bindings) must be a vector")
    if len(bindings) % 2 != 0:
        raise KappaSyntaxError(
            f"let bindings must alternate names and values; got {len(bindings)} entries"
        )
    for pattern in bindings[::2]:
        _check_pattern("let", pattern)


def check_fn(tail: List) -> None:
    _min_arity(2, "fn", tail)
    params = tail[0]
    if not isinstance(params, Vector):
        raise KappaSyntaxError("The first argument to fn (the parameters) must be a vector")
    for pattern in params:
        _check_pattern("fn", pattern)


SHAPE_CHECKS: dict[Symbol, Callable[[List], None]] = {
    Symbol("quote"): check_quote,
    Symbol("if"): check_if,
    Symbol("def"): check_def,
    Symbol("do"): check_do,
    Symbol("let"): check_let,
    Symbol("fn"): check_fn,
}


QUOTE = Symbol("quote")
LET = Symbol("let")
FN = Symbol("fn")
DEFMACRO = Symbol("defmacro")


def _is_macro(head: Symbol, env: Optional[Environment], macros: set[Symbol]) -> bool:
    if head in macros:
        return True
    if env is None:
        return False
    owner = env.find(head)
    return owner is not None and isinstance(owner.vars[head], Macro)


def _walk(expr: SExpression, env: Optional[Environment], macros: set[Symbol]) -> None:
    # Vector and Map literals evaluate to themselves, so only Lists are walked
    if not isinstance(expr, List) or not len(expr):
        return
    head = expr[0]
    if isinstance(head, Symbol):
        if head in SHAPE_CHECKS:
            tail = expr.rest()
            SHAPE_CHECKS[head](tail)
            if head == QUOTE:
                return
            if head == LET:
                for init in tail[0][1::2]:
                    _walk(init, env, macros)
                forms = tail.rest()
            elif head == FN:
                forms = tail.rest()
            else:
                forms = tail
            for form in forms:
                _walk(form, env, macros)
            return
        if _is_macro(head, env, macros):
            # Macro arguments are handed over unevaluated; the expansion is
            # validated when it is produced.
            if head == DEFMACRO and len(expr) > 1 and isinstance(expr[1], Symbol):
                macros.add(expr[1])
            return
    for item in expr:
        _walk(item, env, macros)


def validate(expr: SExpression, env: Optional[Environment] = None) -> None:
    """Run the special-form shape checks over `expr` and every form nested in it
    that will be evaluated.

    Left alone:
    - quoted data: `(quote (if))` is valid;
    - Vector and Map literals, which evaluate to themselves;
    - arguments of a macro call, when `env` (or an earlier `defmacro` in the
      same form) says the head names a macro.
    """
    _walk(expr, env, set())


def validate_all(forms: Iterable[SExpression], env: Optional[Environment] = None) -> None:
    """Validate a sequence of top-level forms as one program."""
    macros: set[Symbol] = set()
    for form in forms:
        _walk(form, env, macros)
