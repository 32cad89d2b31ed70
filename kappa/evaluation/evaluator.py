"""Core evaluator for the Kappa interpreter.

Dispatches on the kind of form: symbols are looked up, lists headed by a
special-form symbol go to their handler, other non-empty lists are calls, and
everything else evaluates to itself. Evaluation is plain recursion on the host
stack; there is no trampoline.
"""

from __future__ import annotations

from kappa import SExpression, LispValue
from kappa.errors import KappaTypeError
from kappa.evaluation.apply import apply, expand_macro
from kappa.evaluation.special_forms import SPECIAL_FORMS
from kappa.evaluation.validate import validate
from kappa.types.collections import List
from kappa.types.environment import Environment
from kappa.types.function import Function, HostFunction, Macro
from kappa.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Validate `expr` as a whole, then evaluate it in `env`.
    """
    validate(expr, env)
    return evaluate0(expr, env)


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    """
    Core evaluator: recursive evaluation without the up-front validation pass.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case List() if len(expr) == 0:
            return expr

        case List():
            head = expr[0]
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](expr.rest(), env, evaluate0)

            callee = evaluate0(head, env)

            # Macros see the unevaluated forms; their expansion is evaluated here.
            if isinstance(callee, Macro):
                expansion = expand_macro(callee, expr, env, evaluate0)
                validate(expansion, env)
                return evaluate0(expansion, env)

            if isinstance(callee, (Function, HostFunction)):
                args = [evaluate0(arg, env) for arg in expr.rest()]
                return apply(callee, args, evaluate0)

            raise KappaTypeError(
                f"The first item in a list must be a function; got {callee!r}"
            )

    # --- Atoms, keywords, vectors and maps return as-is ---
    return expr
