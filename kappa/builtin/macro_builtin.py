"""Library macros for Kappa (transformers implemented in Python).

Each transformer is called like any macro target: with the whole call form,
the calling environment and then the unevaluated argument forms. It returns
the expansion, which the evaluator then evaluates in the caller's scope.
"""

from kappa import SExpression
from kappa.builtin.env_builtin import make_macro
from kappa.errors import KappaSyntaxError, KappaTypeError
from kappa.types.collections import List, Vector
from kappa.types.environment import Environment
from kappa.types.function import HostFunction, Macro
from kappa.types.symbol import Symbol

DEF = Symbol("def")
FN = Symbol("fn")
FORM_PARAM = Symbol("&form")
ENV_PARAM = Symbol("&env")

# Placed directly in expansions so a user rebinding of `macro` cannot capture it.
_MAKE_MACRO = HostFunction("macro", make_macro)


def _definition_parts(name: str, args: tuple) -> tuple[Symbol, Vector, tuple]:
    if len(args) < 3:
        raise KappaSyntaxError(
            f"{name} expects a name, a parameter vector and a body; got {len(args)} arguments"
        )
    fn_name, params, *body = args
    if not isinstance(fn_name, Symbol):
        raise KappaTypeError(f"{name} name must be a symbol, got {fn_name!r}")
    if not isinstance(params, Vector):
        raise KappaSyntaxError(f"{name} parameters must be a vector, got {params!r}")
    return fn_name, params, tuple(body)


def defn_macro(form: List, env: Environment, *args: SExpression) -> SExpression:
    """(defn name [params] body...) -> (def name (fn [params] body...))"""
    fn_name, params, body = _definition_parts("defn", args)
    return List.of(DEF, fn_name, List((FN, params, *body)))


def defmacro_macro(form: List, env: Environment, *args: SExpression) -> SExpression:
    """
    (defmacro name [params] body...)
    => (def name (macro (fn [&form &env params...] body...)))

    N.B.
        &form and &env are ordinary parameters of the generated fn: the macro
    call protocol passes the call form and the caller's environment ahead of
    the argument forms.
    """
    macro_name, params, body = _definition_parts("defmacro", args)
    transformer = List((FN, Vector((FORM_PARAM, ENV_PARAM, *params)), *body))
    return List.of(DEF, macro_name, List.of(_MAKE_MACRO, transformer))


def comment_macro(form: List, env: Environment, *args: SExpression) -> SExpression:
    """(comment ...) ignores its arguments and expands to nil."""
    return None


def register(env: Environment) -> None:
    """Register the library macros in the provided (root) environment."""
    env.update(
        {
            Symbol("defn"): Macro(HostFunction("defn", defn_macro)),
            Symbol("defmacro"): Macro(HostFunction("defmacro", defmacro_macro)),
            Symbol("comment"): Macro(HostFunction("comment", comment_macro)),
        }
    )
