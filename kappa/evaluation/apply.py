"""Application engine for Kappa.

Two separate paths live here:

- `apply` / `apply_function`: ordinary calls. Arguments arrive already
  evaluated. A user Function's body runs as a pre-evaluated `let` whose frame
  hangs off the function's closure, not the caller's environment; host
  functions are called positionally with no frame at all.
- `expand_macro`: macro calls. The macro's target receives the raw call form,
  the calling environment and the unevaluated argument forms, and returns an
  expansion. Evaluating that expansion is left to the evaluator.

Argument counts are checked exactly for user functions and macros.
"""

from __future__ import annotations

import logging

from kappa import EvaluatorFn, LispValue, SExpression
from kappa.errors import KappaArityError, KappaTypeError
from kappa.evaluation.special_forms.let_form import let_form
from kappa.types.collections import List, Vector
from kappa.types.environment import Environment
from kappa.types.function import Function, HostFunction, Macro

logger = logging.getLogger(__name__)


def apply_function(
    fn: Function,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a user Function to already-evaluated argument values.

    Raises KappaArityError when the argument count differs from the number of
    declared parameters.
    """
    if len(args) != fn.arity:
        raise KappaArityError(
            f"Function {fn!r} expects {fn.arity} arguments; got {len(args)}"
        )
    # name0 value0 name1 value1 ...
    bindings = Vector(item for pair in zip(fn.params, args) for item in pair)
    return let_form(
        List((bindings, *fn.body)), fn.env, evaluate_fn, pre_evaluated=True
    )


def apply(
    head: Function | HostFunction | object,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a user Function or a HostFunction.

    - For Function, defer to apply_function.
    - For HostFunction, call the Python callable with the arguments spread.
    - Macros and non-callables raise KappaTypeError.
    """
    if isinstance(head, Function):
        return apply_function(head, args, evaluate_fn)
    elif isinstance(head, HostFunction):
        return head.fn(*args)
    elif isinstance(head, Macro):
        raise KappaTypeError(f"Cannot apply macro {head!r} as a function")
    else:
        raise KappaTypeError(f"Cannot apply non-function {head!r}")


def expand_macro(
    macro: Macro,
    form: List,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SExpression:
    """Run a macro's transformer once and return its expansion, unevaluated.

    The target is called with (form, env, *argument forms). Macros defined by
    `defmacro` declare these first two as `&form` and `&env`.
    """
    target = macro.target
    arg_forms = list(form.rest())

    if isinstance(target, Function) and target.arity != len(arg_forms) + 2:
        raise KappaArityError(
            f"Macro {form[0]} expects {target.arity - 2} arguments; got {len(arg_forms)}"
        )

    expansion = apply(target, [form, env, *arg_forms], evaluate_fn)
    logger.debug("Expanded %r -> %r", form, expansion)
    return expansion
