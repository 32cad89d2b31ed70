from kappa import EvaluatorFn, LispValue
from kappa.evaluation.special_forms.do_form import do_form
from kappa.evaluation.validate import check_let
from kappa.types.bind import bind_pattern
from kappa.types.collections import List
from kappa.types.environment import Environment


def let_form(
    tail: List,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    pre_evaluated: bool = False,
) -> LispValue:
    """
    (let [name init ...] body...)

    Creates one child frame of `env` and binds each pair in order. Each init
    is evaluated in the new frame, so it sees the names bound before it.

    Function application reuses this form with `pre_evaluated=True`: the
    "inits" are then argument values that were already computed in the
    caller's scope, and they are attached as-is. That is what keeps one
    argument from seeing another parameter of the same call.
    """
    check_let(tail)
    bindings = tail[0]
    body = tail.rest()

    new_env = Environment(outer=env)
    for i in range(0, len(bindings), 2):
        pattern, init = bindings[i], bindings[i + 1]
        value = init if pre_evaluated else evaluate_fn(init, new_env)
        bind_pattern(new_env, pattern, value)

    return do_form(body, new_env, evaluate_fn)
