from kappa import EvaluatorFn
from kappa import LispValue
from kappa.types.environment import Environment


def do_form(tail, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # (do) with no forms is nil
    result: LispValue = None
    for form in tail:
        result = evaluate_fn(form, env)
    return result
