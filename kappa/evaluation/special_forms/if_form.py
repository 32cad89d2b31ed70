from kappa import EvaluatorFn
from kappa import LispValue
from kappa.evaluation.validate import check_if
from kappa.types.collections import List
from kappa.types.environment import Environment


def is_truthy(value: LispValue) -> bool:
    # Only false and nil are falsy; 0, "" and () are all true
    return value is not False and value is not None


def if_form(tail: List, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    check_if(tail)
    test, then_branch, else_branch = tail

    if is_truthy(evaluate_fn(test, env)):
        return evaluate_fn(then_branch, env)
    return evaluate_fn(else_branch, env)
