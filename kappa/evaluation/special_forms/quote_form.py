from kappa import EvaluatorFn, LispValue
from kappa.evaluation.validate import check_quote
from kappa.types.collections import List
from kappa.types.environment import Environment


def quote_form(tail: List, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    check_quote(tail)
    return tail[0]
