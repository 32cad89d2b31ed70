from kappa import EvaluatorFn
from kappa import LispValue
from kappa.evaluation.validate import check_fn
from kappa.types.collections import List
from kappa.types.environment import Environment
from kappa.types.function import Function


def fn_form(tail: List, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # (fn [params] body...) closes over `env`; no frame is made until a call
    check_fn(tail)
    params = tail[0]
    return Function(params, tuple(tail.rest()), env)
