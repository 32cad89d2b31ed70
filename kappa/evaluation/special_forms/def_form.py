import logging

from kappa import EvaluatorFn
from kappa import LispValue
from kappa.evaluation.validate import check_def
from kappa.types.collections import List
from kappa.types.environment import Environment

logger = logging.getLogger(__name__)


def def_form(tail: List, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (def name value)
    The value is computed in the current scope, but the binding always lands
    on the root frame, however deeply nested the call is. Returns the value.
    """
    check_def(tail)
    name, val_expr = tail
    value = evaluate_fn(val_expr, env)
    env.define_global(name, value)
    logger.debug("def %s on root frame", name)
    return value
