from __future__ import annotations

import logging

from kappa import LispValue, SExpression
from kappa import config
from kappa.builtin.env_builtin import register
from kappa.builtin.macro_builtin import register as register_macros
from kappa.evaluation.evaluator import evaluate0
from kappa.evaluation.validate import validate, validate_all
from kappa.reader.parser import read_all
from kappa.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Kappa code.
    Owns the session's root environment; `def` writes land there and stay
    visible to later calls of `eval`.
    """

    def __init__(self, env: Environment | None = None):
        config.configure()
        self.env: Environment = env if env is not None else Environment()
        if not self.env.is_root:
            raise ValueError("Interpreter needs a root environment")
        register(self.env)
        register_macros(self.env)
        logger.debug("Interpreter session started with %d root bindings", len(self.env.vars))

    def eval_form(self, expr: SExpression) -> LispValue:
        validate(expr, self.env)
        return evaluate0(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` in order; return the last value (nil if none).

        All forms are read and validated before the first one is evaluated.
        """
        forms = list(read_all(code))
        validate_all(forms, self.env)
        result: LispValue = None
        for form in forms:
            result = evaluate0(form, self.env)
        return result
