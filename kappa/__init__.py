# Core type aliases for Kappa's data model.
# Forms and runtime values share one representation: persistent List, Vector
# and Map collections from kappa.types, Symbol/Keyword names, and plain Python
# int, float, str, bool and None (nil).
#
# Naming guidance:
# - SExpression: Use in reader/validation/macro code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (often used interchangeably in this codebase)
SExpression = LispValue

# Evaluator function type: Python evaluator passed into special forms
EvaluatorFn = Callable[..., LispValue]
