"""Built-in functions for the Kappa runtime environment.

This module defines core arithmetic, comparison, collection operations,
predicates and registration utilities exposed to Lisp code. Every builtin is
a plain Python function taking its evaluated arguments positionally; the
registry wraps each one in a HostFunction.
"""
from __future__ import annotations

from numbers import Number
from typing import Callable

from kappa import LispValue
from kappa.debug_utils.pprint import to_source
from kappa.errors import KappaArityError, KappaIndexError, KappaTypeError
from kappa.evaluation.apply import apply as apply_engine
from kappa.evaluation.evaluator import evaluate0
from kappa.types.collections import List, Map, Sequential, Vector, is_equal
from kappa.types.environment import Environment
from kappa.types.function import Function, HostFunction, Macro
from kappa.types.symbol import Keyword, Symbol


def _call(fn: LispValue, *args: LispValue) -> LispValue:
    """Apply a Kappa callable (user or host) from inside a builtin."""
    return apply_engine(fn, list(args), evaluate0)


def _numbers(name: str, args: tuple) -> None:
    for x in args:
        # bool is a Number subclass in Python; not in Kappa
        if isinstance(x, bool) or not isinstance(x, Number):
            raise KappaTypeError(f"All arguments to {name} must be numbers; got {to_source(x)}")


def _items(name: str, coll: LispValue) -> list[LispValue]:
    """Elements of a sequential value (nil is empty)."""
    if coll is None:
        return []
    if isinstance(coll, Sequential):
        return list(coll)
    if isinstance(coll, Map):
        return [Vector.of(k, v) for k, v in coll.items()]
    raise KappaTypeError(f"{name} expects a collection; got {to_source(coll)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(*args: LispValue) -> LispValue:
    """Return the numeric sum of all arguments; (+) is 0."""
    _numbers("+", args)
    return sum(args)


def sub(*args: LispValue) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise KappaArityError("- expects at least 1 argument; got 0")
    _numbers("-", args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


def mul(*args: LispValue) -> LispValue:
    """Return the product of all arguments; (*) is 1."""
    _numbers("*", args)
    result = 1
    for x in args:
        result *= x
    return result


def div(*args: LispValue) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not args:
        raise KappaArityError("/ expects at least 1 argument; got 0")
    _numbers("/", args)
    try:
        if len(args) == 1:
            return 1 / args[0]
        result = args[0]
        for x in args[1:]:
            result /= x
        return result
    except ZeroDivisionError:
        raise KappaTypeError("Division by zero")


# -------------------------------
# Equality and comparison
# -------------------------------
def equals(*args: LispValue) -> bool:
    """True if all arguments are structurally equal (or zero/one arg)."""
    if len(args) <= 1:
        return True
    first = args[0]
    return all(is_equal(first, other) for other in args[1:])


def not_equals(*args: LispValue) -> bool:
    return not equals(*args)


def _chain(name: str, op: Callable[[LispValue, LispValue], bool], args: tuple) -> bool:
    if not args:
        raise KappaArityError(f"{name} expects at least 1 argument; got 0")
    _numbers(name, args)
    return all(op(a, b) for a, b in zip(args, args[1:]))


def lt(*args: LispValue) -> bool:
    """Chainable less-than: true if a0 < a1 < a2 ... holds for all pairs."""
    return _chain("<", lambda a, b: a < b, args)


def lte(*args: LispValue) -> bool:
    """Chainable less-or-equal: true if a0 <= a1 <= a2 ... holds for all pairs."""
    return _chain("<=", lambda a, b: a <= b, args)


def gt(*args: LispValue) -> bool:
    return _chain(">", lambda a, b: a > b, args)


def gte(*args: LispValue) -> bool:
    return _chain(">=", lambda a, b: a >= b, args)


def logical_not(*args: LispValue) -> bool:
    """Logical NOT for a single value; only nil and false are falsy."""
    if len(args) != 1:
        raise KappaArityError(f"not expects exactly 1 argument; got {len(args)}")
    return args[0] is None or args[0] is False


# -------------------------------
# Collections
# -------------------------------
def list_builtin(*args: LispValue) -> List:
    return List(args)


def vector_builtin(*args: LispValue) -> Vector:
    return Vector(args)


def hash_map(*args: LispValue) -> Map:
    if len(args) % 2 != 0:
        raise KappaArityError(f"hash-map expects an even number of arguments; got {len(args)}")
    return Map(args)


def first(*args: LispValue) -> LispValue:
    """First element of a collection; nil for nil or an empty collection."""
    if len(args) != 1:
        raise KappaArityError(f"first expects exactly 1 argument; got {len(args)}")
    coll = args[0]
    if isinstance(coll, Sequential):
        return coll.first()
    items = _items("first", coll)
    return items[0] if items else None


def rest(*args: LispValue) -> List:
    """Everything after the first element, as a List; () for nil or empty."""
    if len(args) != 1:
        raise KappaArityError(f"rest expects exactly 1 argument; got {len(args)}")
    coll = args[0]
    if isinstance(coll, Sequential):
        return coll.rest()
    return List(_items("rest", coll)[1:])


def cons(*args: LispValue) -> List:
    """(cons x coll) -> a new List with x in front of coll's elements."""
    if len(args) != 2:
        raise KappaArityError(f"cons expects exactly 2 arguments; got {len(args)}")
    head, coll = args
    if isinstance(coll, List):
        return coll.cons(head)
    return List((head, *_items("cons", coll)))


def nth(*args: LispValue) -> LispValue:
    """(nth coll index) or (nth coll index not-found)."""
    if len(args) not in (2, 3):
        raise KappaArityError(f"nth expects 2 or 3 arguments; got {len(args)}")
    coll, index = args[0], args[1]
    if isinstance(index, bool) or not isinstance(index, int):
        raise KappaTypeError(f"nth index must be an integer; got {to_source(index)}")
    items = _items("nth", coll)
    if 0 <= index < len(items):
        return items[index]
    if len(args) == 3:
        return args[2]
    raise KappaIndexError(f"Index {index} out of bounds for a collection of {len(items)}")


def get(*args: LispValue) -> LispValue:
    """(get map key) or (get map key default); vectors are indexed by position."""
    if len(args) not in (2, 3):
        raise KappaArityError(f"get expects 2 or 3 arguments; got {len(args)}")
    coll, key = args[0], args[1]
    default = args[2] if len(args) == 3 else None
    if isinstance(coll, Map):
        return coll.get(key, default)
    if isinstance(coll, Vector) and isinstance(key, int) and not isinstance(key, bool):
        return coll[key] if 0 <= key < len(coll) else default
    return default


def count(*args: LispValue) -> int:
    if len(args) != 1:
        raise KappaArityError(f"count expects exactly 1 argument; got {len(args)}")
    coll = args[0]
    if coll is None:
        return 0
    if isinstance(coll, (Sequential, Map, str)):
        return len(coll)
    raise KappaTypeError(f"count not supported on {to_source(coll)}")


def reduce_builtin(*args: LispValue) -> LispValue:
    """(reduce f coll) or (reduce f init coll).

    Without init, an empty coll returns (f) and a single element is returned
    as-is, without calling f.
    """
    if len(args) == 2:
        fn, coll = args
        items = _items("reduce", coll)
        if not items:
            return _call(fn)
        acc, items = items[0], items[1:]
    elif len(args) == 3:
        fn, acc, coll = args
        items = _items("reduce", coll)
    else:
        raise KappaArityError(f"reduce expects 2 or 3 arguments; got {len(args)}")
    for x in items:
        acc = _call(fn, acc, x)
    return acc


# -------------------------------
# Predicates
# -------------------------------
def _predicate(name: str, test: Callable[[LispValue], bool]) -> Callable[..., bool]:
    def pred(*args: LispValue) -> bool:
        if len(args) != 1:
            raise KappaArityError(f"{name} expects exactly 1 argument; got {len(args)}")
        return test(args[0])
    pred.__name__ = name
    return pred


is_symbol = _predicate("symbol?", lambda x: isinstance(x, Symbol))
is_keyword = _predicate("keyword?", lambda x: isinstance(x, Keyword))
is_nil = _predicate("nil?", lambda x: x is None)
is_list = _predicate("list?", lambda x: isinstance(x, List))
is_vector = _predicate("vector?", lambda x: isinstance(x, Vector))
is_map = _predicate("map?", lambda x: isinstance(x, Map))
is_fn = _predicate("fn?", lambda x: isinstance(x, (Function, HostFunction)))


# -------------------------------
# Strings and macros
# -------------------------------
def str_builtin(*args: LispValue) -> str:
    """Concatenate printed forms; strings are taken verbatim and nil is empty."""
    return "".join(
        a if isinstance(a, str) else to_source(a) for a in args if a is not None
    )


def make_macro(*args: LispValue) -> Macro:
    """(macro f) -> f flagged as a macro."""
    if len(args) != 1:
        raise KappaArityError(f"macro expects exactly 1 argument; got {len(args)}")
    target = args[0]
    if isinstance(target, Macro):
        return target
    if not isinstance(target, (Function, HostFunction)):
        raise KappaTypeError(f"macro expects a function; got {to_source(target)}")
    return Macro(target)


BUILTINS: dict[str, Callable[..., LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "not=": not_equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "not": logical_not,
    "list": list_builtin,
    "vector": vector_builtin,
    "hash-map": hash_map,
    "first": first,
    "rest": rest,
    "cons": cons,
    "nth": nth,
    "get": get,
    "count": count,
    "reduce": reduce_builtin,
    "symbol?": is_symbol,
    "keyword?": is_keyword,
    "nil?": is_nil,
    "list?": is_list,
    "vector?": is_vector,
    "map?": is_map,
    "fn?": is_fn,
    "str": str_builtin,
    "macro": make_macro,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given (root) environment."""
    env.update({Symbol(name): HostFunction(name, fn) for name, fn in BUILTINS.items()})
