from kappa.types.symbol import Symbol, Keyword
from kappa.types.collections import List, Vector, Map, Sequential, is_equal
from kappa.types.environment import Environment
from kappa.types.function import Function, HostFunction, Macro

__all__ = [
    "Symbol",
    "Keyword",
    "List",
    "Vector",
    "Map",
    "Sequential",
    "is_equal",
    "Environment",
    "Function",
    "HostFunction",
    "Macro",
]
