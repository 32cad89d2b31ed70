"""Render Kappa values back into reader syntax."""

from kappa import LispValue
from kappa.types.collections import List, Map, Vector
from kappa.types.symbol import Keyword, Symbol


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def to_source(obj: LispValue) -> str:
    """Return the source text that reads back as `obj` (callables excepted)."""
    # Imported here: kappa.types.function imports the collections module
    from kappa.types.function import Function, HostFunction, Macro

    if obj is None:
        return "nil"
    if obj is True:
        return "true"
    if obj is False:
        return "false"
    if isinstance(obj, str):
        return f'"{_escape(obj)}"'
    if isinstance(obj, (Symbol, Keyword)):
        return str(obj)
    if isinstance(obj, List):
        return "(" + " ".join(to_source(x) for x in obj) + ")"
    if isinstance(obj, Vector):
        return "[" + " ".join(to_source(x) for x in obj) + "]"
    if isinstance(obj, Map):
        return "{" + ", ".join(f"{to_source(k)} {to_source(v)}" for k, v in obj.items()) + "}"
    if isinstance(obj, Function):
        return f"#<fn {to_source(obj.params)}>"
    if isinstance(obj, (HostFunction, Macro)):
        return repr(obj)
    return str(obj)
