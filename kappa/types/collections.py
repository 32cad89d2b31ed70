"""Persistent collection types for Kappa: List, Vector and Map.

All three wrap pyrsistent structures, so "modifying" operations return new
values and share structure with the original. List and Vector carry the same
kind of element sequence but stay distinct types: Vectors are what binding and
parameter forms are written with.

Equality is structural. A List and a Vector with equal elements in equal
order compare equal, mirroring Clojure's sequential equality; use the type
itself (or `list?` / `vector?`) to tell them apart.
"""

from __future__ import annotations

from typing import Iterable, Iterator

import pyrsistent as pr

from kappa import LispValue
from kappa.errors import KappaSyntaxError


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep structural equality across every Kappa value variant."""
    if a is b:
        return True
    # Python treats True == 1; Kappa does not.
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, Sequential) and isinstance(b, Sequential):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Map) and isinstance(b, Map):
        if len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b:
                return False
            if not is_equal(value, b.get(key)):
                return False
        return True
    if isinstance(a, (Sequential, Map)) or isinstance(b, (Sequential, Map)):
        return False
    return a == b


class Sequential:
    """Shared behaviour of the ordered collections (List and Vector)."""

    __slots__ = ("_impl",)

    def __len__(self) -> int:
        return len(self._impl)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self._impl)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Sequential) and is_equal(self, other)

    def __hash__(self) -> int:
        # Equal Lists and Vectors must hash alike
        return hash(tuple(self._impl))

    def first(self) -> LispValue:
        return self[0] if len(self) else None

    def __repr__(self) -> str:
        from kappa.debug_utils.pprint import to_source
        return to_source(self)


class List(Sequential):
    """Persistent singly linked list; the shape of code (calls, special forms)."""

    __slots__ = ()

    def __init__(self, elements: Iterable[LispValue] = ()):
        self._impl = pr.plist(elements)

    @classmethod
    def of(cls, *elements: LispValue) -> List:
        return cls(elements)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return List(tuple(self._impl)[index])
        return self._impl[index]

    def rest(self) -> List:
        if not len(self):
            return self
        return List._from_plist(self._impl.rest)

    def cons(self, value: LispValue) -> List:
        return List._from_plist(self._impl.cons(value))

    @classmethod
    def _from_plist(cls, impl) -> List:
        lst = cls.__new__(cls)
        lst._impl = impl
        return lst


class Vector(Sequential):
    """Persistent indexed vector; the literal used for bindings and parameters."""

    __slots__ = ()

    def __init__(self, elements: Iterable[LispValue] = ()):
        self._impl = pr.pvector(elements)

    @classmethod
    def of(cls, *elements: LispValue) -> Vector:
        return cls(elements)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self._impl[index])
        return self._impl[index]

    def rest(self) -> List:
        return List(self._impl[1:])

    def cons(self, value: LispValue) -> List:
        return List((value, *self._impl))


def _hash(value: LispValue) -> int:
    # Keep true/false apart from 1/0, which Python hashes alike
    if isinstance(value, bool):
        return hash(("bool", value))
    return hash(value)


class _Key:
    """Map key wrapper that hashes and compares with Kappa equality."""

    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Key) and is_equal(self.value, other.value)

    def __hash__(self) -> int:
        return _hash(self.value)


class Map:
    """Persistent hash map with structurally compared keys."""

    __slots__ = ("_impl",)

    def __init__(self, entries: Iterable[LispValue] = ()):
        flat = list(entries)
        if len(flat) % 2 != 0:
            raise KappaSyntaxError(
                f"Map literal requires an even number of entries; got {len(flat)}"
            )
        self._impl = pr.pmap({_Key(k): v for k, v in zip(flat[::2], flat[1::2])})

    def __len__(self) -> int:
        return len(self._impl)

    def __iter__(self) -> Iterator[LispValue]:
        return (key.value for key in self._impl)

    def __contains__(self, key: LispValue) -> bool:
        return _Key(key) in self._impl

    def __getitem__(self, key: LispValue) -> LispValue:
        return self._impl[_Key(key)]

    def get(self, key: LispValue, default: LispValue = None) -> LispValue:
        return self._impl.get(_Key(key), default)

    def items(self) -> list[tuple[LispValue, LispValue]]:
        return [(key.value, value) for key, value in self._impl.items()]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Map) and is_equal(self, other)

    def __hash__(self) -> int:
        return hash(self._impl)

    def __repr__(self) -> str:
        from kappa.debug_utils.pprint import to_source
        return to_source(self)
