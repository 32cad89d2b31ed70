import pytest
from hypothesis import given, strategies as st

from kappa.errors import KappaSyntaxError
from kappa.types import Keyword, List, Map, Symbol, Vector, is_equal

atoms = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.text(max_size=5),
    st.sampled_from(["a", "b", "c"]).map(Symbol),
    st.sampled_from(["a", "b", "c"]).map(Keyword),
)
values = st.recursive(
    atoms,
    lambda children: st.one_of(
        st.lists(children, max_size=4).map(List),
        st.lists(children, max_size=4).map(Vector),
    ),
    max_leaves=12,
)


def test_symbols_are_interned_by_name():
    assert Symbol("x") == Symbol("x")
    assert hash(Symbol("x")) == hash(Symbol("x"))
    assert Symbol("x") != Symbol("y")
    assert Symbol("x").name == "x"


def test_symbol_and_keyword_are_distinct():
    assert Symbol("x") != Keyword("x")
    assert not is_equal(Symbol("x"), Keyword("x"))
    assert str(Keyword("x")) == ":x"
    assert repr(Symbol("x")) == "Symbol('x')"


def test_bools_are_not_numbers():
    assert not is_equal(True, 1)
    assert not is_equal(False, 0)
    assert not is_equal(None, False)
    assert is_equal(True, True)
    assert List.of(True) != List.of(1)


def test_list_and_vector_are_sequentially_equal():
    assert List() == Vector()
    assert List.of(1, 2) == Vector.of(1, 2)
    assert hash(List.of(1, 2)) == hash(Vector.of(1, 2))
    assert List.of(1, 2) != Vector.of(2, 1)
    assert List.of(1) != Map([1, 2])


def test_collections_are_persistent():
    v = Vector.of(1, 2)
    assert v.cons(0) == List.of(0, 1, 2)
    assert v == Vector.of(1, 2)
    lst = List.of(2)
    assert lst.cons(1) == List.of(1, 2)
    assert lst == List.of(2)
    assert lst.rest() == List()
    assert lst == List.of(2)


def test_rest_and_first():
    assert List.of(1, 2, 3).rest() == List.of(2, 3)
    assert isinstance(Vector.of(1, 2).rest(), List)
    assert List().rest() == List()
    assert List().first() is None
    assert Vector.of(7).first() == 7


def test_slicing_keeps_the_type():
    assert isinstance(List.of(1, 2, 3)[1:], List)
    assert isinstance(Vector.of(1, 2, 3)[1:], Vector)


def test_map_odd_entries():
    with pytest.raises(KappaSyntaxError):
        Map([Keyword("a")])


def test_map_equality_ignores_order():
    a = Map([Keyword("a"), 1, Keyword("b"), List.of(2)])
    b = Map([Keyword("b"), Vector.of(2), Keyword("a"), 1])
    assert a == b
    assert a.get(Keyword("b")) == List.of(2)
    assert Keyword("a") in a


def test_map_keys_can_be_collections():
    m = Map([Vector.of(1, 2), "pair"])
    assert m[Vector.of(1, 2)] == "pair"
    assert m.get(List.of(1, 2)) == "pair"


def test_map_keeps_bool_and_number_keys_apart():
    m = Map([1, Keyword("a"), True, Keyword("b"), 0, "zero", False, "no"])
    assert len(m) == 4
    assert m.get(1) == Keyword("a")
    assert m.get(True) == Keyword("b")
    assert m[False] == "no"
    assert True in m
    assert not is_equal(Map([1, Keyword("a")]), Map([True, Keyword("a")]))
    assert Map([1, Keyword("a")]).get(True) is None
    assert list(Map([True, 1])) == [True]


def test_map_duplicate_keys_keep_the_last_value():
    m = Map([Keyword("a"), 1, Keyword("a"), 2])
    assert len(m) == 1
    assert m.items() == [(Keyword("a"), 2)]


@given(values)
def test_equality_is_reflexive(v):
    assert is_equal(v, v)


@given(values, values)
def test_equality_is_symmetric(a, b):
    assert is_equal(a, b) == is_equal(b, a)


@given(st.lists(atoms, max_size=6))
def test_list_vector_equality_and_hash(items):
    assert List(items) == Vector(items)
    assert hash(List(items)) == hash(Vector(items))
