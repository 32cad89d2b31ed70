import pytest

from kappa.errors import KappaSyntaxError, KappaTypeError, KappaUnboundSymbol
from kappa.types import Environment, Keyword, Symbol


def test_lookup_walks_the_chain():
    root = Environment()
    root.define(Symbol("a"), 1)
    child = Environment(outer=root)
    child.define(Symbol("b"), 2)
    grandchild = Environment(outer=child)
    assert grandchild.lookup(Symbol("a")) == 1
    assert grandchild.lookup(Symbol("b")) == 2
    assert grandchild.find(Symbol("a")) is root
    assert Symbol("b") in grandchild
    assert Symbol("b") not in root


def test_unbound_symbol():
    env = Environment(outer=Environment())
    with pytest.raises(KappaUnboundSymbol, match="missing"):
        env.lookup(Symbol("missing"))


def test_nil_binding_is_a_real_binding():
    root = Environment()
    root.define(Symbol("x"), 1)
    child = Environment(outer=root)
    child.define(Symbol("x"), None)
    assert child.lookup(Symbol("x")) is None
    assert root.lookup(Symbol("x")) == 1


def test_root_and_is_root():
    root = Environment()
    child = Environment(outer=Environment(outer=root))
    assert root.is_root
    assert not child.is_root
    assert child.root() is root
    assert root.root() is root


def test_child_frames_are_write_once():
    child = Environment(outer=Environment())
    child.define(Symbol("x"), 1)
    with pytest.raises(KappaSyntaxError):
        child.define(Symbol("x"), 2)
    assert child.lookup(Symbol("x")) == 1


def test_root_frame_can_be_rebound():
    root = Environment()
    root.define(Symbol("x"), 1)
    root.define(Symbol("x"), 2)
    assert root.lookup(Symbol("x")) == 2


def test_define_global_targets_root():
    root = Environment()
    child = Environment(outer=Environment(outer=root))
    child.define_global(Symbol("g"), 42)
    assert root.vars[Symbol("g")] == 42
    assert Symbol("g") not in child.vars
    child.define_global(Symbol("g"), 43)
    assert root.lookup(Symbol("g")) == 43


@pytest.mark.parametrize("name", ["x", Keyword("x"), 1, None])
def test_binding_names_must_be_symbols(name):
    env = Environment()
    with pytest.raises(KappaTypeError):
        env.define(name, 1)
    with pytest.raises(KappaTypeError):
        env.define_global(name, 1)


def test_str_and_repr():
    root = Environment()
    root.define(Symbol("a"), 1)
    child = Environment(outer=root)
    child.define(Symbol("b"), "s")
    assert str(root) == "{a: 1}"
    assert str(child) == "{b: 's'} -> ..."
    assert repr(child) == "<Environment chain: {b: 's'} -> {a: 1}>"
