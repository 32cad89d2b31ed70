import pytest

from kappa.debug_utils.pprint import to_source
from kappa.reader.parser import read_program
from kappa.types import Keyword, List, Map, Symbol, Vector


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, "nil"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (1.5, "1.5"),
        ("hi", '"hi"'),
        ('say "x"', '"say \\"x\\""'),
        (Symbol("a"), "a"),
        (Keyword("a"), ":a"),
        (List.of(1, Symbol("b")), "(1 b)"),
        (Vector.of(1, List()), "[1 ()]"),
        (Map([Keyword("a"), 1]), "{:a 1}"),
    ]
)
def test_to_source(value, expected):
    assert to_source(value) == expected


@pytest.mark.parametrize("source", ["(defn f [x] (+ x 1))", '[1 "two" :three nil]', "{:a (b c)}"])
def test_printed_forms_read_back(source):
    form = read_program(source)
    assert read_program(to_source(form)) == form


def test_repr_of_collections_is_source():
    assert repr(List.of(Symbol("f"), Vector.of(1))) == "(f [1])"


def test_function_repr(run):
    assert to_source(run("(fn [a b] a)")) == "#<fn [a b]>"
    assert repr(run("+")) == "#<host +>"


def test_str_builtin(run):
    assert run('(str "a" 1 :k nil (list 1 2))') == "a1:k(1 2)"
    assert run("(str)") == ""
