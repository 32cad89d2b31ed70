from kappa.types import Keyword, List, Map, Symbol, Vector


def test_quote_symbol(run):
    assert run("'a") == Symbol("a")
    assert run("(quote a)") == Symbol("a")


def test_quote_nested_structure(run):
    result = run("'(defn f [x] {:k (+ x 1)})")
    assert isinstance(result, List)
    assert result[0] == Symbol("defn")
    assert isinstance(result[2], Vector)
    assert isinstance(result[3], Map)
    assert result[3].get(Keyword("k")) == List.of(Symbol("+"), Symbol("x"), 1)


def test_quoted_code_is_data(run):
    assert run("(first '(+ 1 2))") == Symbol("+")
    assert run("(count '(a b c))") == 3
    assert run("(symbol? (first '(a)))") is True


def test_quoted_quote(run):
    assert run("''a") == List.of(Symbol("quote"), Symbol("a"))


def test_code_built_as_data_can_be_returned_by_macro(run):
    source = """
    (defmacro infix [a op b] (list op a b))
    (infix 2 * 21)
    """
    assert run(source) == 42
