"""
  Kappa Reader: Lexer and Parser

- Streaming, lazy tokenizing
- Emits the Kappa value model directly (programs are data):

    - nil -> None
    - true / false -> bool
    - integers / decimals -> int / float
    - strings -> str (only \\\\ and \\" escapes)
    - :name -> Keyword
    - other atoms -> Symbol
    - ( ... ) -> List
    - [ ... ] -> Vector
    - { ... } -> Map (odd entry count is a syntax error)
    - 'x -> (quote x)
    - ; text -> (comment " text")

  Commas are whitespace.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from kappa import SExpression
from kappa.errors import KappaSyntaxError
from kappa.types.collections import List, Map, Vector
from kappa.types.symbol import Keyword, Symbol


SKIP_RE = re.compile(r"[\s,]*")

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # 'x
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>"(?:\\.|[^\\"])*\\?$)'  # string running off the end
    r"|(?P<atom>[^\s,()\[\]{}'\";]+)"  # symbols, keywords, numbers, literals
)

INT_RE = re.compile(r"-?\d+$")
FLOAT_RE = re.compile(r"-?\d+\.\d+$")

QUOTE = Symbol("quote")
COMMENT = Symbol("comment")
DO = Symbol("do")

# opening token -> (closing token, constructor)
COLLECTIONS = {
    "lparen": ("rparen", List),
    "lbracket": ("rbracket", Vector),
    "lbrace": ("rbrace", Map),
}
CLOSERS = {"rparen": ")", "rbracket": "]", "rbrace": "}"}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while True:
        pos = SKIP_RE.match(source, pos).end()
        if pos >= n:
            return
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise KappaSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        kind = m.lastgroup
        if kind == "unterminated":
            raise KappaSyntaxError("Unexpected end of string")
        yield kind, m.group(kind)
        pos = m.end()


def unescape(token: str) -> str:
    """Strip the quotes from a string token and resolve its escapes."""
    body = token[1:-1]
    out = []
    chars = iter(body)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars)
            if nxt not in ('"', "\\"):
                raise KappaSyntaxError('Escape sequences besides \\\\ and \\" are not supported')
            out.append(nxt)
        else:
            out.append(ch)
    return "".join(out)


def read_atom(token: str) -> SExpression:
    if token == "nil":
        return None
    if token == "true":
        return True
    if token == "false":
        return False
    if INT_RE.match(token):
        return int(token)
    if FLOAT_RE.match(token):
        return float(token)
    if token.startswith(":") and len(token) > 1:
        return Keyword(token[1:])
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise KappaSyntaxError("Unexpected end of input")

        if tok_type == "atom":
            return read_atom(tok_val)

        if tok_type == "string":
            return unescape(tok_val)

        # Comments become calls of the `comment` macro
        if tok_type == "comment":
            return List.of(COMMENT, tok_val[1:])

        if tok_type == "quote":
            return List.of(QUOTE, self.parse_expr())

        if tok_type in COLLECTIONS:
            closer, build = COLLECTIONS[tok_type]
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise KappaSyntaxError(f"Unmatched {tok_val!r}")
                if next_type == closer:
                    self.advance()
                    break
                items.append(self.parse_expr())
            return build(items)

        if tok_type in CLOSERS:
            raise KappaSyntaxError(f"Unexpected {tok_val!r}")

        raise KappaSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_all(source: str) -> Iterator[SExpression]:
    """Yield every top-level form in `source`."""
    return TokenStream(lex(source)).parse_all()


def read_program(source: str) -> SExpression:
    """Read `source` as one form, wrapping several top-level forms in `(do ...)`."""
    forms = list(read_all(source))
    if not forms:
        return None
    if len(forms) == 1:
        return forms[0]
    return List((DO, *forms))
